# src/knowledge_inbox/stores/exact_index.py
"""Brute-force in-memory vector index."""

import numpy as np

from knowledge_inbox.models import VectorMatch
from knowledge_inbox.stores.base import VectorIndex


class ExactVectorIndex(VectorIndex):
    """Exact cosine search over every stored vector.

    Vectors are kept in memory and compared to the query one by one.
    The index is volatile and rebuilt by re-embedding stored chunks.
    """

    def __init__(self, dimensions: int = 1536) -> None:
        """Initialize an empty index.

        Args:
            dimensions: Required length of every vector.
        """
        super().__init__(dimensions)
        self._chunk_ids: list[str] = []
        self._vectors: list[np.ndarray] = []
        self._embedded: set[str] = set()

    def add_embedding(self, chunk_id: str, vector: list[float]) -> int:
        """Append a vector. IDs are positions in insertion order."""
        self._check_dimensions(vector)
        array = np.asarray(vector, dtype=np.float64)
        with self._lock:
            embedding_id = len(self._chunk_ids)
            self._chunk_ids.append(chunk_id)
            self._vectors.append(array)
            self._embedded.add(chunk_id)
        return embedding_id

    def has_embedding(self, chunk_id: str) -> bool:
        return chunk_id in self._embedded

    def search(self, vector: list[float], k: int = 5) -> list[VectorMatch]:
        """Score every vector against the query and keep the best k."""
        with self._lock:
            chunk_ids = list(self._chunk_ids)
            vectors = list(self._vectors)

        if not vectors:
            return []
        self._check_dimensions(vector)
        if k <= 0:
            return []

        similarities = _cosine_similarities(np.asarray(vector, dtype=np.float64), np.vstack(vectors))

        # Stable sort keeps insertion order among equal scores
        order = np.argsort(-similarities, kind="stable")[:k]
        return [
            VectorMatch(
                chunk_id=chunk_ids[i],
                similarity=float(similarities[i]),
                distance=1.0 - float(similarities[i]),
                embedding_id=int(i),
            )
            for i in order
        ]

    def get_size(self) -> int:
        return len(self._chunk_ids)

    def clear(self) -> None:
        with self._lock:
            self._chunk_ids = []
            self._vectors = []
            self._embedded = set()


def _cosine_similarities(query: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Cosine similarity of query against each row. Zero vectors score 0."""
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
    dots = matrix @ query
    return np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)
