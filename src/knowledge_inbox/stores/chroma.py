# src/knowledge_inbox/stores/chroma.py
"""ChromaDB approximate vector index implementation."""

from uuid import uuid4

import chromadb

from knowledge_inbox.models import VectorMatch
from knowledge_inbox.stores.base import VectorIndex


class ChromaVectorIndex(VectorIndex):
    """Approximate (HNSW) index backed by an in-memory ChromaDB collection.

    Embedding IDs are kept as sequential integers and stored as Chroma
    string ids; the owning chunk id lives in the entry metadata. Nothing
    is written to disk.
    """

    def __init__(self, dimensions: int = 1536, collection_name: str | None = None) -> None:
        """Initialize the ChromaDB index."""
        super().__init__(dimensions)
        # Ephemeral clients share one in-process system, so names must be unique
        self._collection_name = collection_name or f"inbox-{uuid4().hex}"
        self._client = chromadb.EphemeralClient()
        self._collection = self._create_collection()
        self._next_id = 0

    def _create_collection(self):  # type: ignore[no-untyped-def]
        return self._client.get_or_create_collection(
            name=self._collection_name,
            metadata={"hnsw:space": "cosine"},
        )

    def add_embedding(self, chunk_id: str, vector: list[float]) -> int:
        self._check_dimensions(vector)
        with self._lock:
            embedding_id = self._next_id
            self._collection.add(
                ids=[str(embedding_id)],
                embeddings=[vector],  # type: ignore[arg-type]
                metadatas=[{"chunk_id": chunk_id}],
            )
            self._next_id += 1
        return embedding_id

    def has_embedding(self, chunk_id: str) -> bool:
        results = self._collection.get(where={"chunk_id": chunk_id}, limit=1, include=[])
        return bool(results["ids"])

    def search(self, vector: list[float], k: int = 5) -> list[VectorMatch]:
        """Search for the nearest chunks."""
        count = self._collection.count()
        if count == 0:
            return []
        self._check_dimensions(vector)
        if k <= 0:
            return []

        results = self._collection.query(
            query_embeddings=[vector],  # type: ignore[arg-type]
            n_results=min(k, count),
            include=["metadatas", "distances"],
        )

        ids = results["ids"][0]
        metadatas = results["metadatas"][0]  # type: ignore[index]
        distances = results["distances"][0]  # type: ignore[index]

        matches = [
            VectorMatch(
                chunk_id=str(meta["chunk_id"]),
                # Cosine distance: similarity = 1 - distance
                similarity=1.0 - dist,
                distance=dist,
                embedding_id=int(eid),
            )
            for eid, meta, dist in zip(ids, metadatas, distances, strict=True)
        ]
        matches.sort(key=lambda m: (-m.similarity, m.embedding_id))
        return matches

    def get_size(self) -> int:
        return self._collection.count()

    def clear(self) -> None:
        with self._lock:
            self._client.delete_collection(self._collection_name)
            self._collection = self._create_collection()
            self._next_id = 0

    def close(self) -> None:
        """Drop the collection from the shared in-process client."""
        self._client.delete_collection(self._collection_name)
