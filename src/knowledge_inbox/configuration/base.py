# src/knowledge_inbox/configuration/base.py
"""Protocol definitions for configuration objects.

Provider and storage configurations are frozen dataclasses that know how to
build their components. Any class with the right methods satisfies these
protocols without inheriting from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from knowledge_inbox.embedder import Embedder
    from knowledge_inbox.generator import AnswerGenerator
    from knowledge_inbox.settings import Settings
    from knowledge_inbox.stores import ContentStore, VectorIndex


@runtime_checkable
class ProviderConfig(Protocol):
    """Protocol for provider configurations.

    Provider configurations build the AI components:
    - Embedder: Creates vector embeddings (or a NoEmbedder for keyword mode)
    - AnswerGenerator: Synthesizes answers from retrieved context

    Example implementation:
        @dataclass(frozen=True)
        class LiteLLMProvider:
            llm: str | None
            embedding: str | None

            def build_embedder(self, settings: Settings) -> Embedder: ...
            def build_answer_generator(self, settings: Settings) -> AnswerGenerator | None: ...
    """

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build an embedder. Returns a NoEmbedder when embeddings are unavailable."""
        ...

    def build_answer_generator(self, settings: Settings) -> AnswerGenerator | None:
        """Build an answer generator, or None to run in raw retrieval mode."""
        ...


@runtime_checkable
class StorageConfig(Protocol):
    """Protocol for storage configurations.

    Storage configurations build the content store and the vector index.

    Example implementation:
        @dataclass(frozen=True)
        class LocalStorage:
            data_dir: str

            def build_stores(self, settings: Settings) -> tuple[ContentStore, VectorIndex]: ...
    """

    def build_stores(self, settings: Settings) -> tuple[ContentStore, VectorIndex]:
        """Build the storage components.

        Returns:
            Tuple of (content_store, vector_index)
        """
        ...
