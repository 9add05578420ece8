"""Knowledge Inbox - retrieval-augmented answers over saved notes and web pages.

Quick Start (LiteLLM + Local Storage):
    import asyncio

    from knowledge_inbox import Inbox, LiteLLMProvider, LocalStorage

    inbox = Inbox(
        provider=LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        ),
        storage=LocalStorage("./inbox_data"),
    )

    asyncio.run(inbox.ingest_text("Python is a programming language"))
    response = asyncio.run(inbox.query("What is Python?"))

Keyword mode (no embedding provider):
    inbox = Inbox(provider=LiteLLMProvider(llm="openai/gpt-4o-mini"), storage=MemoryStorage())
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("knowledge-inbox")
except PackageNotFoundError:
    __version__ = "unknown"

# Chunking
from knowledge_inbox.chunking import Chunker, WindowChunker

# Configuration objects
from knowledge_inbox.configuration import (
    LiteLLMProvider,
    LocalStorage,
    MemoryStorage,
    ProviderConfig,
    StorageConfig,
)

# Embedding and answer synthesis
from knowledge_inbox.embedder import ClientEmbedder, Embedder, NoEmbedder

# Errors
from knowledge_inbox.exceptions import (
    DimensionMismatch,
    FetchError,
    InboxError,
    NotFoundError,
    ProviderError,
    ValidationError,
)
from knowledge_inbox.generator import AnswerGenerator, ClientAnswerGenerator

# Central configuration
from knowledge_inbox.inbox import Inbox

# Pipelines
from knowledge_inbox.ingestor import Ingestor
from knowledge_inbox.models import (
    Chunk,
    ChunkRecord,
    IngestSummary,
    Item,
    ItemType,
    QueryResponse,
    ScoredChunk,
    SourceView,
)

# Provider ABCs
from knowledge_inbox.providers import EmbeddingClient, LLMClient
from knowledge_inbox.retriever import Retriever
from knowledge_inbox.settings import Settings

# Storage
from knowledge_inbox.stores import (
    ChromaVectorIndex,
    ContentStore,
    ExactVectorIndex,
    InMemoryContentStore,
    SQLiteContentStore,
    VectorIndex,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "Item",
    "ItemType",
    "Chunk",
    "ChunkRecord",
    "ScoredChunk",
    "SourceView",
    "QueryResponse",
    "IngestSummary",
    # Config
    "Settings",
    "ProviderConfig",
    "StorageConfig",
    "LiteLLMProvider",
    "LocalStorage",
    "MemoryStorage",
    # Errors
    "InboxError",
    "ValidationError",
    "DimensionMismatch",
    "ProviderError",
    "NotFoundError",
    "FetchError",
    # Storage
    "ContentStore",
    "VectorIndex",
    "SQLiteContentStore",
    "InMemoryContentStore",
    "ExactVectorIndex",
    "ChromaVectorIndex",
    # Chunking
    "Chunker",
    "WindowChunker",
    # Embedding and synthesis
    "Embedder",
    "ClientEmbedder",
    "NoEmbedder",
    "AnswerGenerator",
    "ClientAnswerGenerator",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipelines
    "Ingestor",
    "Retriever",
    # Central configuration
    "Inbox",
]
