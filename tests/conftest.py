"""Shared pytest fixtures."""

import re
import tempfile
import zlib
from dataclasses import dataclass, field
from typing import Any

import pytest

from knowledge_inbox.embedder import Embedder, NoEmbedder
from knowledge_inbox.exceptions import ProviderError
from knowledge_inbox.generator import AnswerGenerator, ClientAnswerGenerator
from knowledge_inbox.models import ChunkRecord, ItemType
from knowledge_inbox.providers import LLMClient

DIMS = 32

FAKE_ANSWER = "Python is a programming language [1]."


class HashEmbedder(Embedder):
    """Deterministic bag-of-words embedder.

    Each word is hashed into one of ``dimensions`` buckets, so texts that
    share words point in similar directions. Texts containing
    ``fail_marker`` raise ProviderError.
    """

    def __init__(self, dimensions: int = DIMS, fail_marker: str | None = None) -> None:
        self.dimensions = dimensions
        self.fail_marker = fail_marker
        self.calls: list[str] = []

    def embed_text(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_marker and self.fail_marker in text:
            raise ProviderError("embedding backend unavailable")
        vector = [0.0] * self.dimensions
        for word in re.findall(r"[a-z0-9]+", text.lower()):
            vector[zlib.crc32(word.encode()) % self.dimensions] += 1.0
        return vector

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_text(text) for text in texts]


class FakeLLMClient(LLMClient):
    """LLM client that records calls and returns a fixed answer."""

    def __init__(self, answer: str = FAKE_ANSWER, fail: bool = False) -> None:
        self.answer = answer
        self.fail = fail
        self.calls: list[dict[str, Any]] = []

    def complete(self, messages, temperature=None, max_tokens=None) -> str:
        self.calls.append(
            {"messages": messages, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.fail:
            raise ProviderError("LLM backend unavailable")
        return self.answer


@dataclass(frozen=True)
class FakeProvider:
    """Provider config handing out prebuilt components."""

    embedder: Embedder = field(default_factory=NoEmbedder)
    answer_generator: AnswerGenerator | None = None
    llm: str | None = "fake/llm"
    embedding: str | None = None

    def build_embedder(self, settings: Any) -> Embedder:
        return self.embedder

    def build_answer_generator(self, settings: Any) -> AnswerGenerator | None:
        return self.answer_generator


def make_record(
    chunk_id: str,
    content: str,
    item_id: str = "item-1",
    item_type: ItemType = ItemType.TEXT,
    chunk_index: int = 0,
    metadata: dict[str, Any] | None = None,
) -> ChunkRecord:
    return ChunkRecord(
        id=chunk_id,
        item_id=item_id,
        content=content,
        chunk_index=chunk_index,
        item_type=item_type,
        item_metadata=metadata or {},
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def embedder():
    return HashEmbedder()


@pytest.fixture
def llm_client():
    return FakeLLMClient()


@pytest.fixture
def answer_generator(llm_client):
    return ClientAnswerGenerator(llm_client=llm_client)


@pytest.fixture
def settings():
    from knowledge_inbox.settings import Settings

    return Settings(embedding_dimensions=DIMS)


@pytest.fixture
def keyword_inbox(answer_generator, settings):
    """Inbox without an embedding provider, kept entirely in memory."""
    from knowledge_inbox.configuration import MemoryStorage
    from knowledge_inbox.inbox import Inbox

    inbox = Inbox(
        provider=FakeProvider(answer_generator=answer_generator),
        storage=MemoryStorage(),
        settings=settings,
    )
    yield inbox
    inbox.close()


@pytest.fixture
def vector_inbox(embedder, answer_generator, settings):
    """Inbox with the hashing embedder and an exact in-memory index."""
    from knowledge_inbox.configuration import MemoryStorage
    from knowledge_inbox.inbox import Inbox

    inbox = Inbox(
        provider=FakeProvider(
            embedder=embedder,
            answer_generator=answer_generator,
            embedding="fake/embedding",
        ),
        storage=MemoryStorage(),
        settings=settings,
    )
    yield inbox
    inbox.close()


@pytest.fixture
def config_file(temp_dir, monkeypatch):
    """Write an inbox.yaml running in keyword mode with no LLM.

    INBOX_* variables are cleared so the file is the only source.
    """
    import os

    for key in list(os.environ):
        if key.startswith("INBOX_"):
            monkeypatch.delenv(key)

    path = os.path.join(temp_dir, "inbox.yaml")
    data_dir = os.path.join(temp_dir, "data")
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"llm_model: null\ndata_dir: {data_dir}\n")
    return path
