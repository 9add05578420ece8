"""Result data models for Knowledge Inbox ingestion and queries."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from knowledge_inbox.models.chunk import ChunkRecord
from knowledge_inbox.models.item import ItemType

RetrievalMode = Literal["vector", "keyword"]

NO_RELEVANT_CONTENT_ANSWER = (
    "I don't have any relevant information to answer that question. "
    "Please add some content first or try different keywords."
)

SOURCE_PREVIEW_CHARS = 200


class VectorMatch(BaseModel):
    """A single nearest-neighbour hit from a vector index."""

    chunk_id: str
    similarity: float
    distance: float
    embedding_id: int


class ScoredChunk(BaseModel):
    """A stored chunk with the score it was retrieved with."""

    chunk: ChunkRecord
    score: float


class SourceView(BaseModel):
    """A cited source as shown to the caller."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index: int
    content: str
    item_id: str
    item_type: ItemType
    score: float
    metadata: dict[str, Any] = Field(default_factory=dict)


class QueryResponse(BaseModel):
    """Full response to a question."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    answer: str | None
    sources: list[SourceView] = Field(default_factory=list)
    confidence: float = 0.0
    mode: RetrievalMode

    @classmethod
    def no_relevant_content(cls, mode: RetrievalMode) -> "QueryResponse":
        """The fixed response returned when nothing relevant was retrieved."""
        return cls(answer=NO_RELEVANT_CONTENT_ANSWER, sources=[], confidence=0.0, mode=mode)

    @property
    def has_context(self) -> bool:
        return bool(self.sources)


class IngestSummary(BaseModel):
    """Statistics for one ingested item."""

    item_id: str
    item_type: ItemType
    chunks: int = 0
    embedded: int = 0
    failed: int = 0
    truncated: bool = False
