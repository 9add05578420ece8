# tests/models/test_models.py
"""Tests for the data models."""

from datetime import timezone

from knowledge_inbox.models import (
    NO_RELEVANT_CONTENT_ANSWER,
    Chunk,
    Item,
    ItemType,
    QueryResponse,
    SourceView,
)


class TestItem:
    def test_defaults(self):
        item = Item(content="Hello")

        assert item.type == ItemType.TEXT
        assert item.metadata == {}
        assert item.id
        assert item.created_at.tzinfo == timezone.utc

    def test_unique_ids(self):
        assert Item(content="a").id != Item(content="a").id

    def test_item_type_values(self):
        assert ItemType("text") == ItemType.TEXT
        assert ItemType("url") == ItemType.URL


class TestChunk:
    def test_make_id(self):
        assert Chunk.make_id("abc", 2) == "abc_chunk_2"

    def test_embedding_ref_defaults_to_none(self):
        chunk = Chunk(id="abc_chunk_0", item_id="abc", content="x", chunk_index=0)
        assert chunk.embedding_ref is None


class TestQueryResponse:
    def test_no_relevant_content(self):
        response = QueryResponse.no_relevant_content("keyword")

        assert response.answer == NO_RELEVANT_CONTENT_ANSWER
        assert response.sources == []
        assert response.confidence == 0.0
        assert response.mode == "keyword"
        assert not response.has_context

    def test_camel_case_aliases(self):
        source = SourceView(
            index=1,
            content="Python",
            item_id="abc",
            item_type=ItemType.URL,
            score=0.5,
            metadata={"title": "Docs"},
        )

        dumped = source.model_dump(mode="json", by_alias=True)

        assert dumped == {
            "index": 1,
            "content": "Python",
            "itemId": "abc",
            "itemType": "url",
            "score": 0.5,
            "metadata": {"title": "Docs"},
        }
