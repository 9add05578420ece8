"""HTTP routes: health, ingestion, item browsing and queries."""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Request

from knowledge_inbox.exceptions import NotFoundError
from knowledge_inbox.inbox import Inbox
from knowledge_inbox.models import Item, ItemType
from knowledge_inbox.retriever import preview
from knowledge_inbox.server.schemas import IngestRequest, QueryRequest
from knowledge_inbox.validation import (
    validate_item_type,
    validate_metadata,
    validate_question,
    validate_text,
    validate_top_k,
    validate_url,
)

logger = logging.getLogger(__name__)

health_router = APIRouter(tags=["health"])
api_router = APIRouter(prefix="/api", tags=["inbox"])


def get_inbox(request: Request) -> Inbox:
    """Dependency returning the Inbox the app was created with."""
    return request.app.state.inbox


def _iso(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


@health_router.get("/health")
async def health(inbox: Inbox = Depends(get_inbox)) -> dict[str, Any]:
    stats = inbox.stats()
    return {
        "status": "healthy",
        "timestamp": _iso(datetime.now(timezone.utc)),
        "vectorStoreSize": stats["vectors"],
        "mode": stats["mode"],
        "config": {
            "embeddingModel": stats["embedding_model"],
            "llmModel": stats["llm_model"],
            "topK": stats["default_k"],
        },
    }


@api_router.post("/ingest", status_code=201)
async def ingest(body: IngestRequest, inbox: Inbox = Depends(get_inbox)) -> dict[str, Any]:
    item_type = validate_item_type(body.type)
    metadata = validate_metadata(body.metadata)

    if item_type == ItemType.URL:
        url = validate_url(body.url)
        summary = await inbox.ingest_url(url, metadata)
        return {
            "success": True,
            "itemId": summary.item_id,
            "type": summary.item_type.value,
            "url": url,
            "message": "URL content ingested successfully",
        }

    content = validate_text(body.content, inbox.settings)
    summary = await inbox.ingest_text(content, metadata)
    return {
        "success": True,
        "itemId": summary.item_id,
        "type": summary.item_type.value,
        "message": "Text content ingested successfully",
    }


def _item_summary(item: Item) -> dict[str, Any]:
    return {
        "id": item.id,
        "type": item.type.value,
        "preview": preview(item.content),
        "metadata": item.metadata,
        "createdAt": _iso(item.created_at),
    }


@api_router.get("/items")
async def list_items(inbox: Inbox = Depends(get_inbox)) -> dict[str, Any]:
    items = inbox.list_items()
    return {
        "success": True,
        "count": len(items),
        "items": [_item_summary(item) for item in items],
    }


@api_router.get("/items/{item_id}")
async def get_item(item_id: str, inbox: Inbox = Depends(get_inbox)) -> dict[str, Any]:
    item = inbox.get_item(item_id)
    if item is None:
        raise NotFoundError(f"Item not found: {item_id}")
    return {
        "success": True,
        "item": {
            "id": item.id,
            "type": item.type.value,
            "content": item.content,
            "metadata": item.metadata,
            "createdAt": _iso(item.created_at),
        },
    }


@api_router.post("/query")
async def query(body: QueryRequest, inbox: Inbox = Depends(get_inbox)) -> dict[str, Any]:
    question = validate_question(body.question, inbox.settings)
    top_k = validate_top_k(body.topK, inbox.settings)

    response = await inbox.query(question, k=top_k)
    logger.info(
        "Answered query with %d sources (mode=%s, confidence=%.2f)",
        len(response.sources),
        response.mode,
        response.confidence,
    )
    return {
        "success": True,
        "question": question,
        "answer": response.answer,
        "sources": [source.model_dump(mode="json", by_alias=True) for source in response.sources],
        "confidence": response.confidence,
        "mode": response.mode,
    }
