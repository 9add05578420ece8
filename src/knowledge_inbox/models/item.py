"""Item data model."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class ItemType(str, Enum):
    """Kind of content an item was ingested from."""

    TEXT = "text"
    URL = "url"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Item(BaseModel):
    """A single ingested unit of saved content (a note or a fetched page)."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    type: ItemType = ItemType.TEXT
    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=_utcnow)
