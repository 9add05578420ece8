# src/knowledge_inbox/commands/items.py
"""List and show commands - browse saved items."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from knowledge_inbox.commands.base import ItemInfo, ListResult, ShowResult, open_inbox
from knowledge_inbox.config import ConfigError
from knowledge_inbox.retriever import preview

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox
    from knowledge_inbox.models import Item


def item_info(item: Item, full: bool = False) -> ItemInfo:
    return ItemInfo(
        id=item.id,
        type=item.type.value,
        preview=preview(item.content),
        created_at=item.created_at.isoformat(),
        metadata=dict(item.metadata),
        content=item.content if full else None,
    )


def list_items(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    inbox: Inbox | None = None,
) -> ListResult:
    """List saved items, newest first."""
    owns_inbox = inbox is None
    if inbox is None:
        opened = open_inbox(data_dir, config_path)
        if isinstance(opened, ConfigError):
            return ListResult(success=False, error=opened.message)
        inbox = opened

    try:
        items = inbox.list_items()
    finally:
        if owns_inbox:
            inbox.close()

    return ListResult(success=True, items=[item_info(item) for item in items])


def show_item(
    item_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    inbox: Inbox | None = None,
) -> ShowResult:
    """Show one item with its full content."""
    owns_inbox = inbox is None
    if inbox is None:
        opened = open_inbox(data_dir, config_path)
        if isinstance(opened, ConfigError):
            return ShowResult(success=False, error=opened.message)
        inbox = opened

    try:
        item = inbox.get_item(item_id)
    finally:
        if owns_inbox:
            inbox.close()

    if item is None:
        return ShowResult(success=False, error=f"Item not found: {item_id}")
    return ShowResult(success=True, item=item_info(item, full=True))
