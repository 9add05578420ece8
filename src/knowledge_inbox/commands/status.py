# src/knowledge_inbox/commands/status.py
"""Status command - show store statistics."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from knowledge_inbox.commands.base import StatusResult, open_inbox
from knowledge_inbox.config import ConfigError

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    inbox: Inbox | None = None,
) -> StatusResult:
    """Get item, chunk and vector counts.

    The vector index lives in memory, so a freshly opened inbox reports
    zero vectors until a query backfills it.
    """
    owns_inbox = inbox is None
    if inbox is None:
        opened = open_inbox(data_dir, config_path)
        if isinstance(opened, ConfigError):
            return StatusResult(success=False, error=opened.message)
        inbox = opened

    try:
        stats = inbox.stats()
    finally:
        if owns_inbox:
            inbox.close()

    return StatusResult(
        success=True,
        total_items=stats["items"],
        total_chunks=stats["chunks"],
        total_vectors=stats["vectors"],
        mode=stats["mode"],
        embedding_mode=stats["embedding_mode"],
    )
