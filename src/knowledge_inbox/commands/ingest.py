# src/knowledge_inbox/commands/ingest.py
"""Add command - save a note or a web page.

This module provides the core ingest logic that the CLI calls.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from knowledge_inbox.commands.base import (
    AddResult,
    CommandStage,
    ProgressCallback,
    ProgressUpdate,
    open_inbox,
)
from knowledge_inbox.config import ConfigError
from knowledge_inbox.exceptions import InboxError
from knowledge_inbox.validation import validate_metadata, validate_text, validate_url

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox

logger = logging.getLogger(__name__)

_STAGES = {
    "storing": CommandStage.STORING,
    "chunking": CommandStage.CHUNKING,
    "embedding": CommandStage.EMBEDDING,
}


def add(
    content: str | None = None,
    url: str | None = None,
    metadata: dict[str, Any] | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
    inbox: Inbox | None = None,
) -> AddResult:
    """Save a text note, or the page at url.

    Args:
        content: Note text (ignored when url is given)
        url: Web page to fetch and save
        metadata: Extra metadata stored with the item
        data_dir: Override data directory
        config_path: Override config file path
        on_progress: Optional progress callback
        inbox: Existing Inbox to use instead of building one from config

    Returns:
        AddResult with item ID and chunk statistics
    """
    item_type = "url" if url is not None else "text"
    owns_inbox = inbox is None
    if inbox is None:
        opened = open_inbox(data_dir, config_path)
        if isinstance(opened, ConfigError):
            return AddResult(success=False, item_type=item_type, error=opened.message)
        inbox = opened

    def progress_adapter(event: str, current: int, total: int, message: str) -> None:
        if on_progress is not None:
            on_progress(ProgressUpdate(_STAGES[event], current, total, message))

    try:
        meta = validate_metadata(metadata)
        if url is not None:
            target = validate_url(url)
            if on_progress is not None:
                on_progress(ProgressUpdate(CommandStage.FETCHING, 0, 0, f"Fetching {target}"))
            summary = asyncio.run(
                inbox.ingest_url(target, meta, on_progress=progress_adapter)
            )
        else:
            text = validate_text(content, inbox.settings)
            summary = asyncio.run(
                inbox.ingest_text(text, meta, on_progress=progress_adapter)
            )
    except InboxError as e:
        return AddResult(success=False, item_type=item_type, url=url, error=str(e))
    finally:
        if owns_inbox:
            inbox.close()

    if on_progress is not None:
        on_progress(ProgressUpdate(CommandStage.COMPLETE, 1, 1, "Saved"))

    return AddResult(
        success=True,
        item_id=summary.item_id,
        item_type=summary.item_type.value,
        url=url,
        chunks=summary.chunks,
        embedded=summary.embedded,
        failed=summary.failed,
        truncated=summary.truncated,
    )
