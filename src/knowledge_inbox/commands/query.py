# src/knowledge_inbox/commands/query.py
"""Query command - ask a question about saved content.

This module provides the core query logic that the CLI calls.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from knowledge_inbox.commands.base import QueryResult, SourceResult, open_inbox
from knowledge_inbox.config import ConfigError
from knowledge_inbox.exceptions import InboxError
from knowledge_inbox.validation import validate_question, validate_top_k

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox


def query(
    question: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    k: int | None = None,
    raw: bool = False,
    inbox: Inbox | None = None,
) -> QueryResult:
    """Answer a question from saved content.

    Args:
        question: The question to ask
        data_dir: Override data directory
        config_path: Override config file path
        k: Number of sources to retrieve (None for default)
        raw: If True, return sources without LLM synthesis
        inbox: Existing Inbox to use instead of building one from config

    Returns:
        QueryResult with answer and sources
    """
    owns_inbox = inbox is None
    if inbox is None:
        opened = open_inbox(data_dir, config_path)
        if isinstance(opened, ConfigError):
            return QueryResult(success=False, question=question, error=opened.message)
        inbox = opened

    try:
        validate_question(question, inbox.settings)
        top_k = validate_top_k(k, inbox.settings)
        response = asyncio.run(inbox.query(question, top_k, synthesize=not raw))
    except InboxError as e:
        return QueryResult(success=False, question=question, error=f"Query failed: {e}")
    finally:
        if owns_inbox:
            inbox.close()

    sources = [
        SourceResult(
            index=source.index,
            content=source.content,
            item_id=source.item_id,
            item_type=source.item_type.value,
            score=source.score,
            title=source.metadata.get("title"),
            url=source.metadata.get("url"),
        )
        for source in response.sources
    ]

    return QueryResult(
        success=True,
        question=question,
        answer=response.answer,
        sources=sources,
        confidence=response.confidence,
        mode=response.mode,
    )
