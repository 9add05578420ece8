# src/knowledge_inbox/commands/__init__.py
"""UI-agnostic command layer for Knowledge Inbox.

Command functions return data structures so that each UI can render the
results its own way. Commands never raise for expected failures; check
``result.success`` and ``result.error``.

Usage:
    from knowledge_inbox.commands import ingest, query, status

    result = ingest.add("Python is a programming language")
    result = query.query("What is Python?")
    result = status.status()
"""

from knowledge_inbox.commands import config_cmd, ingest, items, query, status
from knowledge_inbox.commands.base import (
    AddResult,
    CommandResult,
    CommandStage,
    ConfigResult,
    ItemInfo,
    ListResult,
    ProgressCallback,
    ProgressUpdate,
    QueryResult,
    SettingInfo,
    ShowResult,
    SourceResult,
    StatusResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "AddResult",
    "QueryResult",
    "SourceResult",
    "ItemInfo",
    "ListResult",
    "ShowResult",
    "StatusResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "ingest",
    "query",
    "items",
    "status",
    "config_cmd",
]
