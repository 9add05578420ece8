# src/knowledge_inbox/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from knowledge_inbox.inbox import Inbox

from knowledge_inbox.config import ConfigError, create_inbox, get_inbox_config


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    FETCHING = "Fetching"
    STORING = "Storing"
    CHUNKING = "Chunking"
    EMBEDDING = "Embedding"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number (1-indexed)
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class AddResult(CommandResult):
    """Result of the add command.

    Attributes:
        item_id: ID of the saved item
        item_type: "text" or "url"
        url: Source URL for url items
        chunks: Chunks created
        embedded: Chunks embedded at ingest time
        failed: Chunks whose eager embedding failed
        truncated: Whether the content was capped
    """

    item_id: str = ""
    item_type: str = "text"
    url: str | None = None
    chunks: int = 0
    embedded: int = 0
    failed: int = 0
    truncated: bool = False


@dataclass
class SourceResult:
    """A single cited source."""

    index: int
    content: str
    item_id: str
    item_type: str
    score: float
    title: str | None = None
    url: str | None = None


@dataclass
class QueryResult(CommandResult):
    """Result of the query command.

    Attributes:
        question: The original question
        answer: Synthesized answer (None in raw mode)
        sources: Cited sources in rank order
        confidence: Heuristic confidence in [0, 1]
        mode: "vector" or "keyword"
    """

    question: str = ""
    answer: str | None = None
    sources: list[SourceResult] = field(default_factory=list)
    confidence: float = 0.0
    mode: str = "keyword"


@dataclass
class ItemInfo:
    """Summary of a saved item."""

    id: str
    type: str
    preview: str
    created_at: str
    metadata: dict[str, Any] = field(default_factory=dict)
    content: str | None = None

    @property
    def title(self) -> str | None:
        return self.metadata.get("title")


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    items: list[ItemInfo] = field(default_factory=list)


@dataclass
class ShowResult(CommandResult):
    """Result of the show command."""

    item: ItemInfo | None = None


@dataclass
class StatusResult(CommandResult):
    """Result of the status command.

    Attributes:
        total_items: Items in the content store
        total_chunks: Chunks in the content store
        total_vectors: Entries in the vector index
        mode: Retrieval mode
        embedding_mode: "eager" or "lazy"
    """

    total_items: int = 0
    total_chunks: int = 0
    total_vectors: int = 0
    mode: str = "keyword"
    embedding_mode: str = "lazy"


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command."""

    llm_model: str | None = None
    embedding_model: str | None = None
    data_dir: str = ""
    storage: str = "local"
    vector_index: str = "exact"
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None


def open_inbox(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Inbox | ConfigError:
    """Build an Inbox from configuration, reporting failures as ConfigError."""
    inbox_config = get_inbox_config(data_dir, config_path)
    if isinstance(inbox_config, ConfigError):
        return inbox_config
    try:
        return create_inbox(inbox_config)
    except (OSError, ValueError) as e:
        return ConfigError(message=f"Failed to open inbox: {e}")
