# src/knowledge_inbox/settings.py
"""Configuration management for Knowledge Inbox.

This module contains behavioral settings that apply regardless of which
LLM provider or storage backend is used. Settings are passed
programmatically - the library does not read from environment variables.

For applications that want env-based config, read env vars at the
application layer (see knowledge_inbox.config) and pass values explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# Chunking profile definitions
# - "memory_safe": one capped chunk per item, no overlap
# - "quality": multi-chunk windows with overlap
CHUNKING_PROFILES: dict[str, dict[str, Any]] = {
    "memory_safe": {
        "chunk_overlap": 0,
        "max_content_length": 500,
        "max_chunks_per_item": 1,
    },
    "quality": {
        "chunk_overlap": 100,
        "max_content_length": None,
        "max_chunks_per_item": None,
    },
}

EmbeddingMode = Literal["eager", "lazy"]


class Settings(BaseModel):
    """Behavioral settings for Knowledge Inbox.

    Example:
        settings = Settings(default_k=3, embedding_mode="eager")

        # Or start from a chunking profile
        settings = Settings.with_profile("memory_safe")
    """

    # Chunking (sizes are in tokens, approximated as chars_per_token characters)
    chunk_size: int = Field(default=500, ge=1)
    chunk_overlap: int = Field(default=100, ge=0)
    chars_per_token: int = Field(default=4, ge=1)

    # Resource budgets applied at ingest time (None = unlimited)
    max_content_length: int | None = Field(default=None, ge=1)
    max_chunks_per_item: int | None = Field(default=None, ge=1)

    # Embedding lifecycle
    embedding_mode: EmbeddingMode = "lazy"
    embedding_dimensions: int = Field(default=1536, ge=1)

    # Retrieval and answer synthesis
    default_k: int = Field(default=5, ge=1)
    system_prompt: str | None = None
    synthesis_temperature: float | None = 0.7
    synthesis_max_tokens: int | None = 500
    keyword_confidence_scale: float = Field(default=10.0, gt=0)

    # Boundary validation limits
    max_text_length: int = Field(default=500, ge=1)
    max_question_length: int = Field(default=1000, ge=1)
    max_top_k: int = Field(default=20, ge=1)

    # URL fetching budgets
    max_fetch_bytes: int = Field(default=2_000_000, ge=1)
    fetch_timeout: float = Field(default=10.0, gt=0)

    # Provider-level retries handed to LiteLLM (the pipeline itself never retries)
    num_retries: int = Field(default=0, ge=0)

    @classmethod
    def with_profile(
        cls,
        profile: Literal["memory_safe", "quality"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a chunking profile.

        Args:
            profile: The chunking profile to use.
            **overrides: Additional settings to override profile defaults.

        Returns:
            Settings instance with profile values applied.

        Example:
            settings = Settings.with_profile("memory_safe", default_k=3)
        """
        if profile not in CHUNKING_PROFILES:
            raise ValueError(
                f"Unknown profile '{profile}'. "
                f"Available profiles: {list(CHUNKING_PROFILES.keys())}"
            )

        profile_settings: dict[str, Any] = CHUNKING_PROFILES[profile].copy()
        profile_settings.update(overrides)
        return cls(**profile_settings)

    @property
    def window_chars(self) -> int:
        """Chunk window size in characters."""
        return self.chunk_size * self.chars_per_token
