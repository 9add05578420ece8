# src/knowledge_inbox/providers/__init__.py
"""Provider implementations for Knowledge Inbox.

This module contains LLM and embedding provider abstractions:
- LLMClient: Abstract base class for LLM completion providers
- EmbeddingClient: Abstract base class for embedding providers
- LiteLLM implementations

Usage:
    from knowledge_inbox.providers import LLMClient, EmbeddingClient
    from knowledge_inbox.providers.litellm import LiteLLMClient, ChatModels
"""

from knowledge_inbox.providers.base import EmbeddingClient, LLMClient
from knowledge_inbox.providers.litellm import (
    ChatModels,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
)

__all__ = [
    # ABCs
    "LLMClient",
    "EmbeddingClient",
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # LiteLLM clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
