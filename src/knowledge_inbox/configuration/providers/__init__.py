# src/knowledge_inbox/configuration/providers/__init__.py
"""Provider configurations for Knowledge Inbox."""

from knowledge_inbox.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
