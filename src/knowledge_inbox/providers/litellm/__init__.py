# src/knowledge_inbox/providers/litellm/__init__.py
"""LiteLLM provider clients for Knowledge Inbox.

This module contains LiteLLM-based client implementations:
- LiteLLMClient: LLM completion using LiteLLM
- LiteLLMEmbeddingClient: Embeddings using LiteLLM
- ChatModels: Curated chat model constants
- EmbeddingModels: Curated embedding model constants

Usage:
    from knowledge_inbox.providers.litellm import LiteLLMClient, ChatModels
    from knowledge_inbox.generator import ClientAnswerGenerator

    client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
    generator = ClientAnswerGenerator(llm_client=client)
"""

from knowledge_inbox.providers.litellm.client import LiteLLMClient, LiteLLMEmbeddingClient
from knowledge_inbox.providers.litellm.models import ChatModels, EmbeddingModels

__all__ = [
    # Model constants
    "ChatModels",
    "EmbeddingModels",
    # Clients
    "LiteLLMClient",
    "LiteLLMEmbeddingClient",
]
