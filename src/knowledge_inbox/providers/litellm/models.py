# src/knowledge_inbox/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

Any valid LiteLLM model string can be passed instead.

Example:
    from knowledge_inbox.providers.litellm import ChatModels, LiteLLMClient

    llm_client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
"""


class ChatModels:
    """Chat/completion models for answer synthesis (via LiteLLMClient)."""

    # OpenAI
    GPT_4O_MINI = "openai/gpt-4o-mini"
    GPT_4O = "openai/gpt-4o"
    GPT_5_MINI = "openai/gpt-5-mini"

    # Anthropic
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"
    CLAUDE_SONNET_45 = "anthropic/claude-sonnet-4-5-20250929"

    # Google Gemini
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"

    # Local
    OLLAMA_LLAMA_32 = "ollama/llama3.2"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # OpenAI (1536 dimensions for text-embedding-3-small and ada-002)
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"
    ADA_002 = "openai/text-embedding-ada-002"

    # Google Gemini
    GEMINI_004 = "gemini/text-embedding-004"

    # Local
    OLLAMA_NOMIC = "ollama/nomic-embed-text"
