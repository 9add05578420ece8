# src/knowledge_inbox/configuration/providers/litellm.py
"""LiteLLM provider configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from knowledge_inbox.embedder import Embedder
    from knowledge_inbox.generator import AnswerGenerator
    from knowledge_inbox.settings import Settings


@dataclass(frozen=True)
class LiteLLMProvider:
    """Provider configuration using LiteLLM for LLM and embedding calls.

    Either model may be omitted. Without an embedding model the inbox runs
    in keyword mode; without an LLM it returns sources with no answer.

    Args:
        llm: LiteLLM model identifier for answer synthesis.
             Examples: "openai/gpt-4o-mini", "anthropic/claude-haiku-4-5-20251001"
        embedding: LiteLLM model identifier for embeddings.
                   Examples: "openai/text-embedding-3-small", "ollama/nomic-embed-text"
        api_key: Optional API key shared by both models.
        api_base: Optional base URL for OpenAI-compatible endpoints.

    Example:
        provider = LiteLLMProvider(
            llm="openai/gpt-4o-mini",
            embedding="openai/text-embedding-3-small",
        )

        # Keyword-only, answers still synthesized
        provider = LiteLLMProvider(llm="openai/gpt-4o-mini")
    """

    llm: str | None = None
    embedding: str | None = None
    api_key: str | None = None
    api_base: str | None = None

    def build_embedder(self, settings: Settings) -> Embedder:
        """Build a ClientEmbedder, or a NoEmbedder when no embedding model is set.

        Args:
            settings: Settings containing num_retries for rate limit handling.
        """
        from knowledge_inbox.embedder import ClientEmbedder, NoEmbedder
        from knowledge_inbox.providers.litellm import LiteLLMEmbeddingClient

        if not self.embedding:
            return NoEmbedder()

        embedding_client = LiteLLMEmbeddingClient(
            model=self.embedding,
            num_retries=settings.num_retries,
            api_key=self.api_key,
            api_base=self.api_base,
        )
        return ClientEmbedder(embedding_client=embedding_client)

    def build_answer_generator(self, settings: Settings) -> AnswerGenerator | None:
        """Build a ClientAnswerGenerator using the LiteLLM client.

        Args:
            settings: Settings containing synthesis_temperature,
                      synthesis_max_tokens, and num_retries.
        """
        from knowledge_inbox.generator import ClientAnswerGenerator
        from knowledge_inbox.providers.litellm import LiteLLMClient

        if not self.llm:
            return None

        llm_client = LiteLLMClient(
            model=self.llm,
            num_retries=settings.num_retries,
            api_key=self.api_key,
            api_base=self.api_base,
        )
        return ClientAnswerGenerator(
            llm_client=llm_client,
            temperature=settings.synthesis_temperature,
            max_tokens=settings.synthesis_max_tokens,
        )
