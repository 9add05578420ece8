# src/knowledge_inbox/providers/litellm/client.py
"""LiteLLM client implementations for LLM and embedding APIs."""

import logging
from typing import Any

import litellm

from knowledge_inbox.exceptions import ProviderError
from knowledge_inbox.providers.base import EmbeddingClient, LLMClient
from knowledge_inbox.providers.litellm.models import ChatModels, EmbeddingModels

logger = logging.getLogger(__name__)


class LiteLLMClient(LLMClient):
    """LiteLLM-based LLM client for answer synthesis.

    Supports any model available through LiteLLM (OpenAI, Anthropic, Gemini,
    Ollama, etc.). Backend failures are raised as ProviderError.

    Example:
        from knowledge_inbox.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GPT_4O_MINI)
        response = client.complete([{"role": "user", "content": "Hello"}])
    """

    def __init__(
        self,
        model: str = ChatModels.GPT_4O_MINI,
        num_retries: int = 0,
        api_key: str | None = None,
        api_base: str | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
            num_retries: Retries LiteLLM performs on rate limit errors. Default: 0.
            api_key: Optional API key. LiteLLM reads provider env vars when None.
            api_base: Optional base URL for OpenAI-compatible endpoints.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key
        self.api_base = api_base

    def _completion_kwargs(
        self,
        messages: list[dict],
        temperature: float | None,
        max_tokens: int | None,
    ) -> dict[str, Any]:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if max_tokens is not None:
            completion_kwargs["max_tokens"] = max_tokens
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key
        if self.api_base:
            completion_kwargs["api_base"] = self.api_base
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ProviderError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ProviderError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        try:
            response = litellm.completion(
                **self._completion_kwargs(messages, temperature, max_tokens)
            )
        except Exception as exc:
            raise ProviderError(f"Completion failed for model {self.model}: {exc}") from exc
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        try:
            response = await litellm.acompletion(
                **self._completion_kwargs(messages, temperature, max_tokens)
            )
        except Exception as exc:
            raise ProviderError(f"Completion failed for model {self.model}: {exc}") from exc
        return self._extract_content(response)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Example:
        from knowledge_inbox.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.TEXT_3_SMALL)
        embeddings = client.embed(["Hello world", "How are you?"])
    """

    def __init__(
        self,
        model: str = EmbeddingModels.TEXT_3_SMALL,
        num_retries: int = 0,
        api_key: str | None = None,
        api_base: str | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
            num_retries: Retries LiteLLM performs on rate limit errors. Default: 0.
            api_key: Optional API key. LiteLLM reads provider env vars when None.
            api_base: Optional base URL for OpenAI-compatible endpoints.
        """
        self.model = model
        self.num_retries = num_retries
        self.api_key = api_key
        self.api_base = api_base

    def _embedding_kwargs(self, texts: list[str]) -> dict[str, Any]:
        embedding_kwargs: dict[str, Any] = {
            "model": self.model,
            "input": texts,
            "num_retries": self.num_retries,
        }
        if self.api_key:
            embedding_kwargs["api_key"] = self.api_key
        if self.api_base:
            embedding_kwargs["api_base"] = self.api_base
        return embedding_kwargs

    @staticmethod
    def _extract_vectors(response: Any) -> list[list[float]]:
        # Sort by index to maintain order
        sorted_data = sorted(response.data, key=lambda x: x["index"])
        return [item["embedding"] for item in sorted_data]

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM."""
        if not texts:
            return []
        try:
            response = litellm.embedding(**self._embedding_kwargs(texts))
        except Exception as exc:
            raise ProviderError(f"Embedding failed for model {self.model}: {exc}") from exc
        return self._extract_vectors(response)

    async def aembed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings using LiteLLM (async)."""
        if not texts:
            return []
        try:
            response = await litellm.aembedding(**self._embedding_kwargs(texts))
        except Exception as exc:
            raise ProviderError(f"Embedding failed for model {self.model}: {exc}") from exc
        logger.debug("Embedded %d text(s) with %s", len(texts), self.model)
        return self._extract_vectors(response)
