# src/knowledge_inbox/embedder/client.py
"""Client-based embedder implementation."""

from knowledge_inbox.embedder.base import Embedder
from knowledge_inbox.exceptions import ProviderError
from knowledge_inbox.providers.base import EmbeddingClient


class ClientEmbedder(Embedder):
    """Embedder that uses an EmbeddingClient for generating embeddings.

    Example:
        from knowledge_inbox.providers.litellm import LiteLLMEmbeddingClient
        from knowledge_inbox.embedder import ClientEmbedder

        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")
        embedder = ClientEmbedder(embedding_client=client)
    """

    available = True

    def __init__(self, embedding_client: EmbeddingClient) -> None:
        """Initialize the embedder.

        Args:
            embedding_client: Any EmbeddingClient implementation
        """
        self._client = embedding_client

    def embed_text(self, text: str) -> list[float]:
        return self._first(self._client.embed([text]))

    def embed_texts(self, texts: list[str]) -> list[list[float]]:
        return self._client.embed(texts)

    async def aembed_text(self, text: str) -> list[float]:
        return self._first(await self._client.aembed([text]))

    async def aembed_texts(self, texts: list[str]) -> list[list[float]]:
        return await self._client.aembed(texts)

    @staticmethod
    def _first(result: list[list[float]]) -> list[float]:
        if not result:
            raise ProviderError("Embedding provider returned no vectors")
        return result[0]
