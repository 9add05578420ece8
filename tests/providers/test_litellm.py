# tests/providers/test_litellm.py
"""Tests for the LiteLLM clients."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytest.importorskip("litellm", reason="Tests require litellm package")

from knowledge_inbox.exceptions import ProviderError
from knowledge_inbox.providers import (
    ChatModels,
    EmbeddingClient,
    EmbeddingModels,
    LiteLLMClient,
    LiteLLMEmbeddingClient,
    LLMClient,
)

COMPLETION = "knowledge_inbox.providers.litellm.client.litellm.completion"
ACOMPLETION = "knowledge_inbox.providers.litellm.client.litellm.acompletion"
EMBEDDING = "knowledge_inbox.providers.litellm.client.litellm.embedding"
AEMBEDDING = "knowledge_inbox.providers.litellm.client.litellm.aembedding"


def mock_completion_response(content: str | None):
    """Create a mock LiteLLM completion response."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def mock_embedding_response(embeddings: list[list[float]], reverse: bool = False):
    """Create a mock LiteLLM embedding response."""
    data = [{"index": i, "embedding": emb} for i, emb in enumerate(embeddings)]
    response = MagicMock()
    response.data = list(reversed(data)) if reverse else data
    return response


class TestLiteLLMClient:
    def test_is_llm_client(self):
        assert isinstance(LiteLLMClient(), LLMClient)

    def test_default_model(self):
        assert LiteLLMClient().model == ChatModels.GPT_4O_MINI

    @patch(COMPLETION)
    def test_complete(self, mock_completion):
        mock_completion.return_value = mock_completion_response("Hello!")
        client = LiteLLMClient(model="openai/gpt-4o-mini")
        messages = [{"role": "user", "content": "Hi"}]

        result = client.complete(messages, temperature=0.3, max_tokens=50)

        assert result == "Hello!"
        mock_completion.assert_called_once_with(
            model="openai/gpt-4o-mini",
            messages=messages,
            drop_params=True,
            num_retries=0,
            temperature=0.3,
            max_tokens=50,
        )

    @patch(COMPLETION)
    def test_optional_params_omitted(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")

        LiteLLMClient().complete([{"role": "user", "content": "Hi"}])

        kwargs = mock_completion.call_args.kwargs
        assert "temperature" not in kwargs
        assert "max_tokens" not in kwargs
        assert "api_key" not in kwargs

    @patch(COMPLETION)
    def test_api_key_and_base_forwarded(self, mock_completion):
        mock_completion.return_value = mock_completion_response("ok")
        client = LiteLLMClient(api_key="sk-test", api_base="http://localhost:11434", num_retries=3)

        client.complete([{"role": "user", "content": "Hi"}])

        kwargs = mock_completion.call_args.kwargs
        assert kwargs["api_key"] == "sk-test"
        assert kwargs["api_base"] == "http://localhost:11434"
        assert kwargs["num_retries"] == 3

    @patch(COMPLETION)
    def test_backend_failure_raises_provider_error(self, mock_completion):
        mock_completion.side_effect = RuntimeError("rate limited")

        with pytest.raises(ProviderError, match="rate limited"):
            LiteLLMClient().complete([{"role": "user", "content": "Hi"}])

    @patch(COMPLETION)
    def test_none_content_raises(self, mock_completion):
        mock_completion.return_value = mock_completion_response(None)

        with pytest.raises(ProviderError):
            LiteLLMClient().complete([{"role": "user", "content": "Hi"}])

    @patch(COMPLETION)
    def test_no_choices_raises(self, mock_completion):
        response = MagicMock()
        response.choices = []
        mock_completion.return_value = response

        with pytest.raises(ProviderError):
            LiteLLMClient().complete([{"role": "user", "content": "Hi"}])

    @pytest.mark.asyncio
    @patch(ACOMPLETION, new_callable=AsyncMock)
    async def test_acomplete(self, mock_acompletion):
        mock_acompletion.return_value = mock_completion_response("Async hello")

        result = await LiteLLMClient().acomplete([{"role": "user", "content": "Hi"}])

        assert result == "Async hello"
        mock_acompletion.assert_awaited_once()

    @pytest.mark.asyncio
    @patch(ACOMPLETION, new_callable=AsyncMock)
    async def test_acomplete_failure(self, mock_acompletion):
        mock_acompletion.side_effect = RuntimeError("timeout")

        with pytest.raises(ProviderError):
            await LiteLLMClient().acomplete([{"role": "user", "content": "Hi"}])


class TestLiteLLMEmbeddingClient:
    def test_is_embedding_client(self):
        assert isinstance(LiteLLMEmbeddingClient(), EmbeddingClient)

    def test_default_model(self):
        assert LiteLLMEmbeddingClient().model == EmbeddingModels.TEXT_3_SMALL

    @patch(EMBEDDING)
    def test_embed(self, mock_embedding):
        mock_embedding.return_value = mock_embedding_response([[0.1, 0.2], [0.3, 0.4]])
        client = LiteLLMEmbeddingClient(model="openai/text-embedding-3-small")

        result = client.embed(["a", "b"])

        assert result == [[0.1, 0.2], [0.3, 0.4]]
        mock_embedding.assert_called_once_with(
            model="openai/text-embedding-3-small",
            input=["a", "b"],
            num_retries=0,
        )

    @patch(EMBEDDING)
    def test_embed_restores_input_order(self, mock_embedding):
        mock_embedding.return_value = mock_embedding_response([[1.0], [2.0]], reverse=True)

        assert LiteLLMEmbeddingClient().embed(["a", "b"]) == [[1.0], [2.0]]

    @patch(EMBEDDING)
    def test_embed_empty_skips_call(self, mock_embedding):
        assert LiteLLMEmbeddingClient().embed([]) == []
        mock_embedding.assert_not_called()

    @patch(EMBEDDING)
    def test_embed_failure(self, mock_embedding):
        mock_embedding.side_effect = RuntimeError("bad key")

        with pytest.raises(ProviderError, match="bad key"):
            LiteLLMEmbeddingClient().embed(["a"])

    @pytest.mark.asyncio
    @patch(AEMBEDDING, new_callable=AsyncMock)
    async def test_aembed(self, mock_aembedding):
        mock_aembedding.return_value = mock_embedding_response([[0.5]])

        assert await LiteLLMEmbeddingClient().aembed(["a"]) == [[0.5]]

    @pytest.mark.asyncio
    @patch(AEMBEDDING, new_callable=AsyncMock)
    async def test_aembed_failure(self, mock_aembedding):
        mock_aembedding.side_effect = RuntimeError("down")

        with pytest.raises(ProviderError):
            await LiteLLMEmbeddingClient().aembed(["a"])
