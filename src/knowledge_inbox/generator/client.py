# src/knowledge_inbox/generator/client.py
"""Client-based answer generator implementation."""

from knowledge_inbox.generator.base import AnswerGenerator
from knowledge_inbox.providers.base import LLMClient

SYSTEM_PROMPT = """You are a helpful assistant that answers questions based on the provided context.

Instructions:
- Answer the question using ONLY the information from the provided context
- If the context doesn't contain relevant information, say so clearly
- Cite sources by referencing the [number] in the context
- Be concise but complete
- If you're uncertain, indicate that in your response"""

USER_PROMPT = """Context from knowledge base:
{context}

Question: {question}

Please provide a clear answer based on the context above."""


def build_user_message(context: str, question: str) -> str:
    """Fill the user prompt template with the numbered context and question."""
    return USER_PROMPT.format(context=context, question=question)


class ClientAnswerGenerator(AnswerGenerator):
    """Answer generator that sends a system and a user message to an LLMClient.

    Example:
        from knowledge_inbox.providers.litellm import LiteLLMClient
        from knowledge_inbox.generator import ClientAnswerGenerator

        client = LiteLLMClient(model="openai/gpt-4o-mini")
        generator = ClientAnswerGenerator(llm_client=client)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        temperature: float | None = 0.7,
        max_tokens: int | None = 500,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: Any LLMClient implementation.
            temperature: Sampling temperature passed on every call.
            max_tokens: Cap on the answer length in tokens.
        """
        self._client = llm_client
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _messages(self, system_instruction: str, user_message: str) -> list[dict]:
        return [
            {"role": "system", "content": system_instruction},
            {"role": "user", "content": user_message},
        ]

    def generate(self, system_instruction: str, user_message: str) -> str:
        return self._client.complete(
            self._messages(system_instruction, user_message),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

    async def agenerate(self, system_instruction: str, user_message: str) -> str:
        return await self._client.acomplete(
            self._messages(system_instruction, user_message),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
