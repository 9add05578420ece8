# src/knowledge_inbox/generator/base.py
"""Answer generator abstract base class."""

from abc import ABC, abstractmethod


class AnswerGenerator(ABC):
    """Abstract base class for answer synthesis from retrieved context."""

    @abstractmethod
    def generate(self, system_instruction: str, user_message: str) -> str:
        """Generate an answer.

        Args:
            system_instruction: Instructions constraining how to answer.
            user_message: Message holding the numbered context and the question.

        Returns:
            The generated answer text.

        Raises:
            ProviderError: If the underlying provider fails.
        """
        ...

    async def agenerate(self, system_instruction: str, user_message: str) -> str:
        """Generate an answer (async). Defaults to the sync call."""
        return self.generate(system_instruction, user_message)
