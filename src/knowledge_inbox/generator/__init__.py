# src/knowledge_inbox/generator/__init__.py
"""Answer synthesis for Knowledge Inbox."""

from knowledge_inbox.generator.base import AnswerGenerator
from knowledge_inbox.generator.client import (
    SYSTEM_PROMPT,
    USER_PROMPT,
    ClientAnswerGenerator,
    build_user_message,
)

__all__ = [
    "AnswerGenerator",
    "ClientAnswerGenerator",
    "SYSTEM_PROMPT",
    "USER_PROMPT",
    "build_user_message",
]
