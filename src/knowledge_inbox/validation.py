# src/knowledge_inbox/validation.py
"""Input validation shared by the HTTP server and the CLI.

The pipeline trusts its inputs; these checks run at the boundary and raise
ValidationError with a message suitable for showing to the caller.
"""

from typing import Any
from urllib.parse import urlparse

from knowledge_inbox.exceptions import ValidationError
from knowledge_inbox.models import ItemType
from knowledge_inbox.settings import Settings

_DEFAULT_SETTINGS = Settings()


def validate_item_type(value: Any) -> ItemType:
    try:
        return ItemType(value)
    except ValueError:
        raise ValidationError('Type must be either "text" or "url"') from None


def validate_text(content: Any, settings: Settings = _DEFAULT_SETTINGS) -> str:
    """Check note content is a non-empty string within the length limit."""
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Content is required and must be a non-empty string")
    if len(content) > settings.max_text_length:
        raise ValidationError(
            f"Content too large (max {settings.max_text_length:,} characters)"
        )
    return content


def validate_url(url: Any) -> str:
    """Check the URL is an absolute http(s) URL."""
    if not isinstance(url, str) or not url.strip():
        raise ValidationError("URL is required and must be a string")
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError("Invalid URL format")
    return url.strip()


def validate_question(question: Any, settings: Settings = _DEFAULT_SETTINGS) -> str:
    if not isinstance(question, str) or not question.strip():
        raise ValidationError("Question is required and must be a non-empty string")
    if len(question) > settings.max_question_length:
        raise ValidationError(
            f"Question too long (max {settings.max_question_length:,} characters)"
        )
    return question


def validate_top_k(top_k: Any, settings: Settings = _DEFAULT_SETTINGS) -> int:
    """Return top_k, or the default when it is None."""
    if top_k is None:
        return settings.default_k
    if isinstance(top_k, bool) or not isinstance(top_k, int):
        raise ValidationError("topK must be an integer")
    if not 1 <= top_k <= settings.max_top_k:
        raise ValidationError(f"topK must be between 1 and {settings.max_top_k}")
    return top_k


def validate_metadata(metadata: Any) -> dict[str, Any]:
    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise ValidationError("Metadata must be an object")
    return metadata
