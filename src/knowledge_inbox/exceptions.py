# src/knowledge_inbox/exceptions.py
"""Exceptions for Knowledge Inbox.

The hierarchy mirrors how failures are handled:
- ValidationError: bad caller input, raised at the boundary (CLI, HTTP)
- DimensionMismatch: a vector does not match the index dimensionality
- ProviderError: embedding or answer generation backend failure
- NotFoundError: a referenced item is absent (boundary only; stores return None)
- FetchError: a URL could not be fetched or yielded no usable text
"""


class InboxError(Exception):
    """Base class for all Knowledge Inbox errors."""


class ValidationError(InboxError):
    """Raised when caller input fails boundary validation."""


class DimensionMismatch(InboxError):
    """Raised when an embedding vector has the wrong number of dimensions.

    Attributes:
        expected: Dimensionality the index was configured with.
        actual: Length of the offending vector.
    """

    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        super().__init__(
            message or f"Embedding dimension mismatch: expected {expected}, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class ProviderError(InboxError):
    """Raised when an embedding or generation provider call fails."""


class NotFoundError(InboxError):
    """Raised by the boundary when a requested item does not exist."""


class FetchError(InboxError):
    """Raised when URL content cannot be retrieved or extracted."""
