"""Error types for the card stack layout engine.

The layout functions themselves are total over their input domains: offsets
are clamped and unknown indices fall back to safe defaults. Errors are only
raised when a stack is configured with parameters that can never produce a
layout.

Example:
    from cardstack.core.errors import ConfigurationError, ErrorCategory

    try:
        config = configure(card_count=0)
    except ConfigurationError as ex:
        assert ex.category is ErrorCategory.INVALID_INPUT
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of card stack errors."""

    INVALID_INPUT = auto()  # Parameter outside its valid range
    CONFIGURATION = auto()  # Unreadable environment configuration
    UNKNOWN = auto()  # Unclassified error


class CardStackError(Exception):
    """Base class for errors raised by the card stack engine.

    Attributes:
        category: The kind of failure.
        original_error: The underlying exception, if this error wraps one.
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.original_error = original_error

    @classmethod
    def from_exception(
        cls,
        ex: Exception,
        category: ErrorCategory = ErrorCategory.UNKNOWN,
    ) -> "CardStackError":
        """Create an error of this type wrapping an existing exception."""
        return cls(
            message=str(ex),
            category=category,
            original_error=ex,
        )


class ConfigurationError(CardStackError):
    """Stack parameters are invalid or could not be read."""
