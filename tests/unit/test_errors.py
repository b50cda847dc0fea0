"""Tests for card stack error types."""

import pytest

from cardstack.core.errors import CardStackError, ConfigurationError, ErrorCategory


class TestErrorCategory:
    """Tests for ErrorCategory enum."""

    def test_all_categories_defined(self) -> None:
        assert ErrorCategory.INVALID_INPUT
        assert ErrorCategory.CONFIGURATION
        assert ErrorCategory.UNKNOWN


class TestCardStackError:
    """Tests for CardStackError and subclasses."""

    def test_defaults_to_unknown_category(self) -> None:
        error = CardStackError("boom")
        assert str(error) == "boom"
        assert error.category == ErrorCategory.UNKNOWN
        assert error.original_error is None

    def test_from_exception_wraps_original(self) -> None:
        original = ValueError("could not convert string to float: 'x'")
        error = ConfigurationError.from_exception(original, ErrorCategory.CONFIGURATION)

        assert isinstance(error, ConfigurationError)
        assert error.original_error is original
        assert error.category == ErrorCategory.CONFIGURATION
        assert "could not convert" in str(error)

    def test_configuration_error_is_card_stack_error(self) -> None:
        with pytest.raises(CardStackError):
            raise ConfigurationError("bad", ErrorCategory.INVALID_INPUT)
