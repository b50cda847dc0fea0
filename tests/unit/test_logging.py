"""Tests for structured logging configuration."""

import logging
from unittest.mock import patch

import structlog

from cardstack.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def setup_method(self) -> None:
        """Reset structlog and logging configuration before each test."""
        structlog.reset_defaults()
        clear_contextvars()

    def test_configure_development_mode(self) -> None:
        """Should configure pretty-printed output in development mode."""
        configure_logging(development=True)
        logger = get_logger("test")
        # Should not raise
        logger.info("test message", key="value")

    def test_configure_production_mode(self) -> None:
        """Should configure JSON output in production mode."""
        configure_logging(development=False)
        logger = get_logger("test")
        # Should not raise
        logger.info("test message", key="value")

    def test_reads_environment_variable(self) -> None:
        """Should read ENVIRONMENT env var to determine mode."""
        with patch.dict("os.environ", {"ENVIRONMENT": "production"}):
            configure_logging()
            logger = get_logger("test")
            logger.info("test")

    def test_reads_log_level_environment_variable(self) -> None:
        """Should read LOG_LEVEL env var."""
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            configure_logging(development=True)
            assert logging.getLogger().level == logging.DEBUG

    def test_explicit_log_level(self) -> None:
        configure_logging(development=True, log_level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        configure_logging(development=True, log_level="CHATTY")
        assert logging.getLogger().level == logging.INFO


class TestContextVars:
    """Tests for context variable helpers."""

    def setup_method(self) -> None:
        structlog.reset_defaults()
        clear_contextvars()

    def teardown_method(self) -> None:
        clear_contextvars()

    def test_bind_contextvars(self) -> None:
        bind_contextvars(stack_id="sidebar", card_count=3)
        ctx = structlog.contextvars.get_contextvars()
        assert ctx["stack_id"] == "sidebar"
        assert ctx["card_count"] == 3

    def test_unbind_contextvars(self) -> None:
        bind_contextvars(stack_id="sidebar", card_count=3)
        unbind_contextvars("card_count")
        ctx = structlog.contextvars.get_contextvars()
        assert "card_count" not in ctx
        assert ctx["stack_id"] == "sidebar"

    def test_clear_contextvars(self) -> None:
        bind_contextvars(stack_id="sidebar")
        clear_contextvars()
        assert structlog.contextvars.get_contextvars() == {}
