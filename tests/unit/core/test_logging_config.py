"""Unit tests for structured logging configuration."""

from __future__ import annotations

from structlog.testing import capture_logs

from core.logging_config import get_logger


def test_get_logger_filters_debug_events() -> None:
    """Loggers should drop debug events and keep info events."""
    logger = get_logger("tests.logging")

    with capture_logs() as captured:
        logger.debug("hidden_event", label="@a")
        logger.info("shown_event", label="@a")

    assert [entry["event"] for entry in captured] == ["shown_event"]
