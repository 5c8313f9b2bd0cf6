"""Tests for observability/logging.py."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from types import SimpleNamespace

import pytest
import structlog
from structlog.contextvars import bind_contextvars, get_contextvars

from job_fit_engine.observability.logging import (
    _resolve_level,
    bind_score_context,
    clear_score_context,
    configure_logging,
)


def _make_settings(**overrides: object) -> object:
    """Create a minimal settings object."""
    defaults: dict[str, object] = {"log_format": "console", "log_level": "INFO"}
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Keep root logger handlers and level intact across a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_mode(self) -> None:
        """Console mode installs one stderr handler."""
        configure_logging(_make_settings(log_format="console"))  # type: ignore[arg-type]
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_json_mode(self) -> None:
        """JSON mode renders stdlib records as JSON."""
        configure_logging(_make_settings(log_format="json"))  # type: ignore[arg-type]

        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.getLogger().handlers[0].formatter)
        test_logger = logging.getLogger("test_json_mode")
        test_logger.addHandler(handler)
        test_logger.setLevel(logging.INFO)
        try:
            test_logger.info("test_event")
        finally:
            test_logger.removeHandler(handler)

        output = stream.getvalue()
        assert '"event": "test_event"' in output

    def test_sets_level_and_quiets_http(self) -> None:
        """Level is applied to root; HTTP client loggers stay at WARNING or above."""
        configure_logging(_make_settings(log_level="DEBUG"))  # type: ignore[arg-type]
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.unit
class TestScoreContext:
    """Tests for bind/clear score context."""

    def test_bind_and_clear(self) -> None:
        """Score context is bound, then removed without touching other keys."""
        bind_contextvars(request_id="req-1")
        bind_score_context("score_abc", "job-1")
        assert get_contextvars()["score_id"] == "score_abc"
        assert get_contextvars()["job_id"] == "job-1"

        clear_score_context()
        context = get_contextvars()
        assert "score_id" not in context
        assert "job_id" not in context
        assert context["request_id"] == "req-1"


@pytest.mark.unit
class TestResolveLevel:
    """Tests for _resolve_level."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("INFO", logging.INFO),
            ("WARNING", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("debug", logging.DEBUG),
            ("unknown", logging.INFO),
        ],
    )
    def test_resolve_level(self, name: str, expected: int) -> None:
        """Level names resolve to correct logging constants."""
        assert _resolve_level(name) == expected
