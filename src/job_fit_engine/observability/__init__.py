"""Observability: structured logging and score context."""

from job_fit_engine.observability.logging import (
    bind_score_context,
    clear_score_context,
    configure_logging,
)

__all__ = [
    "bind_score_context",
    "clear_score_context",
    "configure_logging",
]
