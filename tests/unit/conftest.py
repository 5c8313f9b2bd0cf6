"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
import structlog

from job_fit_core.config.presets import ScoringConfig, get_preset
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from tests.mocks.mock_factories import make_job_payload, make_user_profile
from tests.mocks.mock_settings import make_settings


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def config() -> ScoringConfig:
    """Return the default v2 preset."""
    return get_preset("v2")


@pytest.fixture
def sample_job() -> JobPayload:
    """Return a minimal remote job mentioning SQL and Python."""
    return make_job_payload()


@pytest.fixture
def sample_profile() -> UserProfile:
    """Return a profile with SQL, Python and Tableau skills."""
    return make_user_profile()
