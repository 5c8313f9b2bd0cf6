"""Configuration: environment settings and scoring presets."""

from job_fit_core.config.presets import (
    DEFAULT_PRESET,
    ScoringConfig,
    available_presets,
    get_preset,
)
from job_fit_core.config.settings import Settings

__all__ = [
    "DEFAULT_PRESET",
    "ScoringConfig",
    "Settings",
    "available_presets",
    "get_preset",
]
