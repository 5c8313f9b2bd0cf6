"""Scoring presets: weight tables, thresholds and skill-matching knobs.

A preset is an immutable :class:`ScoringConfig`. Weight tables must name
exactly the criteria of their side; tables that do not sum to 1.0 are
renormalized when the preset is built, with a warning, so a sub-score is
always a true weighted average on the 0-50 scale.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import structlog

from job_fit_core.constants import (
    DEFAULT_ACCEPTABLE_WORKPLACE_TYPES,
    DEFAULT_UNACCEPTABLE_WORKPLACE_TYPES,
    JOB_TO_USER_CRITERIA,
    SKILL_SIMILARITY_FUNCTIONS,
    USER_TO_JOB_CRITERIA,
)
from job_fit_core.exceptions import ScoringConfigError
from job_fit_core.models.result import FitLabel

logger = structlog.get_logger()

DEFAULT_PRESET = "v2"

DEFAULT_FIT_BANDS: tuple[tuple[int, FitLabel], ...] = (
    (80, FitLabel.STRONG_FIT),
    (70, FitLabel.GOOD_FIT),
    (50, FitLabel.MODERATE_FIT),
    (30, FitLabel.WEAK_FIT),
)


def _normalize_weights(
    preset: str,
    table: str,
    weights: Mapping[str, float],
    criteria: tuple[str, ...],
) -> Mapping[str, float]:
    """Validate a weight table against its criteria and scale it to sum 1.0."""
    missing = [key for key in criteria if key not in weights]
    unknown = sorted(set(weights) - set(criteria))
    if missing or unknown:
        msg = f"Preset '{preset}' {table} weights: missing={missing} unknown={unknown}"
        raise ScoringConfigError(msg)

    negative = [key for key in criteria if weights[key] < 0]
    if negative:
        msg = f"Preset '{preset}' {table} weights must be non-negative: {negative}"
        raise ScoringConfigError(msg)

    total = sum(weights[key] for key in criteria)
    if total <= 0:
        msg = f"Preset '{preset}' {table} weights sum to zero"
        raise ScoringConfigError(msg)

    if math.isclose(total, 1.0, abs_tol=1e-9):
        ordered = {key: float(weights[key]) for key in criteria}
    else:
        logger.warning(
            "scoring_weights_renormalized",
            preset=preset,
            table=table,
            original_sum=round(total, 6),
        )
        ordered = {key: weights[key] / total for key in criteria}
    return MappingProxyType(ordered)


@dataclass(frozen=True)
class ScoringConfig:
    """Immutable scoring preset."""

    name: str
    job_to_user_weights: Mapping[str, float]
    user_to_job_weights: Mapping[str, float]
    skill_match_threshold: float = 0.7
    skill_similarity: str = "jaccard"
    desired_skill_share: float = 0.2
    salary_floor: float = 150_000
    salary_target: float = 200_000
    acceptable_workplace_types: tuple[str, ...] = DEFAULT_ACCEPTABLE_WORKPLACE_TYPES
    unacceptable_workplace_types: tuple[str, ...] = DEFAULT_UNACCEPTABLE_WORKPLACE_TYPES
    default_years_of_experience: float = 15
    strength_threshold: int = 45
    concern_threshold: int = 20
    sub_score_good: int = 40
    sub_score_moderate: int = 25
    fit_bands: tuple[tuple[int, FitLabel], ...] = field(default=DEFAULT_FIT_BANDS)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "job_to_user_weights",
            _normalize_weights(self.name, "job_to_user", self.job_to_user_weights, JOB_TO_USER_CRITERIA),
        )
        object.__setattr__(
            self,
            "user_to_job_weights",
            _normalize_weights(self.name, "user_to_job", self.user_to_job_weights, USER_TO_JOB_CRITERIA),
        )
        if not 0.0 <= self.skill_match_threshold <= 1.0:
            msg = f"skill_match_threshold must be within [0, 1], got {self.skill_match_threshold}"
            raise ScoringConfigError(msg)
        if self.skill_similarity not in SKILL_SIMILARITY_FUNCTIONS:
            msg = (
                f"Unknown skill_similarity '{self.skill_similarity}'. "
                f"Available: {', '.join(SKILL_SIMILARITY_FUNCTIONS)}"
            )
            raise ScoringConfigError(msg)
        if not 0.0 <= self.desired_skill_share <= 1.0:
            msg = f"desired_skill_share must be within [0, 1], got {self.desired_skill_share}"
            raise ScoringConfigError(msg)
        if self.salary_floor <= 0 or self.salary_target < self.salary_floor:
            msg = "salary_target must be >= salary_floor > 0"
            raise ScoringConfigError(msg)
        thresholds = [threshold for threshold, _ in self.fit_bands]
        if thresholds != sorted(thresholds, reverse=True):
            msg = "fit_bands must be ordered from highest to lowest threshold"
            raise ScoringConfigError(msg)

    def as_dict(self) -> dict[str, Any]:
        """Plain-dict view for display and JSON output."""
        return {
            "name": self.name,
            "job_to_user_weights": dict(self.job_to_user_weights),
            "user_to_job_weights": dict(self.user_to_job_weights),
            "skill_match_threshold": self.skill_match_threshold,
            "skill_similarity": self.skill_similarity,
            "desired_skill_share": self.desired_skill_share,
            "salary_floor": self.salary_floor,
            "salary_target": self.salary_target,
        }


# Raw preset definitions; built into ScoringConfig on lookup
PRESET_DEFINITIONS: dict[str, dict[str, Any]] = {
    "v2": {
        "job_to_user_weights": {
            "salary": 0.25,
            "workplace_type": 0.20,
            "equity_bonus": 0.17,
            "benefits": 0.13,
            "business_lifecycle": 0.11,
            "org_stability": 0.09,
            "hiring_urgency": 0.05,
        },
        "user_to_job_weights": {
            "title_seniority": 0.30,
            "skill_match": 0.35,
            "industry_alignment": 0.20,
            "experience_level": 0.15,
        },
    },
    # Weights as shipped before the company-stage and ops-focus criteria were
    # dropped; they sum to 0.90 and 0.75 and are renormalized on build.
    "legacy_v1": {
        "job_to_user_weights": {
            "salary": 0.22,
            "workplace_type": 0.18,
            "equity_bonus": 0.15,
            "benefits": 0.12,
            "business_lifecycle": 0.10,
            "org_stability": 0.08,
            "hiring_urgency": 0.05,
        },
        "user_to_job_weights": {
            "title_seniority": 0.25,
            "skill_match": 0.25,
            "industry_alignment": 0.15,
            "experience_level": 0.10,
        },
    },
}


def available_presets() -> list[str]:
    """Names of all built-in presets."""
    return sorted(PRESET_DEFINITIONS)


def get_preset(name: str = DEFAULT_PRESET, **overrides: Any) -> ScoringConfig:  # noqa: ANN401
    """Build a preset by name, optionally overriding individual knobs.

    Raises:
        ScoringConfigError: If the preset name is unknown.
    """
    definition = PRESET_DEFINITIONS.get(name)
    if definition is None:
        msg = f"Unknown scoring preset '{name}'. Available: {', '.join(available_presets())}"
        raise ScoringConfigError(msg)
    return ScoringConfig(name=name, **{**definition, **overrides})
