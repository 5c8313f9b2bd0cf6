"""Workplace type criterion."""

from __future__ import annotations

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import format_workplace_type, normalize_workplace_type
from job_fit_engine.criteria.base import build_criterion

_ACCEPTABLE_SCORES = {"remote": 50, "hybrid": 35}


def workplace_preferences(
    profile: UserProfile, config: ScoringConfig
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Resolve (acceptable, unacceptable) workplace types for a profile."""
    prefs = profile.preferences
    acceptable = (
        tuple(prefs.workplace_types_acceptable)
        if prefs.workplace_types_acceptable is not None
        else config.acceptable_workplace_types
    )
    unacceptable = (
        tuple(prefs.workplace_types_unacceptable)
        if prefs.workplace_types_unacceptable is not None
        else config.unacceptable_workplace_types
    )
    return acceptable, unacceptable


def score_workplace_type(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score remote/hybrid/on-site against the user's acceptable lists."""
    workplace = normalize_workplace_type(job.workplace_type)
    if not workplace:
        return build_criterion(
            "workplace_type",
            score=25,
            actual_value="Not specified",
            rationale="Workplace type not disclosed; assuming moderate alignment",
            missing_data=True,
        )

    acceptable, unacceptable = workplace_preferences(profile, config)
    display = format_workplace_type(workplace)
    if workplace in unacceptable:
        score = 0
        rationale = f"{display} is in your unacceptable list"
    elif workplace in acceptable:
        score = _ACCEPTABLE_SCORES.get(workplace, 25)
        if workplace == "remote":
            rationale = "Remote position matches your preference"
        elif workplace == "hybrid":
            rationale = "Hybrid is acceptable"
        else:
            rationale = f"{display} is acceptable"
    else:
        score = 20
        rationale = f"{display} not in your preferred list"

    return build_criterion(
        "workplace_type",
        score=score,
        actual_value=display,
        rationale=rationale,
        workplace_type=workplace,
    )
