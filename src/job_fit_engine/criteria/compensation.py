"""Compensation criteria: base salary and bonus/equity."""

from __future__ import annotations

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import format_salary, round_half_up
from job_fit_engine.criteria.base import build_criterion

MAX_MIN_SALARY_PENALTY = 15


def salary_bounds(profile: UserProfile, config: ScoringConfig) -> tuple[float, float]:
    """Resolve (floor, target), falling back to the preset for unset values.

    The target is never below the floor, so a floor set above the preset
    target also becomes the target.
    """
    prefs = profile.preferences
    floor = prefs.salary_floor if prefs.salary_floor and prefs.salary_floor > 0 else config.salary_floor
    target = (
        prefs.salary_target if prefs.salary_target and prefs.salary_target > 0 else config.salary_target
    )
    return floor, max(target, floor)


def _score_offer(offer: float, floor: float, target: float) -> tuple[float, str]:
    """Score a salary ceiling against floor/target; returns (score, note)."""
    if offer >= target:
        return 50.0, "meets/exceeds target"
    if offer >= floor:
        span = target - floor
        fraction = (offer - floor) / span if span > 0 else 0.0
        if fraction >= 0.90:
            note = "within 10% of target"
        elif fraction >= 0.75:
            note = "solid match, approaching target"
        elif fraction >= 0.50:
            note = "moderate match, midway to target"
        elif fraction >= 0.25:
            note = "meets minimum, below midpoint"
        else:
            note = "barely meets minimum floor"
        return 25.0 + fraction * 25.0, note
    if offer >= floor * 0.95:
        return 20.0, "slightly below floor"
    if offer >= floor * 0.90:
        return 15.0, "below floor by ~10%"
    if offer >= floor * 0.80:
        return 10.0, "significantly below floor"
    return 5.0, "well below floor"


def score_salary(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> CriterionResult:
    """Score the posted salary ceiling against the user's floor and target.

    The ceiling is ``salary_max`` (``salary_min`` when no max is posted).
    A posted minimum below the floor costs up to 15 points.
    """
    floor, target = salary_bounds(profile, config)
    description = (
        f"Whether the posted max salary meets your ${format_salary(floor)} minimum "
        f"and ${format_salary(target)} target"
    )
    salary_min = job.salary_min
    salary_max = job.salary_max
    offered = salary_max or salary_min

    if not offered:
        return build_criterion(
            "salary",
            score=10,
            actual_value="Not specified",
            rationale="Salary not disclosed - unable to verify alignment with your requirements",
            missing_data=True,
            description=description,
            job_salary_min=salary_min,
            job_salary_max=salary_max,
        )

    score, note = _score_offer(offered, floor, target)
    rationale = f"Max ${format_salary(offered)} {note}"

    if salary_min is not None and salary_min < floor:
        penalty = min(MAX_MIN_SALARY_PENALTY, round_half_up((floor - salary_min) / floor * 15))
        score = max(0.0, score - penalty)
        rationale += f"; min ${format_salary(salary_min)} below floor"

    if salary_max and salary_min and salary_max != salary_min:
        display = f"${format_salary(salary_min)}-${format_salary(salary_max)}"
    else:
        display = f"${format_salary(offered)}"

    return build_criterion(
        "salary",
        score=score,
        actual_value=display,
        rationale=rationale,
        description=description,
        job_salary_min=salary_min,
        job_salary_max=salary_max,
    )


def _bonus_display(percent: float | None) -> str:
    if not percent:
        return "Bonus"
    # Fractions (0.15) and whole percentages (15) are both seen in payloads
    whole = percent * 100 if percent <= 1 else percent
    return f"{round_half_up(whole)}% bonus"


def score_equity_bonus(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score 0/25/50 by how many of {bonus, equity} the posting mentions."""
    equity = bool(job.equity_mentioned)
    bonus = bool(job.bonus_mentioned)
    mentioned = int(equity) + int(bonus)

    if mentioned == 2:
        actual = f"{_bonus_display(job.bonus_estimated_percent)} + Equity"
        rationale = "Both bonus and equity mentioned - excellent total comp package"
    elif bonus:
        actual = _bonus_display(job.bonus_estimated_percent)
        rationale = "Bonus mentioned, but no equity"
    elif equity:
        actual = "Equity"
        rationale = "Equity mentioned, but no bonus"
    else:
        actual = "Neither mentioned"
        rationale = "No bonus or equity mentioned in job description"

    return build_criterion(
        "equity_bonus",
        score=mentioned * 25,
        actual_value=actual,
        rationale=rationale,
        missing_data=job.equity_mentioned is None and job.bonus_mentioned is None,
        bonus_mentioned=bonus,
        equity_mentioned=equity,
    )
