"""Shared helpers for criterion scorers."""

from __future__ import annotations

from typing import Any

from job_fit_core.constants import MAX_CRITERION_SCORE
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import round_half_up

# key -> (display name, description)
CRITERION_INFO: dict[str, tuple[str, str]] = {
    "salary": (
        "Base Salary",
        "Whether the posted max salary meets your minimum and target",
    ),
    "workplace_type": (
        "Work Location",
        "Whether the job is remote, hybrid, or on-site based on your preferences",
    ),
    "equity_bonus": (
        "Bonus & Equity",
        "Whether the job mentions performance bonuses and/or equity (0=neither, 25=one, 50=both)",
    ),
    "benefits": (
        "Benefits Package",
        "Health insurance, 401k, PTO, parental leave, and other benefits",
    ),
    "business_lifecycle": (
        "Business Lifecycle",
        "Company lifecycle stage (Seed, Startup, Growth, Maturity, Expansion)",
    ),
    "org_stability": (
        "Org Stability",
        "Company headcount growth/decline trends (growing = more stable)",
    ),
    "hiring_urgency": (
        "Hiring Urgency",
        "How motivated the company appears to fill this role quickly",
    ),
    "title_seniority": (
        "Title & Seniority Match",
        "How well the job title and level align with your target roles",
    ),
    "skill_match": (
        "Skills Overlap",
        "How many of your skills are mentioned in the job requirements",
    ),
    "industry_alignment": (
        "Industry Experience",
        "Whether the company's industry matches your background (exact, adjacent, or new)",
    ),
    "experience_level": (
        "Experience Level",
        "How well your years of experience match the job requirements",
    ),
}


def clamp_score(value: float) -> int:
    """Round half-up and clamp into the 0-50 criterion range."""
    return max(0, min(MAX_CRITERION_SCORE, round_half_up(value)))


def build_criterion(
    key: str,
    *,
    score: float,
    actual_value: str,
    rationale: str,
    missing_data: bool = False,
    description: str | None = None,
    **extras: Any,  # noqa: ANN401
) -> CriterionResult:
    """Create a CriterionResult with the display name for ``key``."""
    name, default_description = CRITERION_INFO[key]
    return CriterionResult(
        key=key,
        criteria=name,
        criteria_description=description or default_description,
        actual_value=actual_value,
        score=clamp_score(score),
        rationale=rationale,
        missing_data=missing_data,
        **extras,
    )


def format_number(value: float) -> str:
    """Compact display of a number (15.0 -> "15", 2.5 -> "2.5")."""
    return f"{value:g}"
