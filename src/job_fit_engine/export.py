"""Flatten a score into the field set of the external job record store."""

from __future__ import annotations

import re
from typing import Any

import structlog

from job_fit_core.models.job import JobPayload
from job_fit_core.models.result import FitLabel, ScoreResult

logger = structlog.get_logger()

RECORD_FIT_LABELS: tuple[str, ...] = tuple(label.value for label in FitLabel)

# Substring -> record label, checked in order when the label is not valid as-is
_LABEL_FALLBACKS: tuple[tuple[re.Pattern[str], FitLabel], ...] = (
    (re.compile(r"STRONG"), FitLabel.STRONG_FIT),
    (re.compile(r"GOOD"), FitLabel.GOOD_FIT),
    (re.compile(r"MODERATE"), FitLabel.MODERATE_FIT),
    (re.compile(r"FAIR"), FitLabel.FAIR_FIT),
    (re.compile(r"WEAK"), FitLabel.WEAK_FIT),
    (re.compile(r"POOR"), FitLabel.POOR_FIT),
    (re.compile(r"HARD|\bNO\b"), FitLabel.HARD_NO),
)


def coerce_fit_label(label: str) -> str:
    """Map any label onto an allowed record-store option.

    Unrecognized labels are never passed through; they fall back to
    ``MODERATE FIT``.
    """
    normalized = " ".join(label.upper().split())
    if normalized in RECORD_FIT_LABELS:
        return normalized
    for pattern, fallback in _LABEL_FALLBACKS:
        if pattern.search(normalized):
            coerced = fallback.value
            break
    else:
        coerced = FitLabel.MODERATE_FIT.value
    logger.info("fit_label_coerced", original=label, coerced=coerced)
    return coerced


def to_record_fields(job: JobPayload, result: ScoreResult | None = None) -> dict[str, Any]:
    """Record-store fields for a job and (optionally) its score.

    Absent numeric and text values are omitted rather than sent empty.
    """
    fields: dict[str, Any] = {
        "Job Title": job.job_title or "",
        "Company Name": job.company_name or "",
        "Job URL": job.job_url or "",
        "Location": job.location or "",
        "Source": job.source or "LinkedIn",
        "Job Description": job.description_text or "",
        "Status": "Captured",
    }
    if job.salary_min is not None:
        fields["Salary Min"] = job.salary_min
    if job.salary_max is not None:
        fields["Salary Max"] = job.salary_max
    if job.workplace_type:
        fields["Workplace Type"] = job.workplace_type
    if job.employment_type:
        fields["Employment Type"] = job.employment_type
    if job.equity_mentioned is not None:
        fields["Equity Mentioned"] = job.equity_mentioned

    if result is None:
        return fields

    fields["Overall Fit Score"] = result.overall_score
    fields["Fit Recommendation"] = coerce_fit_label(result.overall_label.value)
    fields["Preference Fit Score"] = result.job_to_user_fit.score
    fields["Role Fit Score"] = result.user_to_job_fit.score

    skills = result.user_to_job_fit.criterion("skill_match")
    if skills is not None:
        matched = skills.extra("matched_skills") or []
        missing = skills.extra("unmatched_skills") or []
        if matched:
            fields["Matched Skills"] = ", ".join(matched)
        if missing:
            fields["Missing Skills"] = ", ".join(missing)
    if result.deal_breaker_triggered:
        fields["Triggered Dealbreakers"] = result.deal_breaker_triggered
    return fields
