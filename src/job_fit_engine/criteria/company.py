"""Company criteria: business lifecycle, org stability, hiring urgency."""

from __future__ import annotations

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.constants import (
    EXPANSION_KEYWORDS,
    GROWTH_KEYWORDS,
    LIFECYCLE_DECLINE_PATTERNS,
    LIFECYCLE_LABELS,
    LIFECYCLE_SCORES,
    MATURITY_KEYWORDS,
    ORG_DECLINE_PATTERNS,
    ORG_GROWTH_PATTERNS,
    SEED_KEYWORDS,
    STARTUP_KEYWORDS,
    URGENCY_KEYWORDS,
)
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import first_keyword, parse_percentage
from job_fit_engine.criteria.base import build_criterion, format_number

# Stage-field fragments in priority order; the field is short free text
_STAGE_FIELD_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("maturity", ("pre ipo", "late", "public", "series d", "series e", "series f", "enterprise", "mature")),
    ("decline", ("decline", "declining", "restructuring")),
    ("seed", ("pre seed", "preseed", "seed", "pre revenue", "angel", "bootstrapped")),
    ("startup", ("series a", "startup", "start up", "early")),
    ("growth", ("series b", "series c", "growth")),
    ("expansion", ("expansion", "expanding")),
)


def _stage_from_field(stage: str) -> str | None:
    text = " ".join(stage.lower().replace("_", " ").replace("-", " ").split())
    for detected, fragments in _STAGE_FIELD_RULES:
        if any(fragment in text for fragment in fragments):
            return detected
    return None


def detect_lifecycle_stage(job: JobPayload) -> tuple[str, str | None, str]:
    """Detect the company's lifecycle stage.

    Returns (stage, matched keyword, evidence source). The explicit stage
    field wins, then description keywords (decline, maturity, growth,
    expansion, startup, seed), then headcount.
    """
    if job.company_stage:
        stage = _stage_from_field(job.company_stage)
        if stage:
            return stage, None, "stage_field"

    description = job.description
    for pattern, label in LIFECYCLE_DECLINE_PATTERNS:
        if pattern.search(description):
            return "decline", label, "description"

    company = (job.company_name or "").lower()
    keyword = first_keyword(description, MATURITY_KEYWORDS) or first_keyword(company, MATURITY_KEYWORDS)
    if keyword:
        return "maturity", keyword, "description"

    for stage, keywords in (
        ("growth", GROWTH_KEYWORDS),
        ("expansion", EXPANSION_KEYWORDS),
        ("startup", STARTUP_KEYWORDS),
        ("seed", SEED_KEYWORDS),
    ):
        keyword = first_keyword(description, keywords)
        if keyword:
            return stage, keyword, "description"

    headcount = job.company_headcount or 0
    if headcount > 0:
        if headcount > 1000:
            return "maturity", None, "headcount"
        if headcount > 200:
            return "growth", None, "headcount"
        if headcount > 50:
            return "startup", None, "headcount"
        return "seed", None, "headcount"

    return "unknown", None, "none"


def score_business_lifecycle(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score the company's lifecycle stage (maturity best, decline worst)."""
    stage, keyword, source = detect_lifecycle_stage(job)
    label = LIFECYCLE_LABELS[stage]

    if stage == "unknown":
        rationale = "Company lifecycle stage not determined from available info"
    elif source == "stage_field":
        rationale = f'Company stage "{job.company_stage}" indicates {label} phase'
    elif keyword:
        rationale = f'Detected "{keyword}" indicating {label} phase'
    else:
        rationale = f"Based on company size (~{job.company_headcount} employees): {label}"

    return build_criterion(
        "business_lifecycle",
        score=LIFECYCLE_SCORES[stage],
        actual_value=label,
        rationale=rationale,
        missing_data=stage == "unknown",
        detected_stage=stage,
        matched_keyword=keyword,
    )


def _growth_band(rate: float) -> tuple[int, str, str]:
    """Map a headcount growth rate to (score, rationale, display)."""
    shown = format_number(rate)
    if rate >= 15:
        return 50, f"Hyper-growth company (+{shown}% headcount growth)", f"+{shown}% growth"
    if rate >= 10:
        return 45, f"Strong growth company (+{shown}% headcount growth)", f"+{shown}% growth"
    if rate >= 5:
        return 40, f"Healthy growth (+{shown}% headcount growth)", f"+{shown}% growth"
    if rate >= 2:
        return 35, f"Moderate growth (+{shown}% headcount growth)", f"+{shown}% growth"
    if rate >= 0:
        return 30, f"Minimal growth (+{shown}% headcount growth)", f"+{shown}% growth"
    if rate >= -2:
        return 20, f"Stagnant/slight decline ({shown}% headcount change)", f"{shown}% change"
    if rate > -5:
        return 10, f"Concerning decline ({shown}% headcount change)", f"{shown}% decline"
    return 5, f"Significant decline ({shown}% headcount change) - layoff risk", f"{shown}% decline"


def score_org_stability(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score headcount trend; falls back to description signals."""
    rate = parse_percentage(job.company_headcount_growth)
    description = job.description
    has_decline = any(p.search(description) for p in ORG_DECLINE_PATTERNS)
    has_growth = any(p.search(description) for p in ORG_GROWTH_PATTERNS)

    if rate is not None:
        score, rationale, actual = _growth_band(rate)
    elif has_decline:
        score, rationale, actual = 15, "Signs of restructuring or layoffs detected", "Concerning"
    elif has_growth:
        score, rationale, actual = 40, "Company appears to be growing/hiring", "Growing"
    else:
        score, rationale, actual = 35, "Organizational stability unclear", "Unknown"

    return build_criterion(
        "org_stability",
        score=score,
        actual_value=actual,
        rationale=rationale,
        missing_data=rate is None and not has_decline and not has_growth,
        growth_rate=rate,
    )


def score_hiring_urgency(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score how urgently the company seems to be hiring."""
    urgency = (job.hiring_urgency or "").strip().lower()

    if urgency in ("high", "urgent"):
        score, actual = 50, "High"
        rationale = job.inflection_point or "High urgency indicated"
    elif urgency == "moderate":
        score, actual, rationale = 35, "Moderate", "Moderate urgency"
    elif urgency in ("low", "exploratory"):
        score, actual, rationale = 15, "Low", "Exploratory hire - lower priority"
    elif first_keyword(job.description, URGENCY_KEYWORDS):
        score, actual = 40, "Elevated"
        rationale = "Urgency signals detected in job description"
    else:
        score, actual, rationale = 25, "Normal", "Standard hiring process assumed"

    return build_criterion(
        "hiring_urgency",
        score=score,
        actual_value=actual,
        rationale=rationale,
        missing_data=not urgency and not job.inflection_point,
    )
