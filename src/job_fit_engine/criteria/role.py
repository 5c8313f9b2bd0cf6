"""Role criteria: title seniority, industry alignment, experience level."""

from __future__ import annotations

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.constants import (
    ADJACENT_INDUSTRIES,
    DIRECTOR_KEYWORDS,
    EXPERIENCE_PATTERNS,
    HEAD_KEYWORDS,
    INDUSTRY_KEYWORDS,
    INDUSTRY_LABELS,
    JUNIOR_SIGNALS,
    MANAGER_KEYWORDS,
    SENIOR_EXPERIENCE_YEARS,
    SENIOR_SIGNALS,
    TITLE_GROWTH_BONUS,
    TITLE_GROWTH_KEYWORDS,
    VP_KEYWORDS,
)
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import contains_keyword, first_keyword
from job_fit_engine.criteria.base import build_criterion, format_number

# Larger numbers are almost always salary or headcount text, not tenure
MAX_PLAUSIBLE_REQUIRED_YEARS = 40


def _normalize_label(value: str) -> str:
    return " ".join(value.lower().replace("_", " ").replace("-", " ").split())


def matches_target_role(title: str, target_roles: list[str]) -> bool:
    """Whether a lower-cased title matches any of the user's target roles."""
    if not title:
        return False
    first_word = title.split()[0]
    for role in target_roles:
        normalized = _normalize_label(role)
        if not normalized:
            continue
        if contains_keyword(title, normalized) or contains_keyword(normalized, first_word):
            return True
    return False


def score_title_seniority(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score the title's seniority tier, with a bonus for growth/revenue focus."""
    title = job.title
    if not title:
        return build_criterion(
            "title_seniority",
            score=25,
            actual_value="Unknown",
            rationale="Job title not available",
            missing_data=True,
        )

    is_director = first_keyword(title, DIRECTOR_KEYWORDS) is not None
    if first_keyword(title, VP_KEYWORDS):
        score, rationale = 50, "VP/C-level role aligns with your target seniority"
    elif first_keyword(title, HEAD_KEYWORDS):
        score, rationale = 45, "Head-level role is strong match"
    elif is_director and contains_keyword(title, "senior"):
        score, rationale = 40, "Senior Director role - strong match for your experience"
    elif is_director:
        score, rationale = 35, "Director role - may be lateral or slight step down"
    elif first_keyword(title, MANAGER_KEYWORDS):
        score, rationale = 20, "Manager-level may be below your target seniority"
    elif matches_target_role(title, profile.background.target_roles):
        score, rationale = 35, "Role matches one of your target positions"
    else:
        score, rationale = 25, "Role type assessment needed"

    growth_focus = first_keyword(title, TITLE_GROWTH_KEYWORDS) is not None
    if growth_focus and score < 50:
        score = min(50, score + TITLE_GROWTH_BONUS)
        rationale += "; growth/revenue focus is a plus"

    return build_criterion(
        "title_seniority",
        score=score,
        actual_value=job.job_title or "Unknown",
        rationale=rationale,
        growth_focus=growth_focus,
    )


def detect_industry(text: str) -> str | None:
    """Industry key whose keywords appear most often in ``text``."""
    best: str | None = None
    best_hits = 0
    for key, keywords in INDUSTRY_KEYWORDS.items():
        hits = sum(1 for keyword in keywords if contains_keyword(text, keyword))
        if hits > best_hits:
            best, best_hits = key, hits
    return best


def score_industry_alignment(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score exact (50), adjacent (35) or new-vertical (20) industry fit."""
    user_industries = profile.background.industries
    job_industry = (job.industry or "").strip()

    if not user_industries:
        return build_criterion(
            "industry_alignment",
            score=25,
            actual_value=job_industry or "Unknown",
            rationale="No industry preferences in your profile",
            missing_data=True,
            industry_match="unknown",
        )

    text = " ".join(
        part for part in (job.description, (job.company_name or "").lower(), job_industry.lower()) if part
    )

    detected: str | None = None
    for industry in user_industries:
        key = industry.strip().lower()
        keywords = INDUSTRY_KEYWORDS.get(key.replace(" ", "_")) or (_normalize_label(industry),)
        if first_keyword(text, keywords):
            detected = INDUSTRY_LABELS.get(key.replace(" ", "_"), _normalize_label(industry))
            break

    if detected:
        score, match = 50, "exact"
        rationale = f"Exact industry match: {detected}"
    else:
        lowered = {industry.strip().lower() for industry in user_industries}
        adjacent = any(
            lowered.intersection(group) and first_keyword(text, group) for group in ADJACENT_INDUSTRIES
        )
        if adjacent:
            score, match = 35, "adjacent"
            rationale = "Adjacent industry - transferable experience applies"
        else:
            score, match = 20, "new"
            rationale = "Different industry - may require adaptation"

    if job_industry:
        display = job_industry
        rationale = f"{rationale} (Job industry: {job_industry})"
    else:
        inferred = detect_industry(text)
        if inferred:
            display = INDUSTRY_LABELS[inferred]
        elif match == "exact" and detected:
            display = detected[:1].upper() + detected[1:]
        elif match == "adjacent":
            display = "Adjacent industry"
        else:
            display = "New vertical"

    return build_criterion(
        "industry_alignment",
        score=score,
        actual_value=display,
        rationale=rationale,
        industry_match=match,
    )


def required_years(text: str) -> int | None:
    """Largest plausible "N+ years" requirement found in ``text``."""
    found = [
        int(match.group(1))
        for pattern in EXPERIENCE_PATTERNS
        for match in pattern.finditer(text)
    ]
    plausible = [years for years in found if years <= MAX_PLAUSIBLE_REQUIRED_YEARS]
    return max(plausible) if plausible else None


def score_experience_level(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> CriterionResult:
    """Score the user's years against the job's stated requirement.

    Without a stated number, seniority signals in the description and title
    decide.
    """
    user_years = profile.background.years_of_experience
    if user_years is None:
        user_years = config.default_years_of_experience
    shown = format_number(user_years)

    text = f"{job.description} {job.title}".strip()
    required = required_years(text)
    senior = first_keyword(text, SENIOR_SIGNALS) is not None
    junior = first_keyword(text, JUNIOR_SIGNALS) is not None

    if required is not None:
        actual = f"{required}+ years required"
        if user_years >= required + 5:
            score = 45
            rationale = f"You exceed requirements ({shown} years vs {required}+ required)"
        elif user_years >= required:
            score = 50
            rationale = f"Experience matches requirements ({shown} years vs {required}+ required)"
        elif user_years >= required - 2:
            score = 35
            rationale = f"Slightly below requirements ({shown} vs {required}+ years)"
        else:
            score = 15
            rationale = f"Below experience requirements ({shown} vs {required}+ years)"
    elif senior and not junior:
        actual = "Senior-level role"
        if user_years >= SENIOR_EXPERIENCE_YEARS:
            score, rationale = 45, "Senior role matches your experience level"
        else:
            score, rationale = 25, "Senior role may require more experience"
    elif junior and not senior:
        actual = "Entry/Junior-level role"
        score, rationale = 15, "Role may be below your experience level"
    else:
        actual = "Mid-level or unclear"
        score, rationale = 35, "Experience level not clearly specified"

    return build_criterion(
        "experience_level",
        score=score,
        actual_value=actual,
        rationale=rationale,
        missing_data=required is None and not senior and not junior,
        required_years=required,
        user_years=user_years,
    )
