"""Per-criterion scorers, each returning a 0-50 CriterionResult."""

from job_fit_engine.criteria.benefits import detect_benefits, score_benefits
from job_fit_engine.criteria.company import (
    detect_lifecycle_stage,
    score_business_lifecycle,
    score_hiring_urgency,
    score_org_stability,
)
from job_fit_engine.criteria.compensation import score_equity_bonus, score_salary
from job_fit_engine.criteria.role import (
    score_experience_level,
    score_industry_alignment,
    score_title_seniority,
)
from job_fit_engine.criteria.skills import score_skill_match, score_skill_match_from_analysis
from job_fit_engine.criteria.workplace import score_workplace_type

__all__ = [
    "detect_benefits",
    "detect_lifecycle_stage",
    "score_benefits",
    "score_business_lifecycle",
    "score_equity_bonus",
    "score_experience_level",
    "score_hiring_urgency",
    "score_industry_alignment",
    "score_org_stability",
    "score_salary",
    "score_skill_match",
    "score_skill_match_from_analysis",
    "score_title_seniority",
    "score_workplace_type",
]
