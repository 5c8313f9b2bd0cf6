"""Weighted aggregation of criterion scores into fit sub-scores and bands."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import (
    CombinedScore,
    CriterionResult,
    FitLabel,
    FitResult,
    SubScoreLabel,
)
from job_fit_core.text import round_half_up
from job_fit_engine.criteria import (
    score_benefits,
    score_business_lifecycle,
    score_equity_bonus,
    score_experience_level,
    score_hiring_urgency,
    score_industry_alignment,
    score_org_stability,
    score_salary,
    score_skill_match,
    score_title_seniority,
    score_workplace_type,
)
from job_fit_skills.matcher import SkillMatcher

CriterionScorer = Callable[[JobPayload, UserProfile, ScoringConfig], CriterionResult]

JOB_TO_USER_SCORERS: tuple[CriterionScorer, ...] = (
    score_salary,
    score_workplace_type,
    score_equity_bonus,
    score_benefits,
    score_business_lifecycle,
    score_org_stability,
    score_hiring_urgency,
)


def sub_score_label(score: int, config: ScoringConfig) -> SubScoreLabel:
    """GOOD / MODERATE / WEAK for a 0-50 sub-score."""
    if score >= config.sub_score_good:
        return SubScoreLabel.GOOD
    if score >= config.sub_score_moderate:
        return SubScoreLabel.MODERATE
    return SubScoreLabel.WEAK


def aggregate(
    results: list[CriterionResult], weights: Mapping[str, float], config: ScoringConfig
) -> FitResult:
    """Weighted sum of criterion scores, rounded half-up.

    Each result in the breakdown is stamped with the weight applied to it.
    """
    breakdown = [result.model_copy(update={"weight": weights[result.key]}) for result in results]
    total = sum(result.score * weights[result.key] for result in results)
    score = max(0, min(50, round_half_up(total)))
    return FitResult(score=score, label=sub_score_label(score, config), breakdown=breakdown)


def calculate_job_to_user_fit(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> FitResult:
    """How well the job meets the user's needs (0-50)."""
    results = [scorer(job, profile, config) for scorer in JOB_TO_USER_SCORERS]
    return aggregate(results, config.job_to_user_weights, config)


def calculate_user_to_job_fit(
    job: JobPayload,
    profile: UserProfile,
    config: ScoringConfig,
    *,
    skill_result: CriterionResult | None = None,
    matcher: SkillMatcher | None = None,
) -> FitResult:
    """How well the user meets the job's needs (0-50).

    ``skill_result`` replaces the local skill scorer, e.g. with a result
    built from an external skill extractor.
    """
    skills = skill_result or score_skill_match(job, profile, config, matcher=matcher)
    results = [
        score_title_seniority(job, profile, config),
        skills,
        score_industry_alignment(job, profile, config),
        score_experience_level(job, profile, config),
    ]
    return aggregate(results, config.user_to_job_weights, config)


def fit_band(score: int, config: ScoringConfig) -> FitLabel:
    """Band label for a 0-100 score; shared by combining and interpretation."""
    for threshold, label in config.fit_bands:
        if score >= threshold:
            return label
    return FitLabel.POOR_FIT


def combine_scores(
    job_to_user: FitResult, user_to_job: FitResult, config: ScoringConfig
) -> CombinedScore:
    """Overall 0-100 score as the sum of both sub-scores, with its band."""
    score = max(0, min(100, job_to_user.score + user_to_job.score))
    return CombinedScore(score=score, label=fit_band(score, config))
