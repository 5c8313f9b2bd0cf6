"""Skill overlap criterion (structured, detected, keyword and extractor paths)."""

from __future__ import annotations

from collections.abc import Callable

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.models.skills import SkillAnalysis
from job_fit_core.text import round_half_up
from job_fit_engine.criteria.base import build_criterion
from job_fit_skills.keyword import match_skills_in_text, normalize_skill_name
from job_fit_skills.matcher import SkillMatcher, skill_fit_ratio
from job_fit_skills.normalizer import SkillNormalizer, get_default_normalizer
from job_fit_skills.requirements import detect_requirements


def _match_rationale(matched: int, total: int, percent: float) -> str:
    summary = f"{matched}/{total} skills ({round_half_up(percent)}%)"
    if percent >= 80:
        return f"Excellent match: {summary}"
    if percent >= 60:
        return f"Strong match: {summary}"
    if percent >= 40:
        return f"Good match: {summary}"
    if percent >= 20:
        return f"Moderate match: {summary}"
    if matched >= 1:
        return f"Limited match: {summary}"
    return "No skill overlap detected"


def _no_user_skills() -> CriterionResult:
    return build_criterion(
        "skill_match",
        score=25,
        actual_value="No skills defined",
        rationale="Please configure your core skills in profile",
        missing_data=True,
        match_method="none",
    )


def _ratio_result(
    matched: list[str],
    unmatched: list[str],
    total: int,
    ratio: float,
    method: str,
    **extras: object,
) -> CriterionResult:
    percent = ratio * 100
    return build_criterion(
        "skill_match",
        score=ratio * 50,
        actual_value=(
            f"{len(matched)}/{total} skills ({round_half_up(percent)}%)" if matched else "No matches"
        ),
        rationale=_match_rationale(len(matched), total, percent),
        matched_skills=matched,
        unmatched_skills=unmatched,
        match_percentage=round_half_up(percent),
        match_method=method,
        **extras,
    )


def job_skill_lists(
    job: JobPayload, normalizer: SkillNormalizer | None = None
) -> tuple[list[str], list[str], str] | None:
    """Required and desired phrases for the matcher cascade, with their source.

    Structured lists on the payload come first; otherwise the requirement
    sections of the description are read. None when neither yields a
    required phrase.
    """
    if job.required_skills:
        return list(job.required_skills), list(job.desired_skills), "structured"
    detected = detect_requirements(job.description_text, normalizer)
    if detected.required:
        return detected.required, list(job.desired_skills) or detected.desired, "detected"
    return None


def _concept_key(normalizer: SkillNormalizer) -> Callable[[str], str]:
    def key(skill: str) -> str:
        entry = normalizer.lookup(skill)
        return entry.canonical if entry is not None else normalize_skill_name(skill)

    return key


def score_skill_match(
    job: JobPayload,
    profile: UserProfile,
    config: ScoringConfig,
    *,
    matcher: SkillMatcher | None = None,
) -> CriterionResult:
    """Score how much the job and the user's skills overlap.

    Required and desired phrases, either given on the payload or read from
    the description's requirement sections, go through the SkillMatcher
    cascade. Otherwise each user skill (one per taxonomy concept) is searched
    for in the description and role requirements.
    """
    user_skills = profile.background.core_skills
    if not user_skills:
        return _no_user_skills()

    matcher = matcher or SkillMatcher.from_config(config)
    skill_lists = job_skill_lists(job, matcher.normalizer)
    if skill_lists is not None:
        required_phrases, desired_phrases, method = skill_lists
        required = matcher.match_required(required_phrases, user_skills)
        desired = matcher.match_desired(desired_phrases, user_skills)
        ratio = skill_fit_ratio(required, desired, config.desired_skill_share)
        return _ratio_result(
            required.matched,
            required.missing,
            required.required_skill_count,
            ratio,
            method,
            matched_desired_skills=desired.matched,
            missing_desired_skills=desired.missing,
        )

    texts = [job.description, " ".join(job.role_requirements)]
    if not any(text.strip() for text in texts):
        return build_criterion(
            "skill_match",
            score=25,
            actual_value="No description",
            rationale="Job description not available for skill comparison",
            missing_data=True,
            match_method="none",
        )

    found = match_skills_in_text(user_skills, texts, key=_concept_key(matcher.normalizer))
    return _ratio_result(found.matched, found.unmatched, found.total, found.ratio, "keyword")


def score_skill_match_from_analysis(
    analysis: SkillAnalysis,
    profile: UserProfile,
    normalizer: SkillNormalizer | None = None,
) -> CriterionResult:
    """Score from an external extractor's answer.

    The extractor's matched phrases are normalized and compared with the
    user's normalized skills by canonical key; the ratio is over the user's
    skills.
    """
    normalizer = normalizer or get_default_normalizer()
    user_skills = normalizer.normalize_user_skills(profile.background.core_skills)
    if not user_skills:
        return _no_user_skills()

    matched_keys = {
        skill.canonical for skill in normalizer.normalize_user_skills(analysis.match.matched)
    }
    matched = [skill.name for skill in user_skills if skill.canonical in matched_keys]
    unmatched = [skill.name for skill in user_skills if skill.canonical not in matched_keys]
    return _ratio_result(
        matched, unmatched, len(user_skills), len(matched) / len(user_skills), "extractor"
    )
