"""Scoring engine: deal-breaker gate, both fit sides, combination, interpretation."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog
from pydantic import BaseModel, ValidationError

from job_fit_core.config.presets import DEFAULT_PRESET, ScoringConfig, get_preset
from job_fit_core.exceptions import InvalidInputError
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult, FitLabel, ScoreResult
from job_fit_core.models.skills import SkillAnalysis
from job_fit_engine.aggregator import (
    calculate_job_to_user_fit,
    calculate_user_to_job_fit,
    combine_scores,
)
from job_fit_engine.criteria.skills import job_skill_lists, score_skill_match_from_analysis
from job_fit_engine.deal_breakers import check_deal_breakers
from job_fit_engine.extractors import FallbackSkillExtractor, HttpSkillExtractor
from job_fit_engine.interpretation import deal_breaker_interpretation, generate_interpretation
from job_fit_engine.observability.logging import bind_score_context, clear_score_context
from job_fit_skills.matcher import SkillMatcher

if TYPE_CHECKING:
    from job_fit_core.config.settings import Settings
    from job_fit_core.interfaces.skill_extractor import SkillExtractor

logger = structlog.get_logger()


def _coerce(value: object, model: type[BaseModel], label: str) -> Any:  # noqa: ANN401
    """Validate a model instance or plain mapping into ``model``.

    Raises:
        InvalidInputError: If ``value`` is not a mapping or fails validation.
    """
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        msg = f"{label} must be a mapping or {model.__name__}, got {type(value).__name__}"
        raise InvalidInputError(msg)
    try:
        return model.model_validate(dict(value))
    except ValidationError as e:
        msg = f"Invalid {label}: {e}"
        raise InvalidInputError(msg) from e


def coerce_job(value: JobPayload | Mapping[str, Any]) -> JobPayload:
    """Accept a JobPayload or a raw mapping."""
    return _coerce(value, JobPayload, "job_payload")  # type: ignore[no-any-return]


def coerce_profile(value: UserProfile | Mapping[str, Any]) -> UserProfile:
    """Accept a UserProfile or a raw mapping."""
    return _coerce(value, UserProfile, "user_profile")  # type: ignore[no-any-return]


def resolve_job_id(job: JobPayload) -> str:
    """Payload id, else a stable id derived from the job's content."""
    if job.job_id:
        return job.job_id
    return f"{job.source or 'job'}_{job.content_hash()[:12]}"


class ScoringEngine:
    """Scores jobs against a user profile under one immutable preset.

    ``score`` is synchronous and pure. ``ascore`` additionally consults an
    optional SkillExtractor and falls back to local skill matching on any
    failure, error payload or timeout.
    """

    def __init__(
        self,
        config: ScoringConfig | None = None,
        *,
        skill_extractor: SkillExtractor | None = None,
        matcher: SkillMatcher | None = None,
        extractor_timeout_seconds: float = 10.0,
        max_concurrency: int = 10,
    ) -> None:
        """Initialize with a preset and optional skill collaborators."""
        self._config = config or get_preset(DEFAULT_PRESET)
        self._skill_extractor = skill_extractor
        self._matcher = matcher or SkillMatcher.from_config(self._config)
        self._extractor_timeout = extractor_timeout_seconds
        self._max_concurrency = max_concurrency

    @classmethod
    def from_settings(cls, settings: Settings) -> ScoringEngine:
        """Build an engine from application settings.

        The HTTP skill extractor is only wired when a service URL is set.
        """
        overrides: dict[str, Any] = {
            "salary_floor": settings.default_salary_floor,
            "salary_target": settings.default_salary_target,
        }
        if settings.skill_match_threshold is not None:
            overrides["skill_match_threshold"] = settings.skill_match_threshold
        if settings.skill_similarity is not None:
            overrides["skill_similarity"] = settings.skill_similarity
        config = get_preset(settings.scoring_preset, **overrides)

        extractor: SkillExtractor | None = None
        if settings.skill_service_url:
            api_key = (
                settings.skill_service_api_key.get_secret_value()
                if settings.skill_service_api_key
                else None
            )
            extractor = FallbackSkillExtractor(
                HttpSkillExtractor(
                    settings.skill_service_url,
                    api_key=api_key,
                    timeout_seconds=settings.skill_service_timeout_seconds,
                )
            )
        return cls(
            config,
            skill_extractor=extractor,
            extractor_timeout_seconds=settings.skill_service_timeout_seconds,
        )

    @property
    def config(self) -> ScoringConfig:
        """The preset this engine scores with."""
        return self._config

    def score(
        self,
        job_payload: JobPayload | Mapping[str, Any],
        user_profile: UserProfile | Mapping[str, Any],
    ) -> ScoreResult:
        """Score one job with local skill matching.

        Raises:
            InvalidInputError: If either input is not a usable record.
        """
        job = coerce_job(job_payload)
        profile = coerce_profile(user_profile)
        return self._build_result(job, profile)

    async def ascore(
        self,
        job_payload: JobPayload | Mapping[str, Any],
        user_profile: UserProfile | Mapping[str, Any],
    ) -> ScoreResult:
        """Score one job, consulting the skill extractor when configured."""
        job = coerce_job(job_payload)
        profile = coerce_profile(user_profile)
        skill_result = await self._extract_skill_result(job, profile)
        return self._build_result(job, profile, skill_result=skill_result)

    async def score_batch(
        self,
        jobs: Sequence[JobPayload | Mapping[str, Any]],
        user_profile: UserProfile | Mapping[str, Any],
    ) -> list[ScoreResult]:
        """Score many jobs concurrently; results keep the input order."""
        profile = coerce_profile(user_profile)
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _score_one(job: JobPayload | Mapping[str, Any]) -> ScoreResult:
            async with semaphore:
                return await self.ascore(job, profile)

        results = await asyncio.gather(*[_score_one(job) for job in jobs])
        logger.info("batch_scored", jobs_count=len(results))
        return list(results)

    async def _extract_skill_result(
        self, job: JobPayload, profile: UserProfile
    ) -> CriterionResult | None:
        """Skill criterion from the extractor, or None to use local matching."""
        user_skills = list(profile.background.core_skills)
        if self._skill_extractor is None or not user_skills or not job.description_text:
            return None
        # Skill lists on the payload or in the description sections take precedence
        if job_skill_lists(job, self._matcher.normalizer) is not None:
            return None

        try:
            raw = await asyncio.wait_for(
                self._skill_extractor.analyze_job_skills(
                    job.description_text,
                    job_url=job.job_url or "",
                    user_skills=user_skills,
                    skip_cache=True,
                ),
                timeout=self._extractor_timeout,
            )
            analysis = raw if isinstance(raw, SkillAnalysis) else SkillAnalysis.model_validate(raw)
        except TimeoutError:
            logger.warning(
                "skill_extraction_timeout",
                job_url=job.job_url,
                timeout=self._extractor_timeout,
            )
            return None
        except Exception as e:
            logger.warning("skill_extraction_fallback", job_url=job.job_url, error=str(e))
            return None

        if analysis.error:
            logger.warning("skill_extraction_fallback", job_url=job.job_url, error=analysis.error)
            return None
        return score_skill_match_from_analysis(analysis, profile, self._matcher.normalizer)

    def _build_result(
        self,
        job: JobPayload,
        profile: UserProfile,
        *,
        skill_result: CriterionResult | None = None,
    ) -> ScoreResult:
        config = self._config
        score_id = f"score_{uuid4().hex[:16]}"
        job_id = resolve_job_id(job)
        bind_score_context(score_id, job_id)
        try:
            job_to_user = calculate_job_to_user_fit(job, profile, config)
            user_to_job = calculate_user_to_job_fit(
                job, profile, config, skill_result=skill_result, matcher=self._matcher
            )
            combined = combine_scores(job_to_user, user_to_job, config)
            interpretation = generate_interpretation(
                job_to_user, user_to_job, combined.score, config
            )

            deal_breaker = check_deal_breakers(job, profile, config)
            label = combined.label
            if deal_breaker.triggered:
                label = FitLabel.HARD_NO
                interpretation = deal_breaker_interpretation(deal_breaker.reason, interpretation)

            result = ScoreResult(
                score_id=score_id,
                job_id=job_id,
                overall_score=combined.score,
                overall_label=label,
                job_to_user_fit=job_to_user,
                user_to_job_fit=user_to_job,
                interpretation=interpretation,
                deal_breaker_triggered=deal_breaker.reason if deal_breaker.triggered else None,
                preset=config.name,
            )
            logger.info(
                "job_scored",
                overall_score=result.overall_score,
                label=result.overall_label.value,
                job_to_user=job_to_user.score,
                user_to_job=user_to_job.score,
                deal_breaker=deal_breaker.tag,
            )
            return result
        finally:
            clear_score_context()


def score_job(
    job_payload: JobPayload | Mapping[str, Any],
    user_profile: UserProfile | Mapping[str, Any],
    *,
    config: ScoringConfig | str | None = None,
) -> ScoreResult:
    """Score one job against a user profile.

    ``config`` may be a ScoringConfig, a preset name, or None for the
    default preset.

    Raises:
        InvalidInputError: If either input is not a usable record.
        ScoringConfigError: If ``config`` names an unknown preset.
    """
    if isinstance(config, str):
        config = get_preset(config)
    return ScoringEngine(config).score(job_payload, user_profile)
