"""Tests for ScoringEngine and score_job."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr
from structlog.contextvars import get_contextvars
from structlog.testing import capture_logs

from job_fit_core.config.presets import get_preset
from job_fit_core.constants import HARD_NO_ACTION
from job_fit_core.exceptions import InvalidInputError, ScoringConfigError
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import FitLabel
from job_fit_engine.engine import ScoringEngine, resolve_job_id, score_job
from job_fit_engine.extractors import FallbackSkillExtractor
from job_fit_skills.similarity import cosine_token_similarity
from tests.mocks.mock_factories import (
    make_job_dict,
    make_job_payload,
    make_profile_dict,
    make_skill_analysis,
)

_VOLATILE = {"score_id", "timestamp"}


def _extractor(**kwargs: object) -> MagicMock:
    extractor = MagicMock()
    extractor.analyze_job_skills = AsyncMock(**kwargs)
    return extractor


@pytest.mark.unit
class TestScore:
    """Tests for synchronous scoring."""

    def test_default_job(self) -> None:
        """Job-to-user 20 plus user-to-job 28 is a WEAK FIT."""
        result = ScoringEngine().score(make_job_dict(), make_profile_dict())
        assert result.job_to_user_fit.score == 20
        assert result.user_to_job_fit.score == 28
        assert result.overall_score == 48
        assert result.overall_label == FitLabel.WEAK_FIT
        assert result.job_id == "job-001"
        assert result.preset == "v2"
        assert result.deal_breaker_triggered is None
        assert len(result.job_to_user_fit.breakdown) == 7
        assert len(result.user_to_job_fit.breakdown) == 4

    def test_deterministic(self) -> None:
        """Equal inputs give equal results apart from id and timestamp."""
        engine = ScoringEngine()
        first = engine.score(make_job_dict(), make_profile_dict())
        second = engine.score(make_job_payload(), make_profile_dict())
        assert first.model_dump(exclude=_VOLATILE) == second.model_dump(exclude=_VOLATILE)
        assert first.score_id != second.score_id

    def test_accepts_models(self, sample_job: JobPayload, sample_profile: UserProfile) -> None:
        """Validated models score the same as their raw mappings."""
        result = ScoringEngine().score(sample_job, sample_profile)
        assert result.overall_score == 48
        assert result.job_id == "job-001"

    def test_overall_is_sum_of_sides(self) -> None:
        """The overall score is always the sum of both sub-scores."""
        job = make_job_dict(
            salary_max=220_000,
            bonus_mentioned=True,
            equity_mentioned=True,
            company_stage="Series C",
            job_title="VP Analytics",
            description_text="SQL, Python and Tableau for a B2B SaaS company. 10+ years of experience.",
        )
        result = ScoringEngine().score(job, make_profile_dict())
        assert result.overall_score == result.job_to_user_fit.score + result.user_to_job_fit.score
        assert result.overall_label == FitLabel.STRONG_FIT

    def test_deal_breaker_forces_hard_no(self) -> None:
        """A triggered deal-breaker keeps the numbers but labels HARD NO."""
        job = make_job_dict(workplace_type="On-site")
        profile = make_profile_dict({"deal_breakers": ["on_site"]})
        result = ScoringEngine().score(job, profile)
        assert result.overall_label == FitLabel.HARD_NO
        assert result.deal_breaker_triggered == "Position is on-site only (deal-breaker)"
        assert result.interpretation.action == HARD_NO_ACTION
        assert result.interpretation.risks[0] == result.deal_breaker_triggered
        assert result.overall_score == result.job_to_user_fit.score + result.user_to_job_fit.score

    def test_job_id_fallback(self) -> None:
        """Jobs without an id get a stable content-derived id."""
        job = make_job_dict(job_id=None)
        first = ScoringEngine().score(job, make_profile_dict())
        second = ScoringEngine().score(job, make_profile_dict())
        assert first.job_id.startswith("linkedin_")
        assert first.job_id == second.job_id
        assert resolve_job_id(make_job_payload(job_id=None, source=None)).startswith("job_")

    @pytest.mark.parametrize("bad", ["not a mapping", 42, None, ["job"]])
    def test_non_mapping_input_raises(self, bad: object) -> None:
        """Non-mapping inputs raise InvalidInputError."""
        with pytest.raises(InvalidInputError, match="job_payload"):
            ScoringEngine().score(bad, make_profile_dict())  # type: ignore[arg-type]

    def test_invalid_profile_raises(self) -> None:
        """Mappings that fail validation raise InvalidInputError."""
        with pytest.raises(InvalidInputError, match="Invalid user_profile"):
            ScoringEngine().score(make_job_dict(), {"preferences": "nope"})

    def test_invalid_input_is_type_error(self) -> None:
        """Input errors are TypeErrors for callers that catch broadly."""
        with pytest.raises(TypeError):
            ScoringEngine().score(make_job_dict(), "profile")  # type: ignore[arg-type]

    def test_score_context_cleared(self) -> None:
        """Score and job ids are not left bound after scoring."""
        with capture_logs() as logs:
            ScoringEngine().score(make_job_dict(), make_profile_dict())
        assert "score_id" not in get_contextvars()
        scored = [entry for entry in logs if entry["event"] == "job_scored"]
        assert scored[0]["overall_score"] == 48
        assert scored[0]["label"] == "WEAK FIT"


@pytest.mark.unit
class TestScoreJob:
    """Tests for the score_job convenience function."""

    def test_preset_by_name(self) -> None:
        """A preset name selects the preset."""
        with capture_logs():
            result = score_job(make_job_dict(), make_profile_dict(), config="legacy_v1")
        assert result.preset == "legacy_v1"

    def test_config_instance(self) -> None:
        """A ScoringConfig instance is used as-is."""
        config = get_preset("v2", salary_floor=100_000, salary_target=120_000)
        profile = make_profile_dict({"salary_floor": None, "salary_target": None})
        result = score_job(make_job_dict(salary_max=120_000), profile, config=config)
        salary = result.job_to_user_fit.criterion("salary")
        assert salary is not None
        assert salary.score == 50

    def test_unknown_preset_raises(self) -> None:
        """Unknown preset names raise ScoringConfigError."""
        with pytest.raises(ScoringConfigError):
            score_job(make_job_dict(), make_profile_dict(), config="nope")


@pytest.mark.unit
class TestAsyncScore:
    """Tests for ascore with a skill extractor."""

    @pytest.mark.asyncio
    async def test_extractor_answer_is_used(self) -> None:
        """Extractor matches replace local skill matching."""
        extractor = _extractor(
            return_value=make_skill_analysis(matched=["SQL", "Python", "Tableau"])
        )
        engine = ScoringEngine(skill_extractor=extractor)

        result = await engine.ascore(make_job_dict(), make_profile_dict())

        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.score == 50
        assert skills.extra("match_method") == "extractor"
        assert result.user_to_job_fit.score == 34
        extractor.analyze_job_skills.assert_awaited_once_with(
            "We use SQL and Python to build dashboards.",
            job_url="https://www.linkedin.com/jobs/view/1",
            user_skills=["SQL", "Python", "Tableau"],
            skip_cache=True,
        )

    @pytest.mark.asyncio
    async def test_structured_skills_skip_extractor(self) -> None:
        """Structured skill lists are scored locally without the extractor."""
        extractor = _extractor(return_value=make_skill_analysis(missing=["sql"]))
        job = make_job_dict(required_skills=["SQL"], description_text="We use SQL.")

        result = await ScoringEngine(skill_extractor=extractor).ascore(job, make_profile_dict())

        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.score == 50
        assert skills.extra("match_method") == "structured"
        extractor.analyze_job_skills.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_requirement_sections_skip_extractor(self) -> None:
        """Skills read from requirement sections are scored locally."""
        extractor = _extractor(return_value=make_skill_analysis(matched=["SQL"]))
        job = make_job_dict(description_text="Requirements:\n- SQL\n- Kubernetes\n")

        result = await ScoringEngine(skill_extractor=extractor).ascore(job, make_profile_dict())

        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.extra("match_method") == "detected"
        assert skills.score == 25
        extractor.analyze_job_skills.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_dict_answer_is_validated(self) -> None:
        """Plain mapping answers are parsed into a SkillAnalysis."""
        extractor = _extractor(return_value={"match": {"matched": ["SQL"]}})
        result = await ScoringEngine(skill_extractor=extractor).ascore(
            make_job_dict(), make_profile_dict()
        )
        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.score == 17

    @pytest.mark.asyncio
    async def test_extractor_failure_falls_back(self) -> None:
        """An extractor exception falls back to local matching."""
        extractor = _extractor(side_effect=RuntimeError("boom"))
        with capture_logs() as logs:
            result = await ScoringEngine(skill_extractor=extractor).ascore(
                make_job_dict(), make_profile_dict()
            )
        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.extra("match_method") == "keyword"
        assert skills.score == 33
        assert any(entry["event"] == "skill_extraction_fallback" for entry in logs)

    @pytest.mark.asyncio
    async def test_error_payload_falls_back(self) -> None:
        """An answer carrying an error falls back to local matching."""
        extractor = _extractor(return_value=make_skill_analysis(error="quota exceeded"))
        with capture_logs() as logs:
            result = await ScoringEngine(skill_extractor=extractor).ascore(
                make_job_dict(), make_profile_dict()
            )
        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.extra("match_method") == "keyword"
        fallback = [entry for entry in logs if entry["event"] == "skill_extraction_fallback"]
        assert fallback[0]["error"] == "quota exceeded"

    @pytest.mark.asyncio
    async def test_timeout_falls_back(self) -> None:
        """A slow extractor is abandoned after the timeout."""

        async def _slow(*args: object, **kwargs: object) -> None:
            await asyncio.sleep(5)

        extractor = MagicMock()
        extractor.analyze_job_skills = _slow
        engine = ScoringEngine(skill_extractor=extractor, extractor_timeout_seconds=0.01)

        with capture_logs() as logs:
            result = await engine.ascore(make_job_dict(), make_profile_dict())

        skills = result.user_to_job_fit.criterion("skill_match")
        assert skills is not None
        assert skills.extra("match_method") == "keyword"
        assert any(entry["event"] == "skill_extraction_timeout" for entry in logs)

    @pytest.mark.asyncio
    async def test_extractor_skipped_without_description(self) -> None:
        """No description means no extractor call."""
        extractor = _extractor(return_value=make_skill_analysis())
        await ScoringEngine(skill_extractor=extractor).ascore(
            make_job_dict(description_text=None), make_profile_dict()
        )
        extractor.analyze_job_skills.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ascore_matches_score_without_extractor(self) -> None:
        """Without an extractor, ascore equals score."""
        engine = ScoringEngine()
        sync_result = engine.score(make_job_dict(), make_profile_dict())
        async_result = await engine.ascore(make_job_dict(), make_profile_dict())
        assert sync_result.model_dump(exclude=_VOLATILE) == async_result.model_dump(
            exclude=_VOLATILE
        )


@pytest.mark.unit
class TestScoreBatch:
    """Tests for score_batch."""

    @pytest.mark.asyncio
    async def test_results_keep_input_order(self) -> None:
        """Results come back in input order."""
        jobs = [make_job_dict(job_id=f"job-{i}") for i in range(5)]
        engine = ScoringEngine(max_concurrency=2)

        with capture_logs() as logs:
            results = await engine.score_batch(jobs, make_profile_dict())

        assert [r.job_id for r in results] == [f"job-{i}" for i in range(5)]
        batch = [entry for entry in logs if entry["event"] == "batch_scored"]
        assert batch[0]["jobs_count"] == 5

    @pytest.mark.asyncio
    async def test_empty_batch(self) -> None:
        """An empty batch returns an empty list."""
        assert await ScoringEngine().score_batch([], make_profile_dict()) == []


@pytest.mark.unit
class TestFromSettings:
    """Tests for ScoringEngine.from_settings."""

    def test_local_only(self, mock_settings: MagicMock) -> None:
        """Without a service URL no extractor is wired."""
        engine = ScoringEngine.from_settings(mock_settings)
        assert engine.config.name == "v2"
        assert engine.config.salary_floor == 150_000
        assert engine._skill_extractor is None

    def test_overrides_and_extractor(self, mock_settings: MagicMock) -> None:
        """Settings override preset knobs and wire the HTTP extractor."""
        mock_settings.skill_match_threshold = 0.8
        mock_settings.default_salary_floor = 120_000
        mock_settings.skill_service_url = "http://skills.local"
        mock_settings.skill_service_api_key = SecretStr("token")
        engine = ScoringEngine.from_settings(mock_settings)
        assert engine.config.skill_match_threshold == 0.8
        assert engine.config.salary_floor == 120_000
        assert isinstance(engine._skill_extractor, FallbackSkillExtractor)

    def test_similarity_setting(self, mock_settings: MagicMock) -> None:
        """The similarity setting reaches the preset and the skill matcher."""
        mock_settings.skill_similarity = "cosine"
        engine = ScoringEngine.from_settings(mock_settings)
        assert engine.config.skill_similarity == "cosine"
        assert engine._matcher.similarity is cosine_token_similarity
        assert engine._matcher.normalizer.similarity is cosine_token_similarity

    def test_unknown_preset(self, mock_settings: MagicMock) -> None:
        """An unknown preset in settings is a config error."""
        mock_settings.scoring_preset = "v9"
        with pytest.raises(ScoringConfigError):
            ScoringEngine.from_settings(mock_settings)
