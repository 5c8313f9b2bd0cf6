"""Tests for weighted aggregation and fit bands."""

from __future__ import annotations

import pytest

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.constants import FIT_ACTIONS, JOB_TO_USER_CRITERIA
from job_fit_core.models.result import FitLabel, SubScoreLabel
from job_fit_engine.aggregator import (
    aggregate,
    calculate_job_to_user_fit,
    calculate_user_to_job_fit,
    combine_scores,
    fit_band,
    sub_score_label,
)
from job_fit_engine.interpretation import generate_interpretation
from tests.mocks.mock_factories import (
    make_criterion,
    make_fit_result,
    make_job_payload,
    make_user_profile,
)


@pytest.mark.unit
class TestAggregate:
    """Tests for aggregate."""

    def test_weighted_average_and_weights_stamped(self, config: ScoringConfig) -> None:
        """The sub-score is the weighted sum; each entry carries its weight."""
        scores = dict(zip(JOB_TO_USER_CRITERIA, (10, 50, 0, 0, 25, 35, 25), strict=True))
        results = [make_criterion(key, score) for key, score in scores.items()]
        fit = aggregate(results, config.job_to_user_weights, config)
        # 2.5 + 10 + 0 + 0 + 2.75 + 3.15 + 1.25 = 19.65
        assert fit.score == 20
        assert fit.label == SubScoreLabel.WEAK
        assert [item.weight for item in fit.breakdown] == list(config.job_to_user_weights.values())
        assert results[0].weight is None

    def test_uniform_scores(self, config: ScoringConfig) -> None:
        """Equal criterion scores aggregate to the same value."""
        results = [make_criterion(key, 50) for key in JOB_TO_USER_CRITERIA]
        fit = aggregate(results, config.job_to_user_weights, config)
        assert fit.score == 50
        assert fit.label == SubScoreLabel.GOOD

    @pytest.mark.parametrize(
        ("score", "label"),
        [
            (50, SubScoreLabel.GOOD),
            (40, SubScoreLabel.GOOD),
            (39, SubScoreLabel.MODERATE),
            (25, SubScoreLabel.MODERATE),
            (24, SubScoreLabel.WEAK),
            (0, SubScoreLabel.WEAK),
        ],
    )
    def test_sub_score_label(self, config: ScoringConfig, score: int, label: SubScoreLabel) -> None:
        """Sub-score labels at their boundaries."""
        assert sub_score_label(score, config) == label


@pytest.mark.unit
class TestFitBands:
    """Tests for fit_band and combine_scores."""

    @pytest.mark.parametrize(
        ("score", "label"),
        [
            (100, FitLabel.STRONG_FIT),
            (80, FitLabel.STRONG_FIT),
            (79, FitLabel.GOOD_FIT),
            (70, FitLabel.GOOD_FIT),
            (69, FitLabel.MODERATE_FIT),
            (50, FitLabel.MODERATE_FIT),
            (49, FitLabel.WEAK_FIT),
            (30, FitLabel.WEAK_FIT),
            (29, FitLabel.POOR_FIT),
            (0, FitLabel.POOR_FIT),
        ],
    )
    def test_band_boundaries(self, config: ScoringConfig, score: int, label: FitLabel) -> None:
        """Bands at their boundaries."""
        assert fit_band(score, config) == label

    def test_combine(self, config: ScoringConfig) -> None:
        """The overall score is the sum of both sub-scores."""
        combined = combine_scores(make_fit_result(score=30), make_fit_result(score=45), config)
        assert combined.score == 75
        assert combined.label == FitLabel.GOOD_FIT

    def test_label_and_action_agree_everywhere(self, config: ScoringConfig) -> None:
        """The overall label and the interpretation action never disagree."""
        for total in range(101):
            j2u = make_fit_result(score=total // 2)
            u2j = make_fit_result(score=total - total // 2)
            combined = combine_scores(j2u, u2j, config)
            interpretation = generate_interpretation(j2u, u2j, combined.score, config)
            assert combined.score == total
            assert interpretation.action == FIT_ACTIONS[combined.label]


@pytest.mark.unit
class TestFitCalculation:
    """Tests for the two sub-score calculations."""

    def test_job_to_user(self, config: ScoringConfig) -> None:
        """All seven job-to-user criteria are scored in order."""
        fit = calculate_job_to_user_fit(make_job_payload(), make_user_profile(), config)
        assert [item.key for item in fit.breakdown] == list(JOB_TO_USER_CRITERIA)
        assert fit.score == 20

    def test_user_to_job(self, config: ScoringConfig) -> None:
        """Title 20, skills 33, industry 20, experience 45 aggregate to 28."""
        fit = calculate_user_to_job_fit(make_job_payload(), make_user_profile(), config)
        assert [item.score for item in fit.breakdown] == [20, 33, 20, 45]
        assert fit.score == 28
        assert fit.label == SubScoreLabel.MODERATE

    def test_skill_result_override(self, config: ScoringConfig) -> None:
        """A precomputed skill result replaces the local scorer."""
        override = make_criterion("skill_match", 50, match_method="extractor")
        fit = calculate_user_to_job_fit(
            make_job_payload(), make_user_profile(), config, skill_result=override
        )
        skills = fit.criterion("skill_match")
        assert skills is not None
        assert skills.score == 50
        assert skills.weight == pytest.approx(0.35)
        assert skills.extra("match_method") == "extractor"
