"""Tests for salary and bonus/equity criteria."""

from __future__ import annotations

import pytest

from job_fit_core.config.presets import ScoringConfig, get_preset
from job_fit_engine.criteria.compensation import salary_bounds, score_equity_bonus, score_salary
from tests.mocks.mock_factories import make_job_payload, make_user_profile


@pytest.mark.unit
class TestSalary:
    """Tests for score_salary."""

    def test_midway_to_target(self, config: ScoringConfig) -> None:
        """Halfway between floor and target scores 37.5, rounded up."""
        result = score_salary(make_job_payload(salary_max=175_000), make_user_profile(), config)
        assert result.score == 38
        assert result.actual_value == "$175K"
        assert result.rationale == "Max $175K moderate match, midway to target"
        assert not result.missing_data

    def test_meets_target(self, config: ScoringConfig) -> None:
        """At or above target scores 50."""
        result = score_salary(make_job_payload(salary_max=220_000), make_user_profile(), config)
        assert result.score == 50
        assert "meets/exceeds target" in result.rationale

    def test_min_below_floor_penalty(self, config: ScoringConfig) -> None:
        """A posted minimum below the floor costs points."""
        job = make_job_payload(salary_min=120_000, salary_max=180_000)
        result = score_salary(job, make_user_profile(), config)
        # 25 + 0.6 * 25 = 40, minus round(30/150 * 15) = 3
        assert result.score == 37
        assert result.actual_value == "$120K-$180K"
        assert result.rationale.endswith("; min $120K below floor")
        assert result.extra("job_salary_min") == 120_000

    @pytest.mark.parametrize(
        ("salary_max", "expected", "note"),
        [
            (145_000, 20, "slightly below floor"),
            (136_000, 15, "below floor by ~10%"),
            (121_000, 10, "significantly below floor"),
            (90_000, 5, "well below floor"),
        ],
    )
    def test_below_floor_bands(
        self, config: ScoringConfig, salary_max: int, expected: int, note: str
    ) -> None:
        """Offers under the floor fall into fixed bands."""
        result = score_salary(make_job_payload(salary_max=salary_max), make_user_profile(), config)
        assert result.score == expected
        assert note in result.rationale

    def test_only_min_posted(self, config: ScoringConfig) -> None:
        """Without a max, the min is the ceiling."""
        result = score_salary(make_job_payload(salary_min=200_000), make_user_profile(), config)
        assert result.score == 50
        assert result.actual_value == "$200K"

    def test_not_disclosed(self, config: ScoringConfig) -> None:
        """No salary scores 10 with missing data."""
        result = score_salary(make_job_payload(), make_user_profile(), config)
        assert result.score == 10
        assert result.actual_value == "Not specified"
        assert result.missing_data

    def test_description_names_bounds(self, config: ScoringConfig) -> None:
        """The criterion description carries the user's floor and target."""
        result = score_salary(make_job_payload(), make_user_profile(), config)
        assert result.criteria_description == (
            "Whether the posted max salary meets your $150K minimum and $200K target"
        )

    def test_profile_without_bounds_uses_preset(self) -> None:
        """Unset floor and target come from the preset."""
        profile = make_user_profile({"salary_floor": None, "salary_target": 0})
        config = get_preset("v2", salary_floor=100_000, salary_target=120_000)
        assert salary_bounds(profile, config) == (100_000, 120_000)
        result = score_salary(make_job_payload(salary_max=120_000), profile, config)
        assert result.score == 50

    def test_floor_above_preset_target(self, config: ScoringConfig) -> None:
        """A floor above the preset target raises the target to the floor."""
        profile = make_user_profile({"salary_floor": 250_000, "salary_target": None})
        assert salary_bounds(profile, config) == (250_000, 250_000)

        below = score_salary(make_job_payload(salary_max=210_000), profile, config)
        assert below.score == 10
        assert below.rationale == "Max $210K significantly below floor"

        at_floor = score_salary(make_job_payload(salary_max=250_000), profile, config)
        assert at_floor.score == 50


@pytest.mark.unit
class TestEquityBonus:
    """Tests for score_equity_bonus."""

    def test_both_mentioned(self, config: ScoringConfig) -> None:
        """Bonus and equity together score 50."""
        job = make_job_payload(
            bonus_mentioned=True, equity_mentioned=True, bonus_estimated_percent=0.15
        )
        result = score_equity_bonus(job, make_user_profile(), config)
        assert result.score == 50
        assert result.actual_value == "15% bonus + Equity"

    def test_bonus_only(self, config: ScoringConfig) -> None:
        """One of the two scores 25."""
        job = make_job_payload(bonus_mentioned=True, bonus_estimated_percent=20)
        result = score_equity_bonus(job, make_user_profile(), config)
        assert result.score == 25
        assert result.actual_value == "20% bonus"
        assert result.rationale == "Bonus mentioned, but no equity"

    def test_equity_only(self, config: ScoringConfig) -> None:
        """Equity without bonus scores 25."""
        job = make_job_payload(equity_mentioned="yes", bonus_mentioned=False)
        result = score_equity_bonus(job, make_user_profile(), config)
        assert result.score == 25
        assert result.actual_value == "Equity"
        assert not result.missing_data

    def test_unknown_flags(self, config: ScoringConfig) -> None:
        """Neither flag present scores 0 and is marked missing."""
        result = score_equity_bonus(make_job_payload(), make_user_profile(), config)
        assert result.score == 0
        assert result.actual_value == "Neither mentioned"
        assert result.missing_data
