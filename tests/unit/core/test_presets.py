"""Tests for scoring presets."""

from __future__ import annotations

import math

import pytest
from structlog.testing import capture_logs

from job_fit_core.config.presets import (
    PRESET_DEFINITIONS,
    ScoringConfig,
    available_presets,
    get_preset,
)
from job_fit_core.constants import JOB_TO_USER_CRITERIA, USER_TO_JOB_CRITERIA
from job_fit_core.exceptions import ScoringConfigError


@pytest.mark.unit
class TestGetPreset:
    """Tests for preset lookup."""

    def test_v2_weights_sum_to_one(self) -> None:
        """The default preset needs no renormalization."""
        with capture_logs() as logs:
            config = get_preset("v2")
        assert math.isclose(sum(config.job_to_user_weights.values()), 1.0)
        assert math.isclose(sum(config.user_to_job_weights.values()), 1.0)
        assert config.job_to_user_weights["salary"] == 0.25
        assert logs == []

    def test_weight_order_follows_criteria(self) -> None:
        """Weight tables iterate in criterion order."""
        config = get_preset()
        assert tuple(config.job_to_user_weights) == JOB_TO_USER_CRITERIA
        assert tuple(config.user_to_job_weights) == USER_TO_JOB_CRITERIA

    def test_legacy_weights_are_renormalized(self) -> None:
        """Tables that do not sum to 1.0 are scaled with a warning."""
        with capture_logs() as logs:
            config = get_preset("legacy_v1")
        assert math.isclose(sum(config.job_to_user_weights.values()), 1.0)
        assert math.isclose(sum(config.user_to_job_weights.values()), 1.0)
        assert config.job_to_user_weights["salary"] == pytest.approx(0.22 / 0.90)
        events = [entry for entry in logs if entry["event"] == "scoring_weights_renormalized"]
        assert {entry["table"] for entry in events} == {"job_to_user", "user_to_job"}
        assert all(entry["log_level"] == "warning" for entry in events)

    def test_unknown_preset_raises(self) -> None:
        """Unknown names list the available presets."""
        with pytest.raises(ScoringConfigError, match="Available: legacy_v1, v2"):
            get_preset("v9")

    def test_overrides(self) -> None:
        """Individual knobs can be overridden."""
        config = get_preset("v2", skill_match_threshold=0.5, salary_floor=120_000)
        assert config.skill_match_threshold == 0.5
        assert config.salary_floor == 120_000
        assert config.name == "v2"

    def test_skill_similarity_override(self) -> None:
        """Presets default to Jaccard; cosine can be chosen per config."""
        assert get_preset().skill_similarity == "jaccard"
        assert get_preset("v2", skill_similarity="cosine").skill_similarity == "cosine"

    def test_available_presets(self) -> None:
        """Built-in presets are listed sorted."""
        assert available_presets() == sorted(PRESET_DEFINITIONS)
        assert "v2" in available_presets()

    def test_config_is_immutable(self) -> None:
        """Presets cannot be changed after build."""
        config = get_preset()
        with pytest.raises(AttributeError):
            config.salary_floor = 1  # type: ignore[misc]
        with pytest.raises(TypeError):
            config.job_to_user_weights["salary"] = 1.0  # type: ignore[index]


@pytest.mark.unit
class TestScoringConfigValidation:
    """Tests for ScoringConfig validation."""

    def _weights(self) -> dict[str, dict[str, float]]:
        definition = PRESET_DEFINITIONS["v2"]
        return {
            "job_to_user_weights": dict(definition["job_to_user_weights"]),
            "user_to_job_weights": dict(definition["user_to_job_weights"]),
        }

    def test_missing_criterion_raises(self) -> None:
        """Every criterion needs a weight."""
        weights = self._weights()
        del weights["job_to_user_weights"]["benefits"]
        with pytest.raises(ScoringConfigError, match="missing=\\['benefits'\\]"):
            ScoringConfig(name="custom", **weights)

    def test_unknown_criterion_raises(self) -> None:
        """Weights for unknown criteria are rejected."""
        weights = self._weights()
        weights["user_to_job_weights"]["ops_focus"] = 0.1
        with pytest.raises(ScoringConfigError, match="unknown=\\['ops_focus'\\]"):
            ScoringConfig(name="custom", **weights)

    def test_negative_weight_raises(self) -> None:
        """Negative weights are rejected."""
        weights = self._weights()
        weights["job_to_user_weights"]["salary"] = -0.25
        with pytest.raises(ScoringConfigError, match="non-negative"):
            ScoringConfig(name="custom", **weights)

    def test_zero_sum_raises(self) -> None:
        """A table of zeros cannot be normalized."""
        weights = self._weights()
        weights["user_to_job_weights"] = dict.fromkeys(USER_TO_JOB_CRITERIA, 0.0)
        with pytest.raises(ScoringConfigError, match="sum to zero"):
            ScoringConfig(name="custom", **weights)

    def test_threshold_range(self) -> None:
        """The fuzzy threshold must be within [0, 1]."""
        with pytest.raises(ScoringConfigError, match="skill_match_threshold"):
            get_preset("v2", skill_match_threshold=1.2)

    def test_unknown_similarity_raises(self) -> None:
        """Only registered similarity functions are accepted."""
        with pytest.raises(ScoringConfigError, match="skill_similarity"):
            get_preset("v2", skill_similarity="levenshtein")

    def test_salary_order(self) -> None:
        """The target may not be below the floor."""
        with pytest.raises(ScoringConfigError, match="salary_target"):
            get_preset("v2", salary_floor=200_000, salary_target=150_000)

    def test_error_is_value_error(self) -> None:
        """Config errors are ValueErrors for callers that catch broadly."""
        assert issubclass(ScoringConfigError, ValueError)

    def test_as_dict(self) -> None:
        """The dict view carries weights and knobs."""
        view = get_preset().as_dict()
        assert view["name"] == "v2"
        assert view["user_to_job_weights"]["skill_match"] == 0.35
        assert view["skill_similarity"] == "jaccard"
