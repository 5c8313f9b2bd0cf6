"""Scoring outputs: criterion results, fit sub-scores, final score."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class SubScoreLabel(StrEnum):
    """Qualitative label for a 0-50 fit sub-score."""

    GOOD = "GOOD"
    MODERATE = "MODERATE"
    WEAK = "WEAK"


class FitLabel(StrEnum):
    """Overall recommendation label for a 0-100 score."""

    STRONG_FIT = "STRONG FIT"
    GOOD_FIT = "GOOD FIT"
    MODERATE_FIT = "MODERATE FIT"
    FAIR_FIT = "FAIR FIT"
    WEAK_FIT = "WEAK FIT"
    POOR_FIT = "POOR FIT"
    HARD_NO = "HARD NO"


class CriterionResult(BaseModel):
    """Score for one independently evaluated criterion.

    Criterion-specific extras (``matched_skills``, ``detected_stage``, ...) are
    kept as extra fields so the serialized shape stays flat.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    key: str = Field(description="Stable criterion identifier used for weights")
    criteria: str = Field(description="Display name")
    criteria_description: str = Field(description="What this criterion measures")
    actual_value: str = Field(description="What was observed in the job posting")
    score: int = Field(ge=0, le=50, description="Criterion score 0-50")
    rationale: str = Field(description="Why the score was given")
    weight: float | None = Field(default=None, description="Weight applied in aggregation")
    missing_data: bool = Field(default=False, description="Scored from defaults, not evidence")

    def extra(self, name: str, default: Any = None) -> Any:  # noqa: ANN401
        """Read a criterion-specific extra field."""
        return (self.model_extra or {}).get(name, default)


class FitResult(BaseModel):
    """One of the two 0-50 fit sub-scores with its breakdown."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=50, description="Weighted sub-score")
    label: SubScoreLabel = Field(description="Qualitative label")
    breakdown: list[CriterionResult] = Field(description="Per-criterion results in order")

    def criterion(self, key: str) -> CriterionResult | None:
        """Look up a criterion result by key."""
        return next((c for c in self.breakdown if c.key == key), None)


class DealBreakerResult(BaseModel):
    """Outcome of the deal-breaker gate."""

    model_config = ConfigDict(frozen=True)

    triggered: bool = Field(default=False)
    reason: str = Field(default="")
    tag: str | None = Field(default=None, description="Deal-breaker tag that fired")


class CombinedScore(BaseModel):
    """Overall 0-100 score and its band label."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    label: FitLabel


class Interpretation(BaseModel):
    """Human-readable reading of a score."""

    model_config = ConfigDict(frozen=True)

    summary: str = Field(description="One or two sentence summary")
    action: str = Field(description="Recommended next step")
    conversation_starters: list[str] = Field(default_factory=list, max_length=3)
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)


class ScoreResult(BaseModel):
    """Terminal artifact of one scoring call."""

    model_config = ConfigDict(frozen=True)

    score_id: str = Field(default_factory=lambda: f"score_{uuid4().hex[:16]}")
    job_id: str = Field(description="Job identifier (payload id or content hash)")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    overall_score: int = Field(ge=0, le=100, description="Sum of the two sub-scores")
    overall_label: FitLabel = Field(description="Band label, or HARD NO on a deal-breaker")
    job_to_user_fit: FitResult = Field(description="How well the job meets the user's needs")
    user_to_job_fit: FitResult = Field(description="How well the user meets the job's needs")
    interpretation: Interpretation
    deal_breaker_triggered: str | None = Field(default=None, description="Deal-breaker reason")
    preset: str = Field(description="Scoring preset used")
