"""Skill subsystem models: taxonomy entries, normalized skills, match results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MatchType = Literal["exact", "canonical", "fuzzy", "synonym", "unmatched", "none"]


class SkillEntry(BaseModel):
    """One canonical skill in the taxonomy."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Human-readable skill name")
    canonical: str = Field(description="Normalized key for deduplication")
    category: str = Field(description="Skill category for grouping")
    aliases: tuple[str, ...] = Field(default=(), description="Alternative names")


class NormalizedSkill(BaseModel):
    """A user skill mapped onto the taxonomy (or a derived key)."""

    model_config = ConfigDict(frozen=True)

    name: str
    canonical: str
    category: str = "Other"
    original: str


class PhraseNormalization(BaseModel):
    """Result of normalizing one extracted skill phrase."""

    model_config = ConfigDict(frozen=True)

    original: str
    normalized: str | None
    canonical: str | None
    category: str = "Other"
    confidence: float = Field(ge=0.0, le=1.0)
    match_type: MatchType


class SkillMatchDetail(BaseModel):
    """How one required or desired phrase was resolved."""

    model_config = ConfigDict(frozen=True)

    name: str
    canonical: str
    category: str = "Other"
    match_type: Literal["exact", "fuzzy", "missing"]
    confidence: float = Field(ge=0.0, le=1.0)
    matched_with: str | None = None


class SkillMatchResult(BaseModel):
    """Required phrases matched against a user's skills."""

    model_config = ConfigDict(frozen=True)

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    details: list[SkillMatchDetail] = Field(default_factory=list)
    user_skill_count: int = 0
    required_skill_count: int = 0


class SkillMatchSummary(BaseModel):
    """Matched/missing lists as returned by an external extractor."""

    model_config = ConfigDict(extra="ignore")

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class SkillAnalysis(BaseModel):
    """Answer from a skill-extraction collaborator."""

    model_config = ConfigDict(extra="ignore")

    match: SkillMatchSummary = Field(default_factory=SkillMatchSummary)
    error: str | None = Field(default=None, description="Set when extraction failed")


class DesiredSkillMatch(BaseModel):
    """Desired ("nice to have") phrases matched against a user's skills."""

    model_config = ConfigDict(frozen=True)

    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    desired_skill_count: int = 0


class DetectedRequirements(BaseModel):
    """Skill phrases read from the requirement sections of a description."""

    model_config = ConfigDict(frozen=True)

    required: list[str] = Field(default_factory=list)
    desired: list[str] = Field(default_factory=list)
    has_required_section: bool = False
    has_desired_section: bool = False
