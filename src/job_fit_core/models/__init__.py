"""Domain models for job-fit-scorer."""

from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import (
    DealBreaker,
    EquityPreference,
    UserBackground,
    UserPreferences,
    UserProfile,
)
from job_fit_core.models.result import (
    CombinedScore,
    CriterionResult,
    DealBreakerResult,
    FitLabel,
    FitResult,
    Interpretation,
    ScoreResult,
    SubScoreLabel,
)
from job_fit_core.models.skills import (
    DesiredSkillMatch,
    DetectedRequirements,
    NormalizedSkill,
    PhraseNormalization,
    SkillAnalysis,
    SkillEntry,
    SkillMatchDetail,
    SkillMatchResult,
    SkillMatchSummary,
)

__all__ = [
    "CombinedScore",
    "CriterionResult",
    "DealBreaker",
    "DealBreakerResult",
    "DesiredSkillMatch",
    "DetectedRequirements",
    "EquityPreference",
    "FitLabel",
    "FitResult",
    "Interpretation",
    "JobPayload",
    "NormalizedSkill",
    "PhraseNormalization",
    "ScoreResult",
    "SkillAnalysis",
    "SkillEntry",
    "SkillMatchDetail",
    "SkillMatchResult",
    "SkillMatchSummary",
    "SubScoreLabel",
    "UserBackground",
    "UserPreferences",
    "UserProfile",
]
