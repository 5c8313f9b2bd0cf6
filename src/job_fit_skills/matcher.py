"""Required/desired skill matching against a user's normalized skills."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from job_fit_core.interfaces.similarity import SimilarityFunction
from job_fit_core.models.skills import (
    DesiredSkillMatch,
    NormalizedSkill,
    SkillMatchDetail,
    SkillMatchResult,
)
from job_fit_skills.normalizer import SkillNormalizer, get_default_normalizer, to_canonical_key
from job_fit_skills.similarity import SIMILARITY_FUNCTIONS, jaccard_similarity

if TYPE_CHECKING:
    from job_fit_core.config.presets import ScoringConfig

DEFAULT_MATCH_THRESHOLD = 0.7


class SkillMatcher:
    """Matches job skill phrases to a user's skills.

    Per phrase, the cascade is: canonical-key equality, case-insensitive
    name equality, then similarity at or above ``threshold`` against each
    user skill. The first success wins.
    """

    def __init__(
        self,
        *,
        normalizer: SkillNormalizer | None = None,
        similarity: SimilarityFunction = jaccard_similarity,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
    ) -> None:
        self._normalizer = normalizer or get_default_normalizer()
        self._similarity = similarity
        self._threshold = threshold

    @classmethod
    def from_config(cls, config: ScoringConfig) -> SkillMatcher:
        """Matcher using a preset's similarity function and threshold.

        The normalizer's fuzzy pass uses the same similarity function.
        """
        similarity = SIMILARITY_FUNCTIONS[config.skill_similarity]
        normalizer = (
            get_default_normalizer()
            if similarity is jaccard_similarity
            else SkillNormalizer(similarity=similarity)
        )
        return cls(
            normalizer=normalizer,
            similarity=similarity,
            threshold=config.skill_match_threshold,
        )

    @property
    def threshold(self) -> float:
        """Minimum similarity for a fuzzy match."""
        return self._threshold

    @property
    def similarity(self) -> SimilarityFunction:
        """Phrase similarity used by the fuzzy step."""
        return self._similarity

    @property
    def normalizer(self) -> SkillNormalizer:
        """Normalizer used for user skills and job phrases."""
        return self._normalizer

    def match_required(
        self, required_skills: Sequence[str], user_skills: Sequence[str]
    ) -> SkillMatchResult:
        """Match required phrases; ``ratio`` is matched over required."""
        phrases = [p.strip() for p in required_skills if isinstance(p, str) and p.strip()]
        normalized_user = self._normalizer.normalize_user_skills(user_skills)
        if not phrases:
            return SkillMatchResult(user_skill_count=len(normalized_user))

        details = [self._match_phrase(phrase, normalized_user) for phrase in phrases]
        matched = [d.name for d in details if d.match_type != "missing"]
        return SkillMatchResult(
            matched=matched,
            missing=[d.name for d in details if d.match_type == "missing"],
            ratio=len(matched) / len(phrases),
            details=details,
            user_skill_count=len(normalized_user),
            required_skill_count=len(phrases),
        )

    def match_desired(
        self, desired_skills: Sequence[str], user_skills: Sequence[str]
    ) -> DesiredSkillMatch:
        """Match nice-to-have phrases with the same cascade."""
        phrases = [p.strip() for p in desired_skills if isinstance(p, str) and p.strip()]
        if not phrases:
            return DesiredSkillMatch()
        normalized_user = self._normalizer.normalize_user_skills(user_skills)
        details = [self._match_phrase(phrase, normalized_user) for phrase in phrases]
        matched = [d.name for d in details if d.match_type != "missing"]
        return DesiredSkillMatch(
            matched=matched,
            missing=[d.name for d in details if d.match_type == "missing"],
            ratio=len(matched) / len(phrases),
            desired_skill_count=len(phrases),
        )

    def _match_phrase(self, phrase: str, user_skills: list[NormalizedSkill]) -> SkillMatchDetail:
        resolved = self._normalizer.normalize_phrase(phrase)
        if resolved.canonical and resolved.match_type != "unmatched":
            canonical = resolved.canonical
            category = resolved.category
        else:
            canonical = to_canonical_key(phrase)
            category = resolved.category
        name_lower = phrase.lower()

        for skill in user_skills:
            if skill.canonical == canonical:
                return SkillMatchDetail(
                    name=phrase,
                    canonical=canonical,
                    category=category,
                    match_type="exact",
                    confidence=1.0,
                    matched_with=skill.name,
                )
        for skill in user_skills:
            if skill.name.lower() == name_lower or skill.original.lower() == name_lower:
                return SkillMatchDetail(
                    name=phrase,
                    canonical=canonical,
                    category=category,
                    match_type="exact",
                    confidence=1.0,
                    matched_with=skill.name,
                )
        for skill in user_skills:
            score = self._similarity(name_lower, skill.name.lower())
            if score >= self._threshold:
                return SkillMatchDetail(
                    name=phrase,
                    canonical=canonical,
                    category=category,
                    match_type="fuzzy",
                    confidence=min(1.0, score),
                    matched_with=skill.name,
                )
        return SkillMatchDetail(
            name=phrase,
            canonical=canonical,
            category=category,
            match_type="missing",
            confidence=0.0,
        )


def skill_fit_ratio(
    required: SkillMatchResult, desired: DesiredSkillMatch, desired_share: float
) -> float:
    """Blend required and desired ratios into one 0-1 skill fit.

    Desired skills only count when the job lists some; otherwise the
    required ratio stands alone.
    """
    if desired.desired_skill_count == 0:
        return required.ratio
    return (1.0 - desired_share) * required.ratio + desired_share * desired.ratio
