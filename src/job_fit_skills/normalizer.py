"""Skill normalization: map raw skill phrases onto the taxonomy.

Phrases go through an ordered pass chain (exact taxonomy match, canonical
rule, fuzzy similarity, synonym group); the first pass that resolves wins.
Anything left is kept as an unmatched concept with a derived canonical key.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

import structlog

from job_fit_core.interfaces.similarity import SimilarityFunction
from job_fit_core.models.skills import NormalizedSkill, PhraseNormalization, SkillEntry
from job_fit_skills.similarity import find_top_k_similar, jaccard_similarity
from job_fit_skills.taxonomy import (
    CANONICAL_RULES,
    OTHER_CATEGORY,
    SKILL_TAXONOMY,
    SYNONYM_GROUPS,
)

logger = structlog.get_logger()

_PREFIX_RE = re.compile(
    r"^(experience\s+(in|with)|proficiency\s+(in|with)|knowledge\s+of|skilled?\s+(in|at|with))\s*",
    re.IGNORECASE,
)
_SUFFIX_RE = re.compile(r"\s*(experience|skills?|expertise|knowledge|proficiency)$", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"\s*[/&]\s*")
_PAREN_RE = re.compile(r"\s*\([^)]*\)")
_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_FUZZY_THRESHOLD = 0.65
MIN_FUZZY_CONFIDENCE = 0.5
UNMATCHED_CONFIDENCE = 0.3


def to_canonical_key(phrase: str) -> str:
    """Lower-case, strip punctuation and join words with underscores."""
    stripped = _NON_WORD_RE.sub("", (phrase or "").lower().strip())
    return _WHITESPACE_RE.sub("_", stripped.strip())


def clean_skill_phrase(phrase: str) -> str:
    """Strip filler ("experience in ...", "... skills") and parentheticals."""
    if not isinstance(phrase, str):
        return ""
    cleaned = phrase.lower().strip()
    cleaned = _PREFIX_RE.sub("", cleaned)
    cleaned = _SUFFIX_RE.sub("", cleaned)
    cleaned = _SEPARATOR_RE.sub("/", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)
    cleaned = _PAREN_RE.sub("", cleaned)
    return cleaned.strip()


def confidence_label(confidence: float) -> str:
    """Bucket a 0-1 confidence into exact/high/medium/low/uncertain."""
    if confidence >= 0.95:
        return "exact"
    if confidence >= 0.85:
        return "high"
    if confidence >= 0.7:
        return "medium"
    if confidence >= 0.5:
        return "low"
    return "uncertain"


class SkillNormalizer:
    """Resolves skill phrases against a taxonomy."""

    def __init__(
        self,
        taxonomy: Sequence[SkillEntry] = SKILL_TAXONOMY,
        *,
        synonym_groups: Mapping[str, Sequence[str]] = SYNONYM_GROUPS,
        canonical_rules: Mapping[str, str] = CANONICAL_RULES,
        similarity: SimilarityFunction = jaccard_similarity,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> None:
        self._taxonomy = tuple(taxonomy)
        self._similarity = similarity
        self._fuzzy_threshold = fuzzy_threshold
        self._canonical_rules = {key.lower(): value for key, value in canonical_rules.items()}

        self._by_canonical: dict[str, SkillEntry] = {}
        self._lookup: dict[str, SkillEntry] = {}
        self._fuzzy_candidates: list[tuple[str, str]] = []
        for entry in self._taxonomy:
            self._by_canonical.setdefault(entry.canonical, entry)
            for term in (entry.name, entry.canonical, *entry.aliases):
                # First entry claiming a term keeps it
                self._lookup.setdefault(term.lower(), entry)
            for term in (entry.name, *entry.aliases):
                self._fuzzy_candidates.append((entry.canonical, term.lower()))

        self._synonyms: dict[str, SkillEntry] = {}
        for canonical, synonyms in synonym_groups.items():
            entry = self._by_canonical.get(canonical)
            if entry is None:
                continue
            for synonym in synonyms:
                self._synonyms.setdefault(synonym.lower(), entry)

    @property
    def taxonomy(self) -> tuple[SkillEntry, ...]:
        """The taxonomy entries this normalizer resolves against."""
        return self._taxonomy

    @property
    def similarity(self) -> SimilarityFunction:
        """Phrase similarity used by the fuzzy pass."""
        return self._similarity

    def lookup(self, phrase: str) -> SkillEntry | None:
        """Direct taxonomy lookup by name, canonical key or alias."""
        normalized = (phrase or "").lower().strip()
        if not normalized:
            return None
        return self._lookup.get(normalized) or self._by_canonical.get(to_canonical_key(normalized))

    def normalize_phrase(self, phrase: str) -> PhraseNormalization:
        """Run the pass chain over one raw phrase."""
        cleaned = clean_skill_phrase(phrase)
        if len(cleaned) < 2 and not self.lookup(cleaned):
            return PhraseNormalization(
                original=phrase if isinstance(phrase, str) else "",
                normalized=None,
                canonical=None,
                confidence=0.0,
                match_type="none",
            )

        exact = self.lookup(cleaned)
        if exact is not None:
            return self._resolved(phrase, exact, 1.0, "exact")

        rule_target = self._canonical_rules.get(cleaned)
        if rule_target is not None:
            entry = self.lookup(rule_target)
            if entry is not None:
                return self._resolved(phrase, entry, 0.95, "canonical")

        ranked = find_top_k_similar(cleaned, self._fuzzy_candidates, self._similarity, top_k=1)
        if ranked and ranked[0][1] >= self._fuzzy_threshold:
            canonical, score = ranked[0]
            entry = self._by_canonical[canonical]
            return self._resolved(phrase, entry, max(MIN_FUZZY_CONFIDENCE, score), "fuzzy")

        synonym = self._synonyms.get(cleaned)
        if synonym is not None:
            return self._resolved(phrase, synonym, 0.85, "synonym")

        return PhraseNormalization(
            original=phrase,
            normalized=cleaned,
            canonical=to_canonical_key(cleaned),
            category=OTHER_CATEGORY,
            confidence=UNMATCHED_CONFIDENCE,
            match_type="unmatched",
        )

    def normalize_phrases(self, phrases: Iterable[str]) -> list[PhraseNormalization]:
        """Normalize many phrases, deduplicating by canonical key.

        A later phrase replaces an earlier one for the same key only when it
        resolved with higher confidence. Results are ordered best first.
        """
        by_key: dict[str, PhraseNormalization] = {}
        for phrase in phrases:
            if not isinstance(phrase, str) or not phrase.strip():
                continue
            result = self.normalize_phrase(phrase)
            if result.match_type == "none":
                continue
            key = result.canonical or to_canonical_key(phrase)
            existing = by_key.get(key)
            if existing is None or result.confidence > existing.confidence:
                by_key[key] = result
        return sorted(by_key.values(), key=lambda item: item.confidence, reverse=True)

    def normalize_user_skills(self, user_skills: Iterable[str]) -> list[NormalizedSkill]:
        """Map profile skills onto the taxonomy; first occurrence of a key wins."""
        deduped: dict[str, NormalizedSkill] = {}
        for raw in user_skills:
            text = (raw or "").strip() if isinstance(raw, str) else ""
            if not text:
                continue
            entry = self.lookup(text)
            if entry is not None:
                skill = NormalizedSkill(
                    name=entry.name,
                    canonical=entry.canonical,
                    category=entry.category,
                    original=text,
                )
            else:
                canonical = to_canonical_key(text)
                if not canonical:
                    continue
                skill = NormalizedSkill(name=text, canonical=canonical, original=text)
            deduped.setdefault(skill.canonical, skill)
        return list(deduped.values())

    @staticmethod
    def _resolved(
        phrase: str, entry: SkillEntry, confidence: float, match_type: str
    ) -> PhraseNormalization:
        return PhraseNormalization(
            original=phrase,
            normalized=entry.name,
            canonical=entry.canonical,
            category=entry.category,
            confidence=min(1.0, confidence),
            match_type=match_type,  # type: ignore[arg-type]
        )


_default_normalizer: SkillNormalizer | None = None


def get_default_normalizer() -> SkillNormalizer:
    """Shared normalizer over the built-in taxonomy (read-only lookups)."""
    global _default_normalizer  # noqa: PLW0603
    if _default_normalizer is None:
        _default_normalizer = SkillNormalizer()
        logger.debug("skill_normalizer_built", taxonomy_size=len(_default_normalizer.taxonomy))
    return _default_normalizer


def normalize_skill_phrase(phrase: str) -> PhraseNormalization:
    """Normalize one phrase with the default normalizer."""
    return get_default_normalizer().normalize_phrase(phrase)


def normalize_user_skills(user_skills: Iterable[str]) -> list[NormalizedSkill]:
    """Normalize profile skills with the default normalizer."""
    return get_default_normalizer().normalize_user_skills(user_skills)
