"""Keyword scan of free text for a user's skills."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from job_fit_core.text import contains_keyword

_SEPARATORS_RE = re.compile(r"[_-]")
_WHITESPACE_RE = re.compile(r"\s+")

MIN_TOKEN_LENGTH = 4
MIN_TOKEN_SHARE = 0.5


class KeywordMatch(BaseModel):
    """Which user skills appear in the scanned text."""

    model_config = ConfigDict(frozen=True)

    matched: list[str] = Field(default_factory=list)
    unmatched: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of distinct user skills scanned."""
        return len(self.matched) + len(self.unmatched)

    @property
    def ratio(self) -> float:
        """Share of user skills found, 0.0 when there were none."""
        return len(self.matched) / self.total if self.total else 0.0


def normalize_skill_name(skill: str) -> str:
    """Lower-case and turn ``_``/``-`` separators into spaces."""
    spaced = _SEPARATORS_RE.sub(" ", skill.lower())
    return _WHITESPACE_RE.sub(" ", spaced).strip()


def skill_in_text(skill: str, text: str) -> bool:
    """Check whether a (normalized) skill is mentioned in lower-cased text.

    The skill matches as-is, with spaces removed, or hyphenated. A
    multi-word skill also matches when at least half of its long tokens
    appear on their own.
    """
    if not skill or not text:
        return False
    variations = (skill, skill.replace(" ", ""), skill.replace(" ", "-"))
    if any(contains_keyword(text, variation) for variation in variations):
        return True

    tokens = [token for token in skill.split() if len(token) >= MIN_TOKEN_LENGTH]
    if len(tokens) >= 2:
        found = sum(1 for token in tokens if contains_keyword(text, token))
        return found / len(tokens) >= MIN_TOKEN_SHARE
    return False


def match_skills_in_text(
    user_skills: Sequence[str],
    texts: Iterable[str],
    *,
    key: Callable[[str], str] | None = None,
) -> KeywordMatch:
    """Scan each text in turn for the user's skills.

    Skills are reported in normalized (lower-case) form, in profile order.
    Skills sharing a ``key`` (by default the normalized name) count once,
    under their first spelling, and match when any spelling is found.
    """
    groups: dict[str, list[str]] = {}
    for raw in user_skills:
        name = normalize_skill_name(raw)
        if not name:
            continue
        group_key = (key(raw) if key else None) or name
        spellings = groups.setdefault(group_key, [])
        if name not in spellings:
            spellings.append(name)

    lowered = [text.lower() for text in texts if text]
    matched: list[str] = []
    unmatched: list[str] = []
    for spellings in groups.values():
        found = any(skill_in_text(name, text) for name in spellings for text in lowered)
        (matched if found else unmatched).append(spellings[0])
    return KeywordMatch(matched=matched, unmatched=unmatched)
