"""Requirement sections: read required and desired skills out of a description.

Headers such as "Requirements:" or "Nice to have" open a section that runs
until the next recognized header. Each section is split into short phrases
that go through the normalizer. A description without a required or desired
header yields nothing, so skill scoring falls back to the keyword scan.
"""

from __future__ import annotations

import re

from job_fit_core.models.skills import DetectedRequirements
from job_fit_skills.normalizer import SkillNormalizer, get_default_normalizer, to_canonical_key

_LINE_START = r"^[ \t]*(?:[-*#•]+[ \t]*)?"
_QUALIFIER = r"(?:[ \t]+(?:skills?|qualifications?|requirements?|experience))"
_HEADER_END = r"[ \t]*(?::|$)"
_HEADER_FLAGS = re.IGNORECASE | re.MULTILINE

_REQUIRED_HEADER_RE = re.compile(
    _LINE_START
    + r"(?:"
    + rf"(?:required|minimum|essential|must[ \t-]haves?|basic){_QUALIFIER}?"
    + r"|what[ \t]+(?:you(?:['’]ll)?|we(?:['’]re)?)[ \t]+"
    + r"(?:need|(?:are[ \t]+)?looking[ \t]+for|require)"
    + r"|you[ \t]+(?:should|must|will)[ \t]+have"
    + r"|qualifications?"
    + r"|requirements?"
    + r")"
    + _HEADER_END,
    _HEADER_FLAGS,
)
_DESIRED_HEADER_RE = re.compile(
    _LINE_START
    + r"(?:"
    + rf"(?:preferred|desired){_QUALIFIER}?"
    + rf"|(?:bonus|additional|plus){_QUALIFIER}"
    + r"|nice[ \t-]to[ \t-]haves?"
    + r"|it['’]?s[ \t]+a[ \t]+plus(?:[ \t]+if(?:[ \t]+you[ \t]+have)?)?"
    + r"|bonus[ \t]+points(?:[ \t]+if(?:[ \t]+you[ \t]+have)?)?"
    + r"|ideal(?:ly)?"
    + r")"
    + _HEADER_END,
    _HEADER_FLAGS,
)
_BOUNDARY_HEADER_RE = re.compile(
    _LINE_START
    + r"(?:"
    + r"about[ \t]+(?:us|the[ \t]+(?:company|role|team))"
    + r"|benefits|perks(?:[ \t]+(?:and|&)[ \t]+benefits)?"
    + r"|what[ \t]+we[ \t]+offer"
    + r"|responsibilities|what[ \t]+you['’]?ll[ \t]+do"
    + r"|location|salary|compensation"
    + r")"
    + _HEADER_END,
    _HEADER_FLAGS,
)

_ITEM_SPLIT_RE = re.compile(
    r"[\n;•·▪]|,|\.(?=\s|$)|\s+(?:and/or|and|or|as\s+well\s+as)\s+", re.IGNORECASE
)
_BULLET_RE = re.compile(r"^[\s\-*–+>]+")
_PAREN_RE = re.compile(r"\s*\([^)]*\)")
_LEADING_FILLER_RE = re.compile(
    r"^(?:"
    r"\d+\+?\s*(?:-\s*\d+\s*)?years?\s+(?:of\s+)?(?:(?:relevant|professional|hands-on)\s+)?"
    r"(?:experience\s+)?(?:(?:in|with|using)\s+)?"
    r"|(?:strong|solid|deep|proven|excellent|advanced|hands-on|working|demonstrated)\s+"
    r"|(?:familiarity|experience|proficiency|expertise|fluency|knowledge)\s+"
    r"(?:in|with|of|using)\s+"
    r")+",
    re.IGNORECASE,
)
_TRAILING_FILLER_RE = re.compile(
    r"\s+(?:is\s+)?(?:a\s+(?:big\s+)?plus|preferred|required|a\s+must)$", re.IGNORECASE
)
_HAS_LETTER_RE = re.compile(r"[a-z]", re.IGNORECASE)

MAX_UNRESOLVED_WORDS = 3
_RESOLVED_MATCH_TYPES = frozenset({"exact", "canonical", "fuzzy", "synonym"})
_NOISE_PHRASES = frozenset({"etc", "similar", "more", "others", "plus", "preferred", "required"})


def parse_sections(text: str) -> dict[str, str]:
    """Bodies of the required and desired sections, keyed by kind.

    Several sections of the same kind are joined. Kinds with no header are
    absent from the result.
    """
    if not text:
        return {}
    headers = sorted(
        [(m.start(), m.end(), "required") for m in _REQUIRED_HEADER_RE.finditer(text)]
        + [(m.start(), m.end(), "desired") for m in _DESIRED_HEADER_RE.finditer(text)]
        + [(m.start(), m.end(), "boundary") for m in _BOUNDARY_HEADER_RE.finditer(text)]
    )
    bodies: dict[str, list[str]] = {}
    for index, (_, end, kind) in enumerate(headers):
        if kind == "boundary":
            continue
        stop = headers[index + 1][0] if index + 1 < len(headers) else len(text)
        bodies.setdefault(kind, []).append(text[end:stop])
    return {kind: "\n".join(parts) for kind, parts in bodies.items()}


def _clean_item(item: str) -> str:
    cleaned = _BULLET_RE.sub("", item)
    cleaned = _PAREN_RE.sub("", cleaned)
    cleaned = _LEADING_FILLER_RE.sub("", cleaned.strip())
    cleaned = _TRAILING_FILLER_RE.sub("", cleaned)
    return cleaned.strip(" \t:-.")


def extract_skill_phrases(
    section: str, normalizer: SkillNormalizer | None = None
) -> list[tuple[str, str]]:
    """Skill phrases in a section as ``(display name, canonical key)`` pairs.

    Phrases that resolve against the taxonomy use the taxonomy name. Others
    are kept as written when they are short enough to name a single skill.
    The first phrase for a key wins.
    """
    normalizer = normalizer or get_default_normalizer()
    phrases: dict[str, str] = {}
    for item in _ITEM_SPLIT_RE.split(section):
        cleaned = _clean_item(item)
        if len(cleaned) < 2 or not _HAS_LETTER_RE.search(cleaned):
            continue
        if cleaned.lower() in _NOISE_PHRASES:
            continue
        resolved = normalizer.normalize_phrase(cleaned)
        if resolved.match_type in _RESOLVED_MATCH_TYPES:
            name = resolved.normalized or cleaned
            key = resolved.canonical or to_canonical_key(cleaned)
        elif len(cleaned.split()) <= MAX_UNRESOLVED_WORDS:
            name, key = cleaned, to_canonical_key(cleaned)
        else:
            continue
        if key:
            phrases.setdefault(key, name)
    return [(name, key) for key, name in phrases.items()]


def detect_requirements(
    text: str | None, normalizer: SkillNormalizer | None = None
) -> DetectedRequirements:
    """Sort the skill phrases of a description into required and desired.

    A phrase listed in both kinds of section counts as required.
    """
    sections = parse_sections(text or "")
    required = extract_skill_phrases(sections.get("required", ""), normalizer)
    required_keys = {key for _, key in required}
    desired = [
        name
        for name, key in extract_skill_phrases(sections.get("desired", ""), normalizer)
        if key not in required_keys
    ]
    return DetectedRequirements(
        required=[name for name, _ in required],
        desired=desired,
        has_required_section="required" in sections,
        has_desired_section="desired" in sections,
    )
