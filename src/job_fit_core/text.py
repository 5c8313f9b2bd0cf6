"""Text and number helpers shared by models and scorers."""

from __future__ import annotations

import math
import re
from functools import lru_cache

_NUMBER_RE = re.compile(r"(-?\d[\d,]*(?:\.\d+)?)\s*([kKmM])?(?![a-zA-Z])")
_PERCENT_RE = re.compile(r"([+-]?\d+(?:\.\d+)?)\s*%")
_NEGATIVE_GROWTH_RE = re.compile(r"\b(decline|declined|decrease|decreased|down|shrink|shrank)\b")
_MULTIPLIERS = {"k": 1_000, "m": 1_000_000}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def parse_number(value: object) -> float | None:
    """Parse a number from lenient input such as ``"$150,000"`` or ``"150k"``.

    Returns None for anything that does not contain a number. Booleans are
    not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) or math.isinf(number) else number
    if not isinstance(value, str):
        return None
    match = _NUMBER_RE.search(value.replace("$", ""))
    if not match:
        return None
    try:
        number = float(match.group(1).replace(",", ""))
    except ValueError:
        return None
    suffix = (match.group(2) or "").lower()
    return number * _MULTIPLIERS.get(suffix, 1)


def parse_percentage(text: object) -> float | None:
    """Extract a signed percentage from text like ``"+5% over last 6 months"``.

    An unsigned figure next to a decline word is read as negative.
    """
    if not isinstance(text, str) or not text.strip():
        return None
    match = _PERCENT_RE.search(text)
    if not match:
        return None
    raw = match.group(1)
    rate = float(raw)
    if rate > 0 and not raw.startswith("+") and _NEGATIVE_GROWTH_RE.search(text.lower()):
        rate = -rate
    return rate


def normalize_workplace_type(value: object) -> str:
    """Normalize free-text workplace type to ``remote``, ``hybrid`` or ``on_site``.

    Unrecognized text is returned lower-cased and trimmed; empty input gives "".
    """
    text = str(value or "").lower().strip()
    if "remote" in text:
        return "remote"
    if "hybrid" in text:
        return "hybrid"
    if any(marker in text for marker in ("on-site", "onsite", "on site", "on_site", "in office", "in-office")):
        return "on_site"
    return text


def format_workplace_type(value: str) -> str:
    """Human-readable workplace type."""
    return {"remote": "Remote", "hybrid": "Hybrid", "on_site": "On-site"}.get(value, value)


def format_salary(amount: float) -> str:
    """Format a salary figure for display (150000 -> "150K")."""
    if amount >= 1_000_000:
        return f"{amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"{round_half_up(amount / 1_000)}K"
    return f"{amount:g}"


@lru_cache(maxsize=1024)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\w){re.escape(keyword)}(?!\w)")


def contains_keyword(text: str, keyword: str) -> bool:
    """Word-bounded containment check; ``text`` is expected lower-cased."""
    if not keyword:
        return False
    return _keyword_pattern(keyword.lower()).search(text) is not None


def first_keyword(text: str, keywords: tuple[str, ...] | list[str]) -> str | None:
    """Return the first keyword (in list order) found in ``text``."""
    for keyword in keywords:
        if contains_keyword(text, keyword):
            return keyword
    return None
