"""Benefits package criterion."""

from __future__ import annotations

import re

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.constants import (
    BENEFIT_CATALOG,
    BENEFIT_PATTERNS,
    FEATURED_BENEFIT_LABELS,
    PREFERRED_BENEFIT_LABELS,
)
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import UserProfile
from job_fit_core.models.result import CriterionResult
from job_fit_core.text import contains_keyword, round_half_up
from job_fit_engine.criteria.base import build_criterion

_SEPARATOR_RE = re.compile(r"[_-]")
_WHITESPACE_RE = re.compile(r"\s+")

CATALOG_SIZE = len(BENEFIT_CATALOG)
_WEIGHT_BY_LABEL: dict[str, int] = {label: weight for label, weight, _ in BENEFIT_CATALOG.values()}
_LABEL_BY_LOWER: dict[str, str] = {label.lower(): label for label in _WEIGHT_BY_LABEL}


def normalize_benefit_key(value: str) -> str:
    """Lower-case, separators to spaces, collapsed whitespace."""
    return _WHITESPACE_RE.sub(" ", _SEPARATOR_RE.sub(" ", value.lower())).strip()


def _featured_label(benefit: str) -> str | None:
    text = benefit.lower().strip()
    for fragment, label in FEATURED_BENEFIT_LABELS.items():
        if contains_keyword(text, fragment):
            return label
    return None


def _preferred_label(preference: str) -> str | None:
    key = normalize_benefit_key(preference)
    return PREFERRED_BENEFIT_LABELS.get(key) or _LABEL_BY_LOWER.get(key)


def detect_benefits(job: JobPayload) -> list[str]:
    """Catalog labels found in featured benefits, then in the description.

    Featured benefits are mapped first; the description only adds labels
    not already found. Order is discovery order.
    """
    found: list[str] = []
    for benefit in job.featured_benefits:
        label = _featured_label(benefit)
        if label and label not in found:
            found.append(label)

    description = job.description
    if description:
        for key, (label, _, _) in BENEFIT_CATALOG.items():
            if label in found:
                continue
            if any(pattern.search(description) for pattern in BENEFIT_PATTERNS[key]):
                found.append(label)
    return found


def _default_rationale(count: int) -> str:
    if count >= 8:
        return f"Excellent benefits package: {count}/{CATALOG_SIZE} benefits mentioned"
    if count >= 5:
        return f"Comprehensive benefits: {count}/{CATALOG_SIZE} benefits mentioned"
    if count >= 3:
        return f"Good benefits: {count}/{CATALOG_SIZE} benefits mentioned"
    if count >= 1:
        return f"Limited benefits: {count}/{CATALOG_SIZE} benefits mentioned"
    return "No benefits information provided (common for job listings)"


def score_benefits(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> CriterionResult:
    """Score detected benefits.

    With preferred benefits the score is the preferred share found (x50);
    without, it is half the summed catalog weights, capped at 50.
    """
    detected = detect_benefits(job)
    preferred = profile.preferences.benefits

    if preferred:
        matched_preferred: list[str] = []
        for preference in preferred:
            label = _preferred_label(preference)
            if label and label in detected and label not in matched_preferred:
                matched_preferred.append(label)
        share = len(matched_preferred) / len(preferred)
        score = round_half_up(share * 50)
        rationale = (
            f"{len(matched_preferred)}/{len(preferred)} of your preferred benefits mentioned "
            f"({round_half_up(share * 100)}%)"
        )
        benefits_count = f"{len(matched_preferred)}/{len(preferred)}"
    else:
        matched_preferred = list(detected)
        score = min(50, round_half_up(sum(_WEIGHT_BY_LABEL[label] for label in detected) / 2))
        rationale = _default_rationale(len(detected))
        benefits_count = f"{len(detected)}/{CATALOG_SIZE}"

    return build_criterion(
        "benefits",
        score=score,
        actual_value=", ".join(matched_preferred) if matched_preferred else "Not specified",
        rationale=rationale,
        missing_data=not detected,
        matched_benefits=detected,
        matched_preferred_benefits=matched_preferred,
        preferred_benefits_total=len(preferred),
        benefit_badges=[{"label": label} for label in matched_preferred],
        benefits_count=benefits_count,
    )
