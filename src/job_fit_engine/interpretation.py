"""Human-readable interpretation of a scored job."""

from __future__ import annotations

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.constants import (
    CONCERN_CONVERSATION_STARTERS,
    FIT_ACTIONS,
    HARD_NO_ACTION,
    MAX_CONVERSATION_STARTERS,
    TIER_CONVERSATION_STARTERS,
)
from job_fit_core.models.result import FitResult, Interpretation
from job_fit_engine.aggregator import fit_band

MAX_SUMMARY_STRENGTHS = 3
MAX_SUMMARY_CONCERNS = 2


def _display_name(criteria: str) -> str:
    return criteria.split("(")[0].strip()


def generate_interpretation(
    job_to_user: FitResult,
    user_to_job: FitResult,
    overall_score: int,
    config: ScoringConfig,
) -> Interpretation:
    """Summarize strengths and concerns and recommend an action.

    Strengths are criteria at or above the strength threshold, concerns at
    or below the concern threshold. Concerns on the user-to-job side also
    contribute their rationale as risks. The action comes from the same
    band function used for the overall label.
    """
    strengths: list[str] = []
    concerns: list[str] = []
    concern_keys: list[str] = []
    risks: list[str] = []

    for fit, adds_risk in ((job_to_user, False), (user_to_job, True)):
        for item in fit.breakdown:
            if item.score >= config.strength_threshold:
                strengths.append(_display_name(item.criteria))
            elif item.score <= config.concern_threshold:
                concerns.append(_display_name(item.criteria))
                concern_keys.append(item.key)
                if adds_risk:
                    risks.append(item.rationale)

    summary_parts: list[str] = []
    if strengths:
        summary_parts.append(
            f"Strong alignment on: {', '.join(strengths[:MAX_SUMMARY_STRENGTHS])}."
        )
    if concerns:
        summary_parts.append(f"Areas of concern: {', '.join(concerns[:MAX_SUMMARY_CONCERNS])}.")

    band = fit_band(overall_score, config)
    starters = list(TIER_CONVERSATION_STARTERS.get(band, ()))
    for key in concern_keys:
        for question in CONCERN_CONVERSATION_STARTERS.get(key, ()):
            if question not in starters:
                starters.append(question)

    return Interpretation(
        summary=" ".join(summary_parts) or "Analysis complete.",
        action=FIT_ACTIONS[band],
        conversation_starters=starters[:MAX_CONVERSATION_STARTERS],
        strengths=strengths,
        concerns=concerns,
        risks=risks,
    )


def deal_breaker_interpretation(reason: str, base: Interpretation | None = None) -> Interpretation:
    """Interpretation for a HARD NO; strengths and concerns are kept for context."""
    return Interpretation(
        summary=(
            f"Deal-breaker triggered: {reason}. "
            "However, the detailed scoring is shown above for context."
        ),
        action=HARD_NO_ACTION,
        conversation_starters=[],
        strengths=list(base.strengths) if base else [],
        concerns=list(base.concerns) if base else [],
        risks=[reason, *(base.risks if base else [])],
    )
