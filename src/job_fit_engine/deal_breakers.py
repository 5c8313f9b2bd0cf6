"""Deal-breaker gate: hard constraints that force a HARD NO label."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from job_fit_core.config.presets import ScoringConfig
from job_fit_core.models.job import JobPayload
from job_fit_core.models.profile import DealBreaker, UserProfile
from job_fit_core.models.result import DealBreakerResult
from job_fit_core.text import format_salary, normalize_workplace_type, parse_percentage
from job_fit_engine.criteria.compensation import salary_bounds

logger = structlog.get_logger()


def _on_site(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> str | None:
    if normalize_workplace_type(job.workplace_type) == "on_site":
        return "Position is on-site only (deal-breaker)"
    return None


def _below_salary_floor(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> str | None:
    floor, _ = salary_bounds(profile, config)
    salary_max = job.salary_max
    if salary_max is not None and 0 < salary_max < floor:
        return (
            f"Maximum salary ${format_salary(salary_max)} is below your "
            f"${format_salary(floor)} floor"
        )
    return None


def _no_equity(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> str | None:
    # Unknown equity (None) is not evidence of no equity
    if profile.preferences.requires_equity and job.equity_mentioned is False:
        return "No equity mentioned (you require equity)"
    return None


def _pre_revenue(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> str | None:
    if job.company_revenue is not None and job.company_revenue == 0:
        return "Pre-revenue company (deal-breaker)"
    return None


def _declining(job: JobPayload, profile: UserProfile, config: ScoringConfig) -> str | None:
    growth = job.company_growth_rate
    if growth is None:
        growth = parse_percentage(job.company_headcount_growth)
    if growth is not None and growth < 0:
        return "Company is declining (negative growth rate)"
    return None


# Evaluation order; the first triggered tag wins
DEAL_BREAKER_CHECKS: tuple[
    tuple[DealBreaker, Callable[[JobPayload, UserProfile, ScoringConfig], str | None]], ...
] = (
    (DealBreaker.ON_SITE, _on_site),
    (DealBreaker.LESS_THAN_150K_BASE, _below_salary_floor),
    (DealBreaker.NO_EQUITY, _no_equity),
    (DealBreaker.PRE_REVENUE, _pre_revenue),
    (DealBreaker.DECLINING_COMPANY, _declining),
)


def check_deal_breakers(
    job: JobPayload, profile: UserProfile, config: ScoringConfig
) -> DealBreakerResult:
    """Evaluate the user's declared deal-breakers against the job.

    Only tags the user declared are checked. A tag whose signal is missing
    from the job is skipped rather than triggered.
    """
    declared = profile.preferences.deal_breakers
    for tag, check in DEAL_BREAKER_CHECKS:
        if tag not in declared:
            continue
        reason = check(job, profile, config)
        if reason:
            logger.info("deal_breaker_triggered", tag=tag.value, reason=reason)
            return DealBreakerResult(triggered=True, reason=reason, tag=tag.value)
    return DealBreakerResult(triggered=False)
