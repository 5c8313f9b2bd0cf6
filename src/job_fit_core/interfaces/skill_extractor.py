"""Abstract skill-extraction collaborator interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from job_fit_core.models.skills import SkillAnalysis


@runtime_checkable
class SkillExtractor(Protocol):
    """Extracts skills from a job description and matches them to a user."""

    async def analyze_job_skills(
        self,
        description_text: str,
        *,
        job_url: str,
        user_skills: list[str],
        skip_cache: bool = True,
    ) -> SkillAnalysis:
        """Return matched/missing skills, or an analysis with ``error`` set."""
        ...
