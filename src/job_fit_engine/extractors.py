"""Skill-extractor implementations: HTTP service client and a failure-absorbing wrapper."""

from __future__ import annotations

import httpx
import structlog
from pydantic import ValidationError

from job_fit_core.exceptions import SkillExtractionError
from job_fit_core.interfaces.skill_extractor import SkillExtractor
from job_fit_core.models.skills import SkillAnalysis

logger = structlog.get_logger()


class HttpSkillExtractor:
    """Skill extraction via a JSON HTTP service (``POST {base_url}/analyze``)."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with the service base URL and optional bearer token."""
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout_seconds

    async def analyze_job_skills(
        self,
        description_text: str,
        *,
        job_url: str,
        user_skills: list[str],
        skip_cache: bool = True,
    ) -> SkillAnalysis:
        """Ask the service to extract and match skills.

        Raises:
            SkillExtractionError: On transport errors, non-2xx responses or
                an answer that does not parse as a SkillAnalysis.
        """
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        payload = {
            "description_text": description_text,
            "job_url": job_url,
            "user_skills": user_skills,
            "skip_cache": skip_cache,
        }
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._base_url}/analyze", headers=headers, json=payload
                )
                response.raise_for_status()
                analysis = SkillAnalysis.model_validate(response.json())
        except httpx.HTTPError as e:
            raise SkillExtractionError(f"Skill service request failed: {e}") from e
        except (ValidationError, ValueError) as e:
            raise SkillExtractionError(f"Skill service returned an invalid answer: {e}") from e

        logger.debug(
            "skill_analysis_fetched",
            job_url=job_url,
            matched=len(analysis.match.matched),
            missing=len(analysis.match.missing),
        )
        return analysis


class FallbackSkillExtractor:
    """Wrapper that turns extractor failures into an error payload.

    Callers always get a SkillAnalysis back; a failure is reported through
    its ``error`` field instead of an exception.
    """

    def __init__(self, extractor: SkillExtractor) -> None:
        """Initialize with the extractor to guard."""
        self._extractor = extractor

    async def analyze_job_skills(
        self,
        description_text: str,
        *,
        job_url: str,
        user_skills: list[str],
        skip_cache: bool = True,
    ) -> SkillAnalysis:
        """Delegate, converting any exception into ``SkillAnalysis(error=...)``."""
        try:
            return await self._extractor.analyze_job_skills(
                description_text,
                job_url=job_url,
                user_skills=user_skills,
                skip_cache=skip_cache,
            )
        except Exception as e:
            logger.warning("skill_extraction_failed", job_url=job_url, error=str(e))
            return SkillAnalysis(error=str(e) or type(e).__name__)
