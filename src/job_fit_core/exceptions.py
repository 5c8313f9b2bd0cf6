"""Custom exception hierarchy for job-fit-scorer."""

from __future__ import annotations


class JobFitError(Exception):
    """Base exception for all job-fit-scorer errors."""


class InvalidInputError(JobFitError, TypeError):
    """Raised when a job payload or user profile is not a usable record."""


class ScoringConfigError(JobFitError, ValueError):
    """Raised when a scoring preset is unknown or structurally invalid."""


class SkillExtractionError(JobFitError):
    """Raised when the external skill-extraction service fails."""
