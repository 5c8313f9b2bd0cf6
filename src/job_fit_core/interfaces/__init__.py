"""Public interface re-exports for job_fit_core."""

from job_fit_core.interfaces.similarity import SimilarityFunction
from job_fit_core.interfaces.skill_extractor import SkillExtractor

__all__ = [
    "SimilarityFunction",
    "SkillExtractor",
]
