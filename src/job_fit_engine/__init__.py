"""Bidirectional job-fit scoring engine."""

from job_fit_engine.engine import ScoringEngine, score_job
from job_fit_engine.export import coerce_fit_label, to_record_fields
from job_fit_engine.extractors import FallbackSkillExtractor, HttpSkillExtractor

__all__ = [
    "FallbackSkillExtractor",
    "HttpSkillExtractor",
    "ScoringEngine",
    "coerce_fit_label",
    "score_job",
    "to_record_fields",
]
