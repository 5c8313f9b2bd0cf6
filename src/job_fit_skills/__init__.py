"""Skill taxonomy, normalization and matching."""

from job_fit_skills.keyword import KeywordMatch, match_skills_in_text, skill_in_text
from job_fit_skills.matcher import SkillMatcher, skill_fit_ratio
from job_fit_skills.normalizer import (
    SkillNormalizer,
    clean_skill_phrase,
    confidence_label,
    normalize_skill_phrase,
    normalize_user_skills,
    to_canonical_key,
)
from job_fit_skills.requirements import detect_requirements
from job_fit_skills.similarity import (
    SIMILARITY_FUNCTIONS,
    cosine_token_similarity,
    jaccard_similarity,
)
from job_fit_skills.taxonomy import SKILL_TAXONOMY

__all__ = [
    "SIMILARITY_FUNCTIONS",
    "SKILL_TAXONOMY",
    "KeywordMatch",
    "SkillMatcher",
    "SkillNormalizer",
    "clean_skill_phrase",
    "confidence_label",
    "cosine_token_similarity",
    "detect_requirements",
    "jaccard_similarity",
    "match_skills_in_text",
    "normalize_skill_phrase",
    "normalize_user_skills",
    "skill_fit_ratio",
    "skill_in_text",
    "to_canonical_key",
]
