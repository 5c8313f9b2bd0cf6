"""Phrase similarity functions for fuzzy skill matching."""

from __future__ import annotations

from collections import Counter

import numpy as np

from job_fit_core.interfaces.similarity import SimilarityFunction


def _tokens(text: str) -> list[str]:
    return text.lower().split()


def jaccard_similarity(left: str, right: str) -> float:
    """Token-set Jaccard overlap; identical phrases score 1.0."""
    a = left.lower().strip()
    b = right.lower().strip()
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    tokens_a = set(_tokens(a))
    tokens_b = set(_tokens(b))
    union = tokens_a | tokens_b
    return len(tokens_a & tokens_b) / len(union) if union else 0.0


def cosine_similarity(vec_a: list[float], vec_b: list[float]) -> float:
    """Compute cosine similarity between two vectors."""
    a = np.array(vec_a, dtype=np.float32)
    b = np.array(vec_b, dtype=np.float32)
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return float(np.dot(a, b) / (norm_a * norm_b))


def cosine_token_similarity(left: str, right: str) -> float:
    """Cosine similarity over token-count vectors of two phrases."""
    a = left.lower().strip()
    b = right.lower().strip()
    if a == b:
        return 1.0
    counts_a = Counter(_tokens(a))
    counts_b = Counter(_tokens(b))
    vocabulary = sorted(counts_a.keys() | counts_b.keys())
    if not vocabulary:
        return 0.0
    vec_a = [float(counts_a[token]) for token in vocabulary]
    vec_b = [float(counts_b[token]) for token in vocabulary]
    # float32 accumulation can land a hair above 1.0
    return min(1.0, cosine_similarity(vec_a, vec_b))


def find_top_k_similar(
    query: str,
    candidates: list[tuple[str, str]],
    similarity: SimilarityFunction = jaccard_similarity,
    top_k: int = 1,
) -> list[tuple[str, float]]:
    """Rank candidate phrases by similarity to ``query``.

    Args:
        query: The phrase to match.
        candidates: List of (id, phrase) tuples; one id may appear many times.
        similarity: Similarity function used for scoring.
        top_k: Number of top results to return.

    Returns:
        List of (id, similarity) tuples, best first, one entry per id.
        Ties keep candidate order.
    """
    if not candidates or not query.strip():
        return []

    best: dict[str, float] = {}
    for candidate_id, phrase in candidates:
        score = similarity(query, phrase)
        if score > best.get(candidate_id, -1.0):
            best[candidate_id] = score

    ranked = sorted(best.items(), key=lambda item: item[1], reverse=True)
    return ranked[:top_k]


SIMILARITY_FUNCTIONS: dict[str, SimilarityFunction] = {
    "jaccard": jaccard_similarity,
    "cosine": cosine_token_similarity,
}
