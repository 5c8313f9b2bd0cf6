"""Pluggable similarity function interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SimilarityFunction(Protocol):
    """Scores how alike two skill phrases are, from 0.0 to 1.0."""

    def __call__(self, left: str, right: str) -> float:
        """Compute similarity between two phrases."""
        ...
