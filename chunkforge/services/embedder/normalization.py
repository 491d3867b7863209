"""Vector normalization (L2, L1, none)."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Literal

NormType = Literal["L2", "L1", "none"]


def _l2_norm(vec: Sequence[float]) -> float:
    return math.sqrt(sum(x * x for x in vec))


def _l1_norm(vec: Sequence[float]) -> float:
    return sum(abs(x) for x in vec)


def normalize_vector(vec: Sequence[float], norm_type: NormType) -> tuple[list[float], float]:
    """
    Return (normalized_vector, original_norm) as a new list.
    Zero vectors stay zero so that similarity against them is undefined rather than 0.
    For 'none', returns (vec copy, 0.0).
    """
    if norm_type not in ("L2", "L1"):
        return list(vec), 0.0
    n = _l2_norm(vec) if norm_type == "L2" else _l1_norm(vec)
    if n == 0.0:
        return list(vec), 0.0
    return [x / n for x in vec], n


def apply_normalization(
    vectors: Sequence[Sequence[float]], norm_type: NormType
) -> list[tuple[list[float], float]]:
    """Normalize each vector. Returns list of (normalized_vector, original_norm)."""
    return [normalize_vector(v, norm_type) for v in vectors]
