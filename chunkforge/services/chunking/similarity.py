"""Similarity scoring and percentile break points for semantic chunking."""

import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from chunkforge.exceptions import ChunkingConfigError
from chunkforge.utils.assertions import is_true, not_empty, not_none


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """
    dot(a, b) / (|a| * |b|). NaN when either vector is all zeros.
    Raises ChunkingConfigError when the vectors differ in length.
    """
    not_none(a, "The first sentence embedding cannot be null")
    not_none(b, "The second sentence embedding cannot be null")
    is_true(len(a) == len(b), "The sentence embeddings must have the same size", ChunkingConfigError)

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for x, y in zip(a, b):
        dot += x * y
        norm_a += x * x
        norm_b += y * y

    denominator = math.sqrt(norm_a) * math.sqrt(norm_b)
    if denominator == 0.0:
        return math.nan
    return dot / denominator


def pairwise_similarities(vectors: Sequence[Sequence[float]], workers: int = 1) -> list[float]:
    """
    Similarity of each adjacent pair (i, i + 1). Result i belongs to pair i
    regardless of how many worker threads evaluate the pairs.
    """
    not_none(vectors, "The list of embeddings cannot be null")
    pairs = range(len(vectors) - 1)
    if workers <= 1 or len(pairs) <= 1:
        return [cosine_similarity(vectors[i], vectors[i + 1]) for i in pairs]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda i: cosine_similarity(vectors[i], vectors[i + 1]), pairs))


def calculate_percentile(values: Sequence[float], percentile: int) -> float:
    """Nearest-rank percentile: the value at 1-based rank ceil(percentile / 100 * n) of the sorted values."""
    not_empty(values, "The list of distances cannot be empty")
    # NaN sorts last, as in a total order on doubles
    ordered = sorted(values, key=lambda v: (math.isnan(v), v))
    rank = math.ceil(percentile / 100.0 * len(ordered))
    return ordered[max(rank, 1) - 1]


def calculate_break_points(similarities: Sequence[float] | None, percentile: int) -> list[int]:
    """Indices whose similarity is at or above the percentile threshold."""
    not_none(similarities, "The list of distances cannot be null")
    not_empty(similarities, "The list of distances cannot be empty")
    is_true(0 < percentile < 100, "The percentile must be between 1 and 99", ChunkingConfigError)

    threshold = calculate_percentile(similarities, percentile)
    return [i for i, value in enumerate(similarities) if value >= threshold]
