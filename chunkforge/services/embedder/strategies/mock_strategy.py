"""Mock embedder for tests and offline runs. Deterministic vectors derived from the text."""

import hashlib

from chunkforge.services.embedder.base import BaseEmbedder

# Default dimension for mock when model is unknown
MOCK_DEFAULT_DIM = 384


def _mock_dimension_for_model(model: str) -> int:
    if "3-large" in model:
        return 3072
    if "3-small" in model or "1536" in model:
        return 1536
    return MOCK_DEFAULT_DIM


class MockEmbedder(BaseEmbedder):
    """
    Same text -> same vector, across processes (sha256, not hash()). Dimension comes
    from config.dimension, else is inferred from the model name.
    """

    @property
    def strategy_name(self) -> str:
        return "mock"

    def _width(self) -> int:
        return self.config.dimension or _mock_dimension_for_model(self.config.model)

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        dim = self._width()
        result: list[list[float]] = []
        for text in texts:
            seed = int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest()[:4], "big")
            result.append([float((seed + j * 7919) % 1000) / 1000.0 - 0.5 for j in range(dim)])
        return result

    def dimension(self) -> int:
        return self._width()
