"""Base embedder: the embedding capability consumed by the semantic chunker."""

from abc import ABC, abstractmethod

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.config.logging import get_logger
from chunkforge.exceptions import EmbeddingError
from chunkforge.services.embedder.normalization import apply_normalization
from chunkforge.services.embedder.preprocessing import preprocess_texts

logger = get_logger(__name__)

DIMENSION_PROBE = "a"


class BaseEmbedder(ABC):
    """
    Abstract embedder bound to one EmbeddingConfig. Vectors come back one per
    input, in input order, with the same width. Subclasses implement
    _embed_batch only; preprocessing and normalization are applied here.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        self.config = config

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'sentence_transformers'."""
        ...

    @abstractmethod
    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Provider call for already preprocessed texts."""
        ...

    def embed(self, texts: list[str]) -> list[list[float]]:
        """Embed a batch of texts. Returns one vector per text in the same order."""
        if not texts:
            return []
        prepared = preprocess_texts(list(texts), self.config.preprocessing)
        vectors = self._embed_batch(prepared)
        logger.debug("Embedded batch", extra={"strategy": self.strategy_name, "texts": len(prepared)})
        if len(vectors) != len(prepared):
            raise EmbeddingError(
                f"Strategy {self.strategy_name!r} returned {len(vectors)} vectors but expected {len(prepared)}"
            )
        if not self.config.normalize:
            return [list(v) for v in vectors]
        return [vec for vec, _ in apply_normalization(vectors, self.config.normalization_type)]

    def embed_text(self, text: str) -> list[float]:
        """Embed a single text (a batch of one)."""
        return self.embed([text])[0]

    def dimension(self) -> int:
        """Vector width; taken from config when known, otherwise probed."""
        if self.config.dimension is not None:
            return self.config.dimension
        return len(self.embed_text(DIMENSION_PROBE))
