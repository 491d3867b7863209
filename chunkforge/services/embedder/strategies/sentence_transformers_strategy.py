"""Sentence Transformers (local) embedder."""

from sentence_transformers import SentenceTransformer

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.config.logging import get_logger
from chunkforge.services.embedder.base import BaseEmbedder

logger = get_logger(__name__)


class SentenceTransformersEmbedder(BaseEmbedder):
    """
    Local Sentence Transformers model, loaded on first use.
    Default profile model: sentence-transformers/all-MiniLM-L6-v2. No API key required.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        super().__init__(config)
        self._model: SentenceTransformer | None = None

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def _get_model(self) -> SentenceTransformer:
        if self._model is None:
            logger.info("Loading sentence transformer", extra={"model": self.config.model})
            self._model = SentenceTransformer(self.config.model)
        return self._model

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        vectors = self._get_model().encode(
            texts,
            batch_size=self.config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]

    def dimension(self) -> int:
        if self.config.dimension is not None:
            return self.config.dimension
        width = self._get_model().get_sentence_embedding_dimension()
        return width if width is not None else super().dimension()
