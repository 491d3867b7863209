"""OpenAI Embedding API embedder."""

from openai import OpenAI, OpenAIError

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.config.settings import get_settings
from chunkforge.exceptions import EmbeddingError
from chunkforge.services.embedder.base import BaseEmbedder

# Inputs per request accepted by the API
MAX_INPUTS_PER_REQUEST = 2048


class OpenAIEmbedder(BaseEmbedder):
    """
    OpenAI Embeddings API. Models: text-embedding-3-small, text-embedding-3-large, etc.
    API key from config.api_key or settings.openai_api_key.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        super().__init__(config)
        self._client: OpenAI | None = None

    @property
    def strategy_name(self) -> str:
        return "openai"

    def _get_client(self) -> OpenAI:
        if self._client is None:
            api_key = self.config.api_key or get_settings().openai_api_key or None
            if not api_key:
                raise EmbeddingError("OpenAI API key is required (set in config or CHUNKFORGE_OPENAI_API_KEY)")
            self._client = OpenAI(api_key=api_key)
        return self._client

    def _embed_batch(self, texts: list[str]) -> list[list[float]]:
        client = self._get_client()
        batch_size = min(self.config.batch_size, MAX_INPUTS_PER_REQUEST)
        all_embeddings: list[list[float]] = []
        for i in range(0, len(texts), batch_size):
            batch = texts[i : i + batch_size]
            try:
                response = client.embeddings.create(model=self.config.model, input=batch)
            except OpenAIError as e:
                raise EmbeddingError(f"OpenAI embeddings request failed: {e}", cause=e) from e
            # The API may return items out of order; restore by index
            by_index = {e.index: e.embedding for e in response.data}
            all_embeddings.extend(by_index[j] for j in range(len(batch)))
        return all_embeddings
