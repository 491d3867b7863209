"""
Semantic chunking. Sentences are embedded and consecutive similarities decide
where chunks end:

1. split text into sentences (regex)
2. build a context window of buffer_size sentences on each side
3. embed the sentences in one batch
4. cosine similarity of each adjacent pair
5. break points: pairs at or above the configured similarity percentile
6. join each group of sentences into a chunk
"""

import re
from collections import deque
from collections.abc import Sequence

from chunkforge.config.chunking.models import SemanticChunkingConfig
from chunkforge.config.embedding.static import resolve_embedding_config
from chunkforge.config.logging import get_logger
from chunkforge.config.settings import get_settings
from chunkforge.exceptions import ChunkingConfigError, EmbeddingError
from chunkforge.services.chunking.base import BaseChunker
from chunkforge.services.chunking.models import Chunk, Sentence
from chunkforge.services.chunking.patterns import RegexMatcher, split_keeping_matches
from chunkforge.services.chunking.similarity import calculate_break_points, pairwise_similarities
from chunkforge.services.embedder.base import BaseEmbedder
from chunkforge.services.embedder.strategies import get_embedder
from chunkforge.utils.assertions import is_true, not_empty, not_none

logger = get_logger(__name__)


class SemanticChunker(BaseChunker):
    """
    Groups sentences by embedding similarity instead of size. The embedder is
    injected; without one, the config's embedding profile (or the settings
    default) is resolved and built.
    """

    def __init__(self, embedder: BaseEmbedder | None = None, config: SemanticChunkingConfig | None = None) -> None:
        self.config = config or SemanticChunkingConfig()
        if embedder is None:
            profile = self.config.embedding_profile or get_settings().default_embedding_profile
            embedder = get_embedder(resolve_embedding_config(profile))
        self.embedder = embedder
        self._sentence_pattern = re.compile(self.config.sentence_splitting_regex)

    @property
    def strategy_name(self) -> str:
        return "semantic"

    def split(self, content: str) -> list[Chunk]:
        sentences = self.split_sentences(content, self._sentence_pattern)
        if len(sentences) <= 1:
            return [Chunk(id=0, content=sentences[0].content if sentences else content)]

        sentences = self.combine_sentences(sentences, self.config.buffer_size)
        sentences = self.embed_sentences(self.embedder, sentences)
        similarities = self.calculate_similarities(sentences)
        break_points = calculate_break_points(similarities, self.config.percentile)
        logger.debug(
            "Semantic split computed",
            extra={"sentences": len(sentences), "break_points": len(break_points)},
        )
        return self.generate_chunks(sentences, break_points)

    @staticmethod
    def split_sentences(content: str, regex: "str | re.Pattern[str]") -> list[Sentence]:
        """
        Split content into indexed sentences. Trailing empty pieces are dropped;
        groups in the regex do not add pieces.
        """
        pieces = split_keeping_matches(content, RegexMatcher(regex))[::2]
        while pieces and pieces[-1] == "":
            pieces.pop()
        return [Sentence.of(i, piece) for i, piece in enumerate(pieces)]

    @staticmethod
    def combine_sentences(sentences: list[Sentence] | None, buffer_size: int | None) -> list[Sentence]:
        """
        Set each sentence's `combined` to the space-joined sentences in
        [i - buffer_size, i + buffer_size], clipped to the list. The window slides:
        one sentence enters at the back and one leaves at the front per step.
        """
        not_none(sentences, "The list of sentences cannot be null")
        not_empty(sentences, "The list of sentences cannot be empty")
        not_none(buffer_size, "The buffer size cannot be null")
        is_true(buffer_size > 0, "The buffer size must be greater than 0", ChunkingConfigError)
        is_true(
            buffer_size < len(sentences),
            "The buffer size must be smaller than the sentences size",
            ChunkingConfigError,
        )

        n = len(sentences)
        window: deque[str] = deque(s.content for s in sentences[: buffer_size + 1])

        for i, sentence in enumerate(sentences):
            sentence.combined = " ".join(window)
            incoming = i + buffer_size + 1
            if incoming < n:
                window.append(sentences[incoming].content)
            if i >= buffer_size:
                window.popleft()

        return sentences

    def embed_sentences(self, embedder: BaseEmbedder, sentences: list[Sentence]) -> list[Sentence]:
        """Embed all sentences in one call and attach the vectors in order."""
        if self.config.embed_source == "combined":
            texts = [s.combined for s in sentences]
        else:
            texts = [s.content for s in sentences]

        vectors = embedder.embed(texts)
        if len(vectors) != len(sentences):
            raise EmbeddingError(f"Embedder returned {len(vectors)} vectors but expected {len(sentences)}")

        widths = {len(v) for v in vectors}
        is_true(len(widths) <= 1, "The sentence embeddings must have the same size", ChunkingConfigError)

        for sentence, vector in zip(sentences, vectors):
            sentence.embedding = list(vector)
        return sentences

    def calculate_similarities(self, sentences: Sequence[Sentence]) -> list[float]:
        """Cosine similarity between each sentence and the next."""
        return pairwise_similarities([s.embedding for s in sentences], workers=self.config.similarity_workers)

    @staticmethod
    def generate_chunks(sentences: list[Sentence] | None, break_points: list[int] | None) -> list[Chunk]:
        """Group sentences, each break point being the last index of its group."""
        not_none(sentences, "The list of sentences cannot be null")
        not_empty(sentences, "The list of sentences cannot be empty")
        not_none(break_points, "The list of break points cannot be null")

        chunks: list[Chunk] = []
        start = 0
        for chunk_id, end in enumerate([*break_points, len(sentences) - 1]):
            group = sentences[start : end + 1]
            chunks.append(Chunk(id=chunk_id, content=" ".join(s.content for s in group)))
            start = end + 1
        return chunks
