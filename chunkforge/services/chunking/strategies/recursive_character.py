"""
Recursive character chunking. Splits on the first delimiter (in configured order)
that occurs in the text, merges small fragments with overlap, and recurses into
fragments that are still too large with the delimiters that remain.
"""

from collections.abc import Iterator
from itertools import count

from chunkforge.config.chunking.models import RecursiveChunkingConfig
from chunkforge.config.logging import get_logger
from chunkforge.services.chunking.base import BaseChunker
from chunkforge.services.chunking.models import Chunk
from chunkforge.services.chunking.patterns import DelimiterMatcher, compile_delimiter
from chunkforge.services.chunking.splitting import make_chunk, merge_splits, split_with_delimiter, warn_oversized

logger = get_logger(__name__)


class RecursiveCharacterChunker(BaseChunker):
    """
    Hierarchical chunker, e.g. paragraph -> line -> word -> character.

    Chunk size is a target: when no delimiter is left to shrink a fragment it is
    emitted as-is and a warning is logged.
    """

    def __init__(self, config: RecursiveChunkingConfig | None = None) -> None:
        self.config = config or RecursiveChunkingConfig()
        self._delimiters: tuple[DelimiterMatcher, ...] = tuple(
            compile_delimiter(d) for d in self.config.delimiters
        )

    @property
    def strategy_name(self) -> str:
        return "recursive_character"

    def split(self, content: str) -> list[Chunk]:
        chunks = self._split_content(content, list(self._delimiters), count())
        logger.debug("Recursive split computed", extra={"chars": len(content), "chunks": len(chunks)})
        return chunks

    def _split_content(self, content: str, delimiters: list[DelimiterMatcher], ids: Iterator[int]) -> list[Chunk]:
        remaining = list(delimiters)
        matcher = self._select_delimiter(content, remaining)
        splits, glue = split_with_delimiter(content, matcher, self.config.keep_delimiter)

        chunk_size = self.config.chunk_size
        chunks: list[Chunk] = []
        pending: list[str] = []

        for split in splits:
            if len(split) < chunk_size:
                pending.append(split)
                continue

            if pending:
                chunks.extend(self._merge(pending, glue, ids))
                pending = []

            if not remaining:
                chunk = make_chunk(ids, split, self.config.trim_whitespace)
                if len(chunk.content) > chunk_size:
                    warn_oversized(len(chunk.content), chunk_size)
                chunks.append(chunk)
            else:
                chunks.extend(self._split_content(split, remaining, ids))

        if pending:
            chunks.extend(self._merge(pending, glue, ids))

        return chunks

    @staticmethod
    def _select_delimiter(content: str, delimiters: list[DelimiterMatcher]) -> DelimiterMatcher | None:
        """
        Pick the first delimiter occurring in content and remove it from delimiters.
        The empty delimiter, or no match at all, empties the list: the caller then
        splits into characters and cannot recurse any further.
        """
        for i, delimiter in enumerate(delimiters):
            if delimiter.is_empty:
                delimiters.clear()
                return delimiter
            if delimiter.matches(content):
                del delimiters[i]
                return delimiter
        delimiters.clear()
        return None

    def _merge(self, splits: list[str], glue: str, ids: Iterator[int]) -> list[Chunk]:
        return merge_splits(
            splits,
            glue,
            chunk_size=self.config.chunk_size,
            chunk_overlap=self.config.chunk_overlap,
            trim=self.config.trim_whitespace,
            ids=ids,
        )
