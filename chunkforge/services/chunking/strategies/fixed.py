"""Fixed-size chunking on a single delimiter, no recursion."""

from itertools import count

from chunkforge.config.chunking.models import FixedChunkingConfig
from chunkforge.services.chunking.base import BaseChunker
from chunkforge.services.chunking.models import Chunk
from chunkforge.services.chunking.patterns import compile_delimiter
from chunkforge.services.chunking.splitting import merge_splits, split_with_delimiter


class FixedChunker(BaseChunker):
    """
    Split on the configured delimiter and merge fragments up to chunk_size with
    chunk_overlap. Fragments larger than chunk_size are kept whole.
    """

    def __init__(self, config: FixedChunkingConfig | None = None) -> None:
        self.config = config or FixedChunkingConfig()
        self._matcher = compile_delimiter(self.config.delimiter)

    @property
    def strategy_name(self) -> str:
        return "fixed"

    def split(self, content: str) -> list[Chunk]:
        if self._matcher.is_empty or self._matcher.matches(content):
            splits, glue = split_with_delimiter(content, self._matcher, self.config.keep_delimiter)
        else:
            splits, glue = ([content] if content else []), ""
        return merge_splits(
            splits,
            glue,
            chunk_size=self.config.chunk_size,
            chunk_overlap=self.config.chunk_overlap,
            trim=self.config.trim_whitespace,
            ids=count(),
        )
