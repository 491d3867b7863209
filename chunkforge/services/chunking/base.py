"""Base chunker contract."""

from abc import ABC, abstractmethod

from chunkforge.services.chunking.models import Chunk


class BaseChunker(ABC):
    """Splits text into an ordered list of chunks with ids 0, 1, 2, ..."""

    @abstractmethod
    def split(self, content: str) -> list[Chunk]:
        """Split content. Text with any non-whitespace character yields at least one chunk."""
        ...

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'recursive_character', 'semantic'."""
        ...
