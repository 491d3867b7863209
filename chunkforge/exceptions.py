"""Error taxonomy for chunking and embedding."""


class ChunkingError(Exception):
    """Base class for every error raised by chunkforge."""


class ChunkingConfigError(ChunkingError, ValueError):
    """Invalid configuration: sizes, overlap, percentile, buffer size, embedding widths."""


class PreconditionError(ChunkingError, ValueError):
    """A required collection argument was empty."""


class NullPreconditionError(PreconditionError):
    """A required argument was None."""


class EmbeddingError(ChunkingError):
    """An embedding provider failed or returned an unusable result."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
