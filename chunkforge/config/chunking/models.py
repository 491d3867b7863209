"""Chunking configuration models. Immutable once built; no business logic."""

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator, model_validator

from chunkforge.exceptions import ChunkingConfigError
from chunkforge.services.chunking.patterns import Delimiter, DelimiterMatcher, compile_delimiter, delimiter_source


class KeepDelimiter(str, Enum):
    """Where split delimiters end up: dropped, prefixed to the next fragment, or suffixed to the previous one."""

    NONE = "none"
    START = "start"
    END = "end"


class SentenceSplittingStrategy(str, Enum):
    """Built-in sentence splitting regexes for the semantic chunker."""

    DEFAULT = r"(?<=[.?!])\s+"
    LINE_BREAK = "\n"
    PARAGRAPH = "\n\n"


def _check_regex(pattern: str) -> str:
    """Return pattern unchanged; ValueError if it does not compile."""
    try:
        re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid regular expression {pattern!r}: {e}") from e
    return pattern


def _first_error_message(exc: ValidationError) -> str:
    err = exc.errors()[0]
    cause = (err.get("ctx") or {}).get("error")
    if isinstance(cause, Exception):
        return str(cause)
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


class BaseChunkingConfig(BaseModel):
    """
    Shared base for chunker configs. Construction failures are raised as
    ChunkingConfigError carrying the first validation message.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    strategy: str

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ChunkingConfigError(_first_error_message(e)) from e


class _SizedChunkingConfig(BaseChunkingConfig):
    chunk_size: int = Field(default=100, description="Target chunk size in characters")
    chunk_overlap: int = Field(default=20, description="Target overlap between consecutive chunks")
    keep_delimiter: KeepDelimiter = Field(default=KeepDelimiter.START)
    trim_whitespace: bool = Field(default=True)

    @model_validator(mode="after")
    def _check_sizes(self):
        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be greater than 0")
        if self.chunk_overlap < 0:
            raise ValueError("Chunk overlap must be greater than or equal to 0")
        if self.chunk_size <= self.chunk_overlap:
            raise ValueError("Chunk size must be greater than chunk overlap")
        return self


class RecursiveChunkingConfig(_SizedChunkingConfig):
    """Recursive character chunker: delimiters are tried in order, "" means character level."""

    strategy: Literal["recursive_character"] = "recursive_character"
    delimiters: tuple[str | DelimiterMatcher, ...] = Field(default=("\n\n", "\n", " ", ""))

    @field_validator("delimiters", mode="before")
    @classmethod
    def _accept_compiled_patterns(cls, value: Any) -> Any:
        # compiled re.Pattern objects are wrapped in a RegexMatcher
        if isinstance(value, (list, tuple)):
            return tuple(_check_regex(v) if isinstance(v, str) else compile_delimiter(v) for v in value)
        return value

    @field_serializer("delimiters")
    def _serialize_delimiters(self, delimiters: tuple[Delimiter, ...]) -> list[str]:
        return [delimiter_source(d) for d in delimiters]


class FixedChunkingConfig(_SizedChunkingConfig):
    """Fixed chunker: one delimiter, no recursion."""

    strategy: Literal["fixed"] = "fixed"
    chunk_size: int = Field(default=1000, description="Target chunk size in characters")
    chunk_overlap: int = Field(default=100, description="Target overlap between consecutive chunks")
    delimiter: str | DelimiterMatcher = Field(default=" ")
    keep_delimiter: KeepDelimiter = Field(default=KeepDelimiter.NONE)

    @field_validator("delimiter", mode="before")
    @classmethod
    def _accept_compiled_pattern(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _check_regex(value)
        if isinstance(value, DelimiterMatcher):
            return value
        return compile_delimiter(value)

    @field_serializer("delimiter")
    def _serialize_delimiter(self, delimiter: Delimiter) -> str:
        return delimiter_source(delimiter)


class SemanticChunkingConfig(BaseChunkingConfig):
    """Semantic chunker: sentence regex, break-point percentile and context buffer size."""

    strategy: Literal["semantic"] = "semantic"
    sentence_splitting_regex: str = Field(default=SentenceSplittingStrategy.DEFAULT.value)
    percentile: int = Field(default=95, description="Break-point percentile, 1..99")
    buffer_size: int = Field(default=1, description="Sentences of context on each side")
    embed_source: Literal["content", "combined"] = Field(
        default="content", description="Which sentence text is sent to the embedder"
    )
    similarity_workers: int = Field(default=1, ge=1, description="Threads for pairwise similarity; 1 = sequential")
    embedding_profile: str | None = Field(default=None, description="Embedding profile used when no embedder is injected")

    @field_validator("sentence_splitting_regex", mode="before")
    @classmethod
    def _accept_strategy(cls, value: Any) -> Any:
        if isinstance(value, SentenceSplittingStrategy):
            return value.value
        if isinstance(value, str):
            return _check_regex(value)
        return value

    @model_validator(mode="after")
    def _check_ranges(self):
        if self.percentile <= 0:
            raise ValueError("The percentile must be greater than 0")
        if self.percentile >= 100:
            raise ValueError("The percentile must be less than 100")
        if self.buffer_size <= 0:
            raise ValueError("The bufferSize must be greater than 0")
        return self


CONFIG_MODELS: dict[str, type[BaseChunkingConfig]] = {
    "recursive_character": RecursiveChunkingConfig,
    "fixed": FixedChunkingConfig,
    "semantic": SemanticChunkingConfig,
}


def build_chunking_config(data: dict[str, Any]) -> BaseChunkingConfig:
    """Build the config model named by data["strategy"]."""
    strategy = data.get("strategy")
    model = CONFIG_MODELS.get(strategy) if isinstance(strategy, str) else None
    if model is None:
        raise ChunkingConfigError(f"Unknown chunking strategy: {strategy!r}")
    return model(**data)
