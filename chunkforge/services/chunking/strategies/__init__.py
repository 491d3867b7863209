"""Chunking strategy implementations."""

from collections.abc import Callable

from chunkforge.config.chunking.models import (
    BaseChunkingConfig,
    FixedChunkingConfig,
    RecursiveChunkingConfig,
    SemanticChunkingConfig,
)
from chunkforge.services.chunking.base import BaseChunker
from chunkforge.services.chunking.strategies.fixed import FixedChunker
from chunkforge.services.chunking.strategies.recursive_character import RecursiveCharacterChunker
from chunkforge.services.chunking.strategies.semantic import SemanticChunker
from chunkforge.services.embedder.base import BaseEmbedder


def _recursive(config: RecursiveChunkingConfig, _embedder: BaseEmbedder | None) -> BaseChunker:
    return RecursiveCharacterChunker(config)


def _fixed(config: FixedChunkingConfig, _embedder: BaseEmbedder | None) -> BaseChunker:
    return FixedChunker(config)


def _semantic(config: SemanticChunkingConfig, embedder: BaseEmbedder | None) -> BaseChunker:
    return SemanticChunker(embedder=embedder, config=config)


STRATEGY_REGISTRY: dict[str, Callable[..., BaseChunker]] = {
    "recursive_character": _recursive,
    "recursive": _recursive,  # alias
    "fixed": _fixed,
    "semantic": _semantic,
}


def get_strategy_fn(strategy_name: str) -> Callable[..., BaseChunker] | None:
    """Return the chunker factory for the given strategy name, or None."""
    return STRATEGY_REGISTRY.get(strategy_name)


def get_chunker(config: BaseChunkingConfig, embedder: BaseEmbedder | None = None) -> BaseChunker:
    """Build the chunker for config.strategy. Only the semantic chunker uses embedder."""
    factory = get_strategy_fn(config.strategy)
    if factory is None:
        raise ValueError(f"Unknown chunking strategy: {config.strategy!r}")
    return factory(config, embedder)
