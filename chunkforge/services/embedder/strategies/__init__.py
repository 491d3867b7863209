"""Embedder implementations. Provider SDKs are imported on first use."""

from importlib import import_module

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.services.embedder.base import BaseEmbedder

STRATEGY_REGISTRY: dict[str, str] = {
    "openai": "chunkforge.services.embedder.strategies.openai_strategy:OpenAIEmbedder",
    "sentence_transformers": (
        "chunkforge.services.embedder.strategies.sentence_transformers_strategy:SentenceTransformersEmbedder"
    ),
    "bedrock": "chunkforge.services.embedder.strategies.bedrock_strategy:BedrockEmbedder",
    "mock": "chunkforge.services.embedder.strategies.mock_strategy:MockEmbedder",
}


def get_embedder_class(strategy_name: str) -> type[BaseEmbedder] | None:
    """Return the embedder class registered under strategy_name, or None."""
    target = STRATEGY_REGISTRY.get(strategy_name)
    if target is None:
        return None
    module_name, _, attr = target.partition(":")
    return getattr(import_module(module_name), attr)


def get_embedder(config: EmbeddingConfig) -> BaseEmbedder:
    """Build the embedder for config.strategy. Raises ValueError for unknown strategies."""
    cls = get_embedder_class(config.strategy)
    if cls is None:
        raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
    return cls(config)
