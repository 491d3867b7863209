"""Shared fixtures: an in-memory embedder so no test touches a real model."""

import pytest

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.services.embedder.base import BaseEmbedder


class FakeEmbedder(BaseEmbedder):
    """Returns vectors from a text -> vector table (or a fixed list) and records every call."""

    def __init__(self, vectors=None, by_text=None):
        super().__init__(EmbeddingConfig(strategy="fake", model="fake", normalize=False))
        self.vectors = vectors
        self.by_text = by_text or {}
        self.calls: list[list[str]] = []

    @property
    def strategy_name(self) -> str:
        return "fake"

    def _embed_batch(self, texts):
        self.calls.append(list(texts))
        if self.vectors is not None:
            return [list(v) for v in self.vectors]
        return [self.by_text[t] for t in texts]


@pytest.fixture
def fake_embedder_cls():
    return FakeEmbedder
