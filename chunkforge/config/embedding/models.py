"""Embedding configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EmbeddingPreprocessing(BaseModel):
    """Text preprocessing applied before a provider sees the text."""

    model_config = ConfigDict(frozen=True)

    lowercase: bool = Field(default=False)
    remove_punctuation: bool = Field(default=False)
    collapse_whitespace: bool = Field(default=False, description="Fold runs of whitespace into one space")
    max_length: int = Field(default=8192, ge=1, description="Characters kept per text")


class EmbeddingConfig(BaseModel):
    """Embedding provider and parameters."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    strategy: str = Field(..., description="openai|sentence_transformers|bedrock|mock")
    model: str = Field(..., description="Model identifier")
    normalize: bool = Field(default=True)
    normalization_type: Literal["L2", "L1", "none"] = Field(default="L2")
    preprocessing: EmbeddingPreprocessing = Field(default_factory=EmbeddingPreprocessing)
    batch_size: int = Field(default=100, ge=1)
    dimension: int | None = Field(default=None, ge=1, description="Known vector width; probed when unset")
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
