"""Embedding profiles from static.json, and the default profile of each provider."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from chunkforge.config.embedding.models import EmbeddingConfig

STATIC_PATH = Path(__file__).resolve().parent / "static.json"

# Provider name -> profile used when a caller names the provider instead of a profile
PROVIDER_PROFILES: dict[str, str] = {
    "openai": "openai_default",
    "sentence_transformers": "sentence_default",
    "bedrock": "bedrock_default",
    "mock": "mock",
}


@lru_cache
def read_static() -> dict[str, Any]:
    """Parsed static.json (profiles and the active profile name)."""
    return json.loads(STATIC_PATH.read_text(encoding="utf-8"))


@lru_cache
def load_embedding_profiles() -> dict[str, EmbeddingConfig]:
    """Embedding profiles keyed by name, validated once."""
    profiles = read_static().get("profiles", {})
    return {name: EmbeddingConfig.model_validate(raw) for name, raw in profiles.items()}


def profile_name_for(name: str) -> str:
    """Map a provider name to its default profile; profile names pass through."""
    return PROVIDER_PROFILES.get(name, name)


def get_embedding_config(profile_name: str) -> EmbeddingConfig | None:
    return load_embedding_profiles().get(profile_name_for(profile_name))
