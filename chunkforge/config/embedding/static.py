"""Embedding config resolution: active profile plus inline overrides."""

from typing import Any

from chunkforge.config.embedding.models import EmbeddingConfig
from chunkforge.config.embedding.providers import get_embedding_config, profile_name_for, read_static

DEFAULT_ACTIVE_PROFILE = "sentence_default"


def get_active_profile_name() -> str:
    """Profile marked "active" in static.json, falling back to sentence_default."""
    return read_static().get("active", DEFAULT_ACTIVE_PROFILE)


def resolve_embedding_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> EmbeddingConfig:
    """
    Resolve a profile ("active", a profile name or a provider name such as
    "openai") and merge inline_config over it.

    Raises ValueError for an unknown profile.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name_for(profile_name)
    base = get_embedding_config(name)
    if base is None:
        raise ValueError(f"Unknown embedding profile: {name!r}")
    if not inline_config:
        return base
    # overrides are validated like bundled profiles
    return EmbeddingConfig.model_validate({**base.model_dump(), **inline_config})
