"""Named chunking profiles from static.json and their resolution with inline overrides."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from chunkforge.config.chunking.models import BaseChunkingConfig, build_chunking_config

STATIC_PATH = Path(__file__).resolve().parent / "static.json"

DEFAULT_ACTIVE_PROFILE = "default"


@lru_cache
def read_static() -> dict[str, Any]:
    """Parsed static.json (profiles and the active profile name)."""
    return json.loads(STATIC_PATH.read_text(encoding="utf-8"))


@lru_cache
def load_chunking_profiles() -> dict[str, BaseChunkingConfig]:
    """Chunking profiles keyed by name; each is built by the model its strategy names."""
    return {name: build_chunking_config(raw) for name, raw in read_static().get("profiles", {}).items()}


def get_chunking_config(profile_name: str) -> BaseChunkingConfig | None:
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Profile marked "active" in static.json, falling back to "default"."""
    return read_static().get("active", DEFAULT_ACTIVE_PROFILE)


def resolve_chunking_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> BaseChunkingConfig:
    """
    Resolve chunking config by profile name and optional inline overrides.

    "active" selects the profile marked active in static.json. Inline values are
    merged over the profile; an inline config whose "strategy" differs from the
    profile's replaces it entirely. An unknown profile is accepted only when the
    inline config names a strategy, otherwise ValueError is raised.
    """
    name = get_active_profile_name() if profile_name == "active" else profile_name
    base = get_chunking_config(name)

    if base is None:
        if inline_config and "strategy" in inline_config:
            return build_chunking_config(inline_config)
        raise ValueError(f"Unknown chunking profile or strategy: {name!r}")

    if not inline_config:
        return base
    if inline_config.get("strategy", base.strategy) != base.strategy:
        return build_chunking_config(inline_config)
    # dict(base) keeps matcher objects as they are; model_dump would turn them into strings
    return build_chunking_config({**dict(base), **inline_config})
