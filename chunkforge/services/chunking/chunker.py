"""
Chunking entry points: resolve a config (profile and/or inline), build the
chunker, split, and optionally turn chunks into hashed records.
Deterministic for the same input, config and embedder.
"""

import asyncio
import hashlib
import json
from typing import Any

from chunkforge.config.chunking.models import BaseChunkingConfig
from chunkforge.config.chunking.static import resolve_chunking_config
from chunkforge.config.logging import get_logger
from chunkforge.config.settings import get_settings
from chunkforge.services.chunking.models import Chunk
from chunkforge.services.chunking.strategies import get_chunker
from chunkforge.services.embedder.base import BaseEmbedder
from chunkforge.utils.ids import generate_chunk_id

logger = get_logger(__name__)


def compute_chunk_hash(chunk_text: str, strategy: str, config: BaseChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text | strategy | canonical config JSON)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{strategy}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_text(
    content: str,
    profile_name: str | None = None,
    inline_config: dict[str, Any] | None = None,
    embedder: BaseEmbedder | None = None,
) -> list[Chunk]:
    """Split content with the chunker described by profile_name (default from settings) and inline_config."""
    config = resolve_chunking_config(profile_name or get_settings().default_chunking_profile, inline_config)
    return get_chunker(config, embedder).split(content)


def chunk_document(
    content: str,
    document_id: str,
    profile_name: str | None = None,
    inline_config: dict[str, Any] | None = None,
    embedder: BaseEmbedder | None = None,
) -> list[dict[str, Any]]:
    """
    Chunk a document and build one record per chunk with chunk_id and chunk_hash.
    Same content + config -> same records.
    """
    config = resolve_chunking_config(profile_name or get_settings().default_chunking_profile, inline_config)
    chunker = get_chunker(config, embedder)
    chunks = chunker.split(content)
    config_dict = config.model_dump(mode="json")
    records: list[dict[str, Any]] = []
    for chunk in chunks:
        chunk_hash = compute_chunk_hash(chunk.content, chunker.strategy_name, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, chunk.id, chunk_hash),
            "document_id": document_id,
            "chunk_index": chunk.id,
            "chunk_text": chunk.content,
            "chunking_strategy": chunker.strategy_name,
            "chunking_config": config_dict,
            "chunk_size": config_dict.get("chunk_size"),
            "overlap_size": config_dict.get("chunk_overlap"),
            "char_count": len(chunk.content),
            "chunk_hash": chunk_hash,
        })
    logger.info(
        "Document chunked",
        extra={"document_id": document_id, "strategy": chunker.strategy_name, "chunks": len(records)},
    )
    return records


async def run_chunk_pipeline(
    content: str,
    document_id: str,
    profile_name: str | None = None,
    inline_config: dict[str, Any] | None = None,
    embedder: BaseEmbedder | None = None,
) -> list[dict[str, Any]]:
    """chunk_document for event-loop callers; the work runs in a worker thread."""
    return await asyncio.to_thread(
        chunk_document,
        content,
        document_id,
        profile_name=profile_name,
        inline_config=inline_config,
        embedder=embedder,
    )
