import re

import pytest

from chunkforge.config.chunking.models import FixedChunkingConfig, RecursiveChunkingConfig, SemanticChunkingConfig
from chunkforge.services.chunking.chunker import chunk_document, chunk_text, compute_chunk_hash, run_chunk_pipeline
from chunkforge.services.chunking.strategies import get_chunker, get_strategy_fn
from chunkforge.services.chunking.strategies.fixed import FixedChunker
from chunkforge.services.chunking.strategies.recursive_character import RecursiveCharacterChunker
from chunkforge.services.chunking.strategies.semantic import SemanticChunker

TEXT = "First paragraph here.\n\nSecond paragraph follows. It has two sentences."


def test_registry_builds_each_chunker(fake_embedder_cls):
    embedder = fake_embedder_cls(vectors=[])

    assert isinstance(get_chunker(RecursiveChunkingConfig()), RecursiveCharacterChunker)
    assert isinstance(get_chunker(FixedChunkingConfig()), FixedChunker)
    semantic = get_chunker(SemanticChunkingConfig(), embedder)
    assert isinstance(semantic, SemanticChunker)
    assert semantic.embedder is embedder
    assert get_strategy_fn("recursive") is get_strategy_fn("recursive_character")
    assert get_strategy_fn("tokens") is None


def test_chunk_text_uses_default_profile():
    chunks = chunk_text(TEXT)

    assert [c.content for c in chunks] == [TEXT]


def test_chunk_text_with_inline_overrides():
    chunks = chunk_text(TEXT, "default", {"chunk_size": 30, "chunk_overlap": 0})

    assert [c.content for c in chunks] == [
        "First paragraph here.",
        "Second paragraph follows. It",
        "has two sentences.",
    ]


def test_chunk_text_semantic_with_injected_embedder(fake_embedder_cls):
    embedder = fake_embedder_cls(vectors=[[1.0, 0.0], [0.0, 1.0]])

    chunks = chunk_text("Cats purr. Stocks fell.", "semantic", embedder=embedder)

    assert [c.id for c in chunks] == list(range(len(chunks)))
    assert " ".join(c.content for c in chunks) == "Cats purr. Stocks fell."


def test_chunk_document_records():
    records = chunk_document(TEXT, "doc-1", "default", {"chunk_size": 30, "chunk_overlap": 0})

    assert [r["chunk_index"] for r in records] == [0, 1, 2]
    first = records[0]
    assert first["document_id"] == "doc-1"
    assert first["chunk_text"] == "First paragraph here."
    assert first["chunking_strategy"] == "recursive_character"
    assert first["chunk_size"] == 30
    assert first["overlap_size"] == 0
    assert first["char_count"] == len("First paragraph here.")
    assert re.fullmatch(r"chunk_[0-9a-f]{24}", first["chunk_id"])
    assert re.fullmatch(r"[0-9a-f]{64}", first["chunk_hash"])
    assert first["chunking_config"]["delimiters"] == ["\n\n", "\n", " ", ""]
    assert len({r["chunk_id"] for r in records}) == 3


def test_chunk_document_is_deterministic():
    assert chunk_document(TEXT, "doc-1") == chunk_document(TEXT, "doc-1")


def test_chunk_ids_depend_on_document():
    first = chunk_document(TEXT, "doc-1")[0]
    second = chunk_document(TEXT, "doc-2")[0]

    assert first["chunk_hash"] == second["chunk_hash"]
    assert first["chunk_id"] != second["chunk_id"]


def test_chunk_hash_depends_on_config():
    small = RecursiveChunkingConfig(chunk_size=50, chunk_overlap=0)
    large = RecursiveChunkingConfig(chunk_size=60, chunk_overlap=0)

    assert compute_chunk_hash("text", "recursive_character", small) == compute_chunk_hash(
        "text", "recursive_character", small
    )
    assert compute_chunk_hash("text", "recursive_character", small) != compute_chunk_hash(
        "text", "recursive_character", large
    )


def test_semantic_records_have_no_size_fields(fake_embedder_cls):
    embedder = fake_embedder_cls(vectors=[[1.0, 0.0], [0.0, 1.0]])

    records = chunk_document("Cats purr. Stocks fell.", "doc-3", "semantic", embedder=embedder)

    assert records
    assert all(r["chunk_size"] is None and r["overlap_size"] is None for r in records)
    assert all(r["chunking_strategy"] == "semantic" for r in records)


@pytest.mark.asyncio()
async def test_run_chunk_pipeline_matches_sync_result():
    records = await run_chunk_pipeline(TEXT, "doc-1", "default", {"chunk_size": 30, "chunk_overlap": 0})

    assert records == chunk_document(TEXT, "doc-1", "default", {"chunk_size": 30, "chunk_overlap": 0})
