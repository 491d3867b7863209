import re

import pytest
from pydantic import ValidationError

from chunkforge.config.chunking.models import (
    FixedChunkingConfig,
    KeepDelimiter,
    RecursiveChunkingConfig,
    SemanticChunkingConfig,
    SentenceSplittingStrategy,
    build_chunking_config,
)
from chunkforge.config.chunking.static import (
    get_active_profile_name,
    load_chunking_profiles,
    resolve_chunking_config,
)
from chunkforge.exceptions import ChunkingConfigError
from chunkforge.services.chunking.patterns import LiteralMatcher, RegexMatcher


def test_recursive_defaults():
    config = RecursiveChunkingConfig()

    assert config.chunk_size == 100
    assert config.chunk_overlap == 20
    assert config.delimiters == ("\n\n", "\n", " ", "")
    assert config.keep_delimiter is KeepDelimiter.START
    assert config.trim_whitespace is True


def test_recursive_custom_values():
    config = RecursiveChunkingConfig(
        chunk_size=50,
        chunk_overlap=10,
        delimiters=["-", "!", "?"],
        keep_delimiter="end",
        trim_whitespace=False,
    )

    assert config.chunk_size == 50
    assert config.chunk_overlap == 10
    assert config.delimiters == ("-", "!", "?")
    assert config.keep_delimiter is KeepDelimiter.END
    assert config.trim_whitespace is False


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"chunk_size": 0}, "Chunk size must be greater than 0"),
        ({"chunk_size": -5}, "Chunk size must be greater than 0"),
        ({"chunk_overlap": -1}, "Chunk overlap must be greater than or equal to 0"),
        ({"chunk_size": 10, "chunk_overlap": 10}, "Chunk size must be greater than chunk overlap"),
        ({"chunk_size": 10, "chunk_overlap": 20}, "Chunk size must be greater than chunk overlap"),
    ],
)
@pytest.mark.parametrize("model", [RecursiveChunkingConfig, FixedChunkingConfig])
def test_sized_config_rejects_invalid_values(model, kwargs, message):
    with pytest.raises(ChunkingConfigError) as exc_info:
        model(**kwargs)

    assert str(exc_info.value) == message


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        RecursiveChunkingConfig(chunk_size=0)


def test_unknown_field_is_rejected():
    with pytest.raises(ChunkingConfigError, match="Extra inputs"):
        RecursiveChunkingConfig(chunk_sise=10)


def test_config_is_immutable():
    config = RecursiveChunkingConfig()

    with pytest.raises(ValidationError):
        config.chunk_size = 5


def test_fixed_defaults():
    config = FixedChunkingConfig()

    assert (config.chunk_size, config.chunk_overlap) == (1000, 100)
    assert config.delimiter == " "
    assert config.keep_delimiter is KeepDelimiter.NONE


def test_semantic_defaults():
    config = SemanticChunkingConfig()

    assert config.sentence_splitting_regex == SentenceSplittingStrategy.DEFAULT.value
    assert config.percentile == 95
    assert config.buffer_size == 1
    assert config.embed_source == "content"
    assert config.similarity_workers == 1
    assert config.embedding_profile is None


def test_semantic_accepts_splitting_strategy():
    config = SemanticChunkingConfig(sentence_splitting_regex=SentenceSplittingStrategy.PARAGRAPH)

    assert config.sentence_splitting_regex == "\n\n"


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"percentile": 0}, "The percentile must be greater than 0"),
        ({"percentile": 100}, "The percentile must be less than 100"),
        ({"buffer_size": 0}, "The bufferSize must be greater than 0"),
    ],
)
def test_semantic_rejects_invalid_values(kwargs, message):
    with pytest.raises(ChunkingConfigError) as exc_info:
        SemanticChunkingConfig(**kwargs)

    assert str(exc_info.value) == message


def test_semantic_rejects_zero_workers():
    with pytest.raises(ChunkingConfigError, match="similarity_workers"):
        SemanticChunkingConfig(similarity_workers=0)


def test_compiled_delimiters_serialize_to_their_source():
    config = RecursiveChunkingConfig(delimiters=[re.compile(r"\s+"), LiteralMatcher("."), ""])

    assert isinstance(config.delimiters[0], RegexMatcher)
    assert isinstance(config.delimiters[1], LiteralMatcher)
    assert config.model_dump(mode="json")["delimiters"] == [r"\s+", ".", ""]


def test_build_chunking_config_unknown_strategy():
    with pytest.raises(ChunkingConfigError, match="Unknown chunking strategy"):
        build_chunking_config({"strategy": "tokens"})


def test_bundled_profiles_load():
    profiles = load_chunking_profiles()

    assert {"default", "recursive_small", "sentences", "fixed", "semantic", "semantic_paragraphs"} <= set(profiles)
    assert isinstance(profiles["fixed"], FixedChunkingConfig)
    assert isinstance(profiles["semantic"], SemanticChunkingConfig)
    assert profiles["sentences"].keep_delimiter is KeepDelimiter.NONE


def test_resolve_profile_by_name():
    config = resolve_chunking_config("default")

    assert isinstance(config, RecursiveChunkingConfig)
    assert (config.chunk_size, config.chunk_overlap) == (1000, 200)


def test_resolve_active_profile():
    assert resolve_chunking_config("active") == resolve_chunking_config(get_active_profile_name())


def test_resolve_merges_inline_values_over_profile():
    config = resolve_chunking_config("default", {"chunk_size": 300})

    assert config.chunk_size == 300
    assert config.chunk_overlap == 200
    assert config.delimiters == ("\n\n", "\n", " ", "")


def test_resolve_inline_with_other_strategy_replaces_profile():
    config = resolve_chunking_config("default", {"strategy": "fixed", "chunk_size": 50, "chunk_overlap": 5})

    assert isinstance(config, FixedChunkingConfig)
    assert (config.chunk_size, config.chunk_overlap) == (50, 5)


def test_resolve_unknown_profile_with_complete_inline_config():
    config = resolve_chunking_config("adhoc", {"strategy": "semantic", "percentile": 80})

    assert isinstance(config, SemanticChunkingConfig)
    assert config.percentile == 80


def test_resolve_unknown_profile_raises():
    with pytest.raises(ValueError, match="Unknown chunking profile"):
        resolve_chunking_config("missing")


def test_resolve_invalid_override_raises_config_error():
    with pytest.raises(ChunkingConfigError, match="Chunk size must be greater than chunk overlap"):
        resolve_chunking_config("default", {"chunk_size": 100})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delimiters": ["(unclosed"]},
        {"delimiters": ["\n\n", "[abc", ""]},
    ],
)
def test_recursive_rejects_invalid_delimiter_regex(kwargs):
    with pytest.raises(ChunkingConfigError, match="Invalid regular expression"):
        RecursiveChunkingConfig(**kwargs)


def test_fixed_rejects_invalid_delimiter_regex():
    with pytest.raises(ChunkingConfigError, match="Invalid regular expression"):
        FixedChunkingConfig(delimiter="*oops")


@pytest.mark.parametrize("regex", ["[abc", "(?<=x", "a{2,1}"])
def test_semantic_rejects_invalid_sentence_regex(regex):
    with pytest.raises(ChunkingConfigError, match="Invalid regular expression"):
        SemanticChunkingConfig(sentence_splitting_regex=regex)


def test_invalid_regex_in_inline_profile_is_a_config_error():
    with pytest.raises(ChunkingConfigError, match="Invalid regular expression"):
        resolve_chunking_config("default", {"delimiters": ["(unclosed"]})
