"""Text preprocessing applied to every text before it reaches an embedding provider."""

import re

from chunkforge.config.embedding.models import EmbeddingPreprocessing

_PUNCTUATION = re.compile(r"[^\w\s]", flags=re.UNICODE)
_WHITESPACE = re.compile(r"\s+")


def preprocess_text(text: str, opts: EmbeddingPreprocessing) -> str:
    """
    Lowercase, strip punctuation and fold whitespace as configured, then cut to
    max_length characters. Empty text stays empty.
    """
    if not text:
        return ""
    if opts.lowercase:
        text = text.lower()
    if opts.remove_punctuation:
        text = _PUNCTUATION.sub("", text)
    if opts.collapse_whitespace:
        text = _WHITESPACE.sub(" ", text).strip()
    return text[: opts.max_length]


def preprocess_texts(texts: list[str], opts: EmbeddingPreprocessing) -> list[str]:
    return [preprocess_text(t, opts) for t in texts]
