"""
Fragmenting and merge-with-overlap shared by the delimiter-based chunkers.

Chunk ids come from an itertools.count passed in by the caller, so one counter
can span a whole recursive split.
"""

from collections import deque
from collections.abc import Iterator

from chunkforge.config.chunking.models import KeepDelimiter
from chunkforge.config.logging import get_logger, log_extra
from chunkforge.services.chunking.models import Chunk
from chunkforge.services.chunking.patterns import DelimiterMatcher, split_keeping_matches

logger = get_logger(__name__)

LONGER_THAN_THE_SPECIFIED = "Created a chunk of size %d, which is longer than the specified %d"


def warn_oversized(size: int, limit: int) -> None:
    """Soft size violation: logged, never raised."""
    logger.warning(LONGER_THAN_THE_SPECIFIED, size, limit, **log_extra({"chunk_size": size, "limit": limit}))


def split_with_delimiter(
    content: str, matcher: DelimiterMatcher | None, keep: KeepDelimiter
) -> tuple[list[str], str]:
    """
    Fragment content on matcher according to the retention policy.

    Returns (fragments, glue). glue is the text to put back between fragments when
    merging: the first matched delimiter text under NONE, otherwise "" because the
    delimiter already travels inside the fragments. A missing or empty matcher
    splits into single characters.
    """
    if matcher is None or matcher.is_empty:
        return list(content), ""

    parts = split_keeping_matches(content, matcher)

    if keep is KeepDelimiter.NONE:
        glue = parts[1] if len(parts) > 1 else ""
        return [p for p in parts[::2] if p], glue

    if keep is KeepDelimiter.START:
        fragments = [parts[0]] + [parts[i] + parts[i + 1] for i in range(1, len(parts) - 1, 2)]
    else:
        fragments = [parts[i] + parts[i + 1] for i in range(0, len(parts) - 1, 2)] + [parts[-1]]
    return [f for f in fragments if f.strip()], ""


def make_chunk(ids: Iterator[int], content: str, trim: bool) -> Chunk:
    return Chunk(id=next(ids), content=content.strip() if trim else content)


def merge_splits(
    splits: list[str],
    glue: str,
    *,
    chunk_size: int,
    chunk_overlap: int,
    trim: bool,
    ids: Iterator[int],
) -> list[Chunk]:
    """
    Merge small fragments into chunks of at most chunk_size characters (best effort).

    A sliding window collects fragments; when the next one would not fit, the window
    is emitted and fragments are evicted from its front until at most chunk_overlap
    characters remain, which become the start of the next chunk.
    """
    glue_len = len(glue)
    window: deque[str] = deque()
    current_len = 0
    chunks: list[Chunk] = []

    for split in splits:
        split_len = len(split)

        if current_len + split_len + (glue_len if window else 0) > chunk_size:
            if current_len > chunk_size:
                warn_oversized(current_len, chunk_size)

            if window:
                chunks.append(make_chunk(ids, glue.join(window), trim))
                while current_len > chunk_overlap and window:
                    current_len -= len(window.popleft()) + (glue_len if window else 0)

        window.append(split)
        current_len += split_len + (glue_len if len(window) > 1 else 0)

    if window:
        if current_len > chunk_size:
            warn_oversized(current_len, chunk_size)
        chunks.append(make_chunk(ids, glue.join(window), trim))

    return chunks
