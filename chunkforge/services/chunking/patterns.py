"""
Delimiter matchers. Chunkers only ask a matcher whether it occurs in a text and
where; regex and literal matchers ship here, others can subclass DelimiterMatcher.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Union


class DelimiterMatcher(ABC):
    """A delimiter that can locate itself in text. Empty pattern = character-level split."""

    pattern: str

    @property
    def is_empty(self) -> bool:
        return self.pattern == ""

    @abstractmethod
    def matches(self, text: str) -> bool:
        """True if the delimiter occurs anywhere in text."""
        ...

    @abstractmethod
    def spans(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield (start, end) of each non-overlapping occurrence, left to right."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern!r})"

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.pattern == self.pattern

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.pattern))


class RegexMatcher(DelimiterMatcher):
    """Delimiter given as a regular expression (string or compiled)."""

    def __init__(self, pattern: Union[str, "re.Pattern[str]"]):
        self._regex = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)
        self.pattern = self._regex.pattern

    def matches(self, text: str) -> bool:
        return self._regex.search(text) is not None

    def spans(self, text: str) -> Iterator[tuple[int, int]]:
        for m in self._regex.finditer(text):
            yield m.start(), m.end()


class LiteralMatcher(DelimiterMatcher):
    """Delimiter matched as plain text, no regex semantics."""

    def __init__(self, literal: str):
        self.pattern = literal

    def matches(self, text: str) -> bool:
        return bool(self.pattern) and self.pattern in text

    def spans(self, text: str) -> Iterator[tuple[int, int]]:
        if not self.pattern:
            return
        step = len(self.pattern)
        start = text.find(self.pattern)
        while start >= 0:
            yield start, start + step
            start = text.find(self.pattern, start + step)


Delimiter = Union[str, "re.Pattern[str]", DelimiterMatcher]


def compile_delimiter(delimiter: Delimiter) -> DelimiterMatcher:
    """Turn a configured delimiter into a matcher. Strings are treated as regexes."""
    if isinstance(delimiter, DelimiterMatcher):
        return delimiter
    return RegexMatcher(delimiter)


def delimiter_source(delimiter: Delimiter) -> str:
    """Serializable form of a configured delimiter."""
    if isinstance(delimiter, str):
        return delimiter
    return delimiter.pattern


def split_keeping_matches(text: str, matcher: DelimiterMatcher) -> list[str]:
    """
    Split text around every occurrence of matcher and keep the matched text.

    Returns [piece, match, piece, ..., match, piece]; even indices are the text
    between delimiters, odd indices the delimiter text. Zero-width matches at the
    very start or end of text are ignored.
    """
    parts: list[str] = []
    last = 0
    for start, end in matcher.spans(text):
        if start == end and (start == 0 or start == len(text)):
            continue
        parts.append(text[last:start])
        parts.append(text[start:end])
        last = end
    parts.append(text[last:])
    return parts
