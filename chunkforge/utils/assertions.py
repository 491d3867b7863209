"""Precondition helpers. None and empty are reported as distinct errors."""

from collections.abc import Sized
from typing import Any

from chunkforge.exceptions import NullPreconditionError, PreconditionError

INPUT_IS_NULL_ERROR_MSG = "Input must not be null"


def not_none(value: Any, message: str) -> None:
    """Raise NullPreconditionError(message) when value is None."""
    if value is None:
        raise NullPreconditionError(message)


def not_empty(value: Sized | None, message: str) -> None:
    """
    Raise when value is None (NullPreconditionError, generic message) or has
    length 0 (PreconditionError(message)). Works for strings and collections.
    """
    if value is None:
        raise NullPreconditionError(INPUT_IS_NULL_ERROR_MSG)
    if len(value) == 0:
        raise PreconditionError(message)


def not_blank(value: str | None, message: str) -> None:
    """Like not_empty, but whitespace-only strings also fail."""
    if value is None:
        raise NullPreconditionError(INPUT_IS_NULL_ERROR_MSG)
    if not value.strip():
        raise PreconditionError(message)


def is_true(condition: bool, message: str, error: type[Exception] = PreconditionError) -> None:
    """Raise error(message) unless condition holds."""
    if not condition:
        raise error(message)


def is_false(condition: bool, message: str, error: type[Exception] = PreconditionError) -> None:
    """Raise error(message) if condition holds."""
    if condition:
        raise error(message)
