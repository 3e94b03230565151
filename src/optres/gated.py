"""Predicate-gated conversions: filter an Option, then convert it.

Every function here is ``convert(filter(option, predicate))`` for some
conversion. ``convert_filtered`` is the general form; the named entry points
fix the conversion for the common targets.

Examples:
    >>> filter_to_nullable(Some(4), lambda n: n > 2)
    4
    >>> filter_to_result(Some(1), lambda n: n > 2, 'too small')
    Err(error='too small')
    >>> is_positive = gated(lambda n: n > 0, to_nullable)
    >>> is_positive(Some(-3)) is None
    True
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import partial

import msgspec

from optres.functions import (
    filter as filter_option,
    or_else,
    or_else_lazy,
    to_awaitable,
    to_nullable,
    to_result,
    to_unset,
)
from optres.types.option import Option
from optres.types.result import Result

__all__ = [
    'convert_filtered',
    'filter_or',
    'filter_or_else',
    'filter_to_awaitable',
    'filter_to_nullable',
    'filter_to_result',
    'filter_to_unset',
    'gated',
]


def convert_filtered[T, R](
    option: Option[T],
    predicate: Callable[[T], bool],
    convert: Callable[[Option[T]], R],
) -> R:
    """Filter option by predicate, then hand the outcome to convert.

    Args:
        option: The Option to gate.
        predicate: Called at most once, only when option is Some.
        convert: Conversion applied to the filtered Option, e.g. to_nullable.

    Returns:
        Whatever convert returns.
    """
    return convert(filter_option(option, predicate))


def gated[T, R](
    predicate: Callable[[T], bool],
    convert: Callable[[Option[T]], R],
) -> Callable[[Option[T]], R]:
    """Build a reusable ``option -> convert(filter(option, predicate))`` function."""
    return partial(_apply_gate, predicate=predicate, convert=convert)


def _apply_gate[T, R](
    option: Option[T],
    *,
    predicate: Callable[[T], bool],
    convert: Callable[[Option[T]], R],
) -> R:
    return convert_filtered(option, predicate, convert)


def filter_to_nullable[T](option: Option[T], predicate: Callable[[T], bool]) -> T | None:
    return convert_filtered(option, predicate, to_nullable)


def filter_to_unset[T](option: Option[T], predicate: Callable[[T], bool]) -> T | msgspec.UnsetType:
    return convert_filtered(option, predicate, to_unset)


def filter_to_result[T, E](option: Option[T], predicate: Callable[[T], bool], error: E) -> Result[T, E]:
    """Ok(value) if option is Some and passes predicate, else Err(error)."""
    return convert_filtered(option, predicate, partial(to_result, error=error))


def filter_to_awaitable[T](option: Option[T], predicate: Callable[[T], bool]) -> Awaitable[T]:
    """Awaitable of the value; awaiting raises UnwrapError if the gate rejects it."""
    return convert_filtered(option, predicate, to_awaitable)


def filter_or[T](option: Option[T], predicate: Callable[[T], bool], default: Option[T]) -> Option[T]:
    """Return option if it passes the gate, else default."""
    return convert_filtered(option, predicate, partial(or_else, default=default))


def filter_or_else[T](
    option: Option[T],
    predicate: Callable[[T], bool],
    default: Callable[[], Option[T]],
) -> Option[T]:
    """Return option if it passes the gate, else default(); default runs only on rejection."""
    return convert_filtered(option, predicate, partial(or_else_lazy, default=default))
