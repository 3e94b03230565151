"""Free-function combinators over Option and Result.

Every function takes the container as its first argument, so they compose
with ``functools.partial`` and read like the method forms:

    >>> from optres import Some, Nothing, functions as F
    >>> F.get_or_else(F.filter(Some(4), lambda n: n > 2), 0)
    4
    >>> F.to_result(Nothing, 'missing')
    Err(error='missing')

Caller-supplied functions are never wrapped in try/except here; exceptions
they raise reach the caller unchanged. See ``optres.catching`` for the
adapters that convert exceptions into Nothing.
"""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import msgspec

from optres.errors import UnwrapError
from optres.types.option import Nothing, NothingType, Option, Some
from optres.types.result import Err, Ok, Result

__all__ = [
    'Settled',
    'filter',
    'flat_map',
    'for_each',
    'from_nullable',
    'from_predicate',
    'from_result',
    'from_unset',
    'get_or_else',
    'get_or_else_lazy',
    'is_err',
    'is_none',
    'is_ok',
    'is_some',
    'is_some_and',
    'map',
    'map_err',
    'match',
    'match_result',
    'or_else',
    'or_else_lazy',
    'to_awaitable',
    'to_list',
    'to_nullable',
    'to_result',
    'to_unset',
    'unwrap',
    'unwrap_expect',
    'unwrap_or',
]


# ---------------------------------------------------------------------
# Tag predicates
# ---------------------------------------------------------------------


def is_some(option: Option[Any]) -> bool:
    return isinstance(option, Some)


def is_none(option: Option[Any]) -> bool:
    return isinstance(option, NothingType)


def is_ok(result: Result[Any, Any]) -> bool:
    return isinstance(result, Ok)


def is_err(result: Result[Any, Any]) -> bool:
    return isinstance(result, Err)


def is_some_and[T](option: Option[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if option is Some and its value satisfies predicate."""
    match option:
        case Some(value=value):
            return bool(predicate(value))
        case _:
            return False


# ---------------------------------------------------------------------
# Transformations
# ---------------------------------------------------------------------


def map[T, U](option: Option[T], f: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Return Some(f(value)), or Nothing unchanged."""
    match option:
        case Some(value=value):
            return Some(f(value))
        case _:
            return Nothing


def flat_map[T, U](option: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Apply an Option-returning function and flatten one level."""
    match option:
        case Some(value=value):
            return f(value)
        case _:
            return Nothing


def filter[T](option: Option[T], predicate: Callable[[T], bool]) -> Option[T]:  # noqa: A001
    """Keep Some only when predicate(value) holds. Nothing stays Nothing."""
    match option:
        case Some(value=value) if predicate(value):
            return option
        case _:
            return Nothing


def map_err[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    match result:
        case Err(error=error):
            return Err(f(error))
        case _:
            return result


# ---------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------


def get_or_else[T](option: Option[T], default: T) -> T:
    match option:
        case Some(value=value):
            return value
        case _:
            return default


def get_or_else_lazy[T](option: Option[T], default: Callable[[], T]) -> T:
    """Like get_or_else, but default() only runs for Nothing."""
    match option:
        case Some(value=value):
            return value
        case _:
            return default()


def or_else[T](option: Option[T], default: Option[T]) -> Option[T]:
    """Return option if it is Some, else the (already evaluated) default."""
    if isinstance(option, Some):
        return option
    return default


def or_else_lazy[T](option: Option[T], default: Callable[[], Option[T]]) -> Option[T]:
    if isinstance(option, Some):
        return option
    return default()


# ---------------------------------------------------------------------
# Destructuring
# ---------------------------------------------------------------------


def for_each[T](option: Option[T], f: Callable[[T], object]) -> None:
    """Call f(value) for its side effects when option is Some."""
    if isinstance(option, Some):
        f(option.value)


def match[T, U](option: Option[T], on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
    """Reduce an Option to a single value; exactly one branch runs.

    Examples:
        >>> match(Some(2), lambda n: n * 10, lambda: 0)
        20
        >>> match(Nothing, lambda n: n * 10, lambda: 0)
        0

    Raises:
        TypeError: If option is neither Some nor Nothing.
    """
    match option:
        case Some(value=value):
            return on_some(value)
        case NothingType():
            return on_none()
    raise TypeError(f'Expected Some or Nothing, got {type(option).__name__}')


def match_result[T, E, U](result: Result[T, E], on_ok: Callable[[T], U], on_err: Callable[[E], U]) -> U:
    match result:
        case Ok(value=value):
            return on_ok(value)
        case Err(error=error):
            return on_err(error)
    raise TypeError(f'Expected Ok or Err, got {type(result).__name__}')


# ---------------------------------------------------------------------
# Conversions out of Option
# ---------------------------------------------------------------------


def to_list[T](option: Option[T]) -> list[T]:
    if isinstance(option, Some):
        return [option.value]
    return []


def to_nullable[T](option: Option[T]) -> T | None:
    if isinstance(option, Some):
        return option.value
    return None


def to_unset[T](option: Option[T]) -> T | msgspec.UnsetType:
    """Return the value, or ``msgspec.UNSET`` for Nothing.

    Useful when filling optional ``msgspec.Struct`` fields, where UNSET
    omits the field on encode while None would write a null.
    """
    if isinstance(option, Some):
        return option.value
    return msgspec.UNSET


def to_result[T, E](option: Option[T], error: E) -> Result[T, E]:
    """Return Ok(value), or Err(error) for Nothing."""
    if isinstance(option, Some):
        return Ok(option.value)
    return Err(error)


class Settled[T]:
    """An awaitable already settled with an Option's outcome.

    Awaiting it returns the value, or raises UnwrapError for Nothing. It can be
    awaited any number of times, and dropping it without awaiting is harmless;
    each await drives a fresh coroutine.
    """

    __slots__ = ('_option',)

    def __init__(self, option: Option[T]) -> None:
        self._option = option

    def __await__(self) -> Generator[Any, Any, T]:
        return self._settle().__await__()

    async def _settle(self) -> T:
        match self._option:
            case Some(value=value):
                return value
        raise UnwrapError('Awaited Nothing')

    def __repr__(self) -> str:
        return f'Settled({self._option!r})'


def to_awaitable[T](option: Option[T]) -> Settled[T]:
    """Convert an Option into an awaitable.

    Building the awaitable does not suspend the caller, and nothing is
    scheduled; an awaitable that is never awaited leaves no trace.

    Example:
        ```python
        value = await to_awaitable(Some(42))  # 42
        await to_awaitable(Nothing)  # raises UnwrapError
        ```
    """
    return Settled(option)


# ---------------------------------------------------------------------
# Constructors into Option
# ---------------------------------------------------------------------


def from_nullable[T](value: T | None) -> Option[T]:
    """Return Nothing for None, Some(value) for anything else (including falsy values)."""
    if value is None:
        return Nothing
    return Some(value)


def from_unset[T](value: T | msgspec.UnsetType) -> Option[T]:
    """Return Nothing for ``msgspec.UNSET``, Some(value) otherwise (None included)."""
    if value is msgspec.UNSET:
        return Nothing
    return Some(value)


def from_result[T](result: Result[T, Any]) -> Option[T]:
    if isinstance(result, Ok):
        return Some(result.value)
    return Nothing


def from_predicate[T](value: T, predicate: Callable[[T], bool]) -> Option[T]:
    """Return Some(value) if predicate(value) holds, else Nothing."""
    if predicate(value):
        return Some(value)
    return Nothing


# ---------------------------------------------------------------------
# Unwrapping (Option or Result)
# ---------------------------------------------------------------------


def unwrap[T](container: Option[T] | Result[T, Any]) -> T:
    """Return the contained value.

    Raises:
        UnwrapError: If container is Nothing or Err.
    """
    return container.unwrap()


def unwrap_or[T](container: Option[T] | Result[T, Any], default: T) -> T:
    return container.unwrap_or(default)


def unwrap_expect[T](container: Option[T] | Result[T, Any], message: str) -> T:
    """Return the contained value, or raise ExpectError(message).

    Raises:
        ExpectError: If container is Nothing or Err. For Err the message is
            followed by the error repr.
    """
    return container.expect(message)
