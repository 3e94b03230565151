"""Catching adapters: the boundary where exceptions become Nothing.

These are the only functions in optres that catch exceptions raised by
caller-supplied code. Which exception types they catch comes from
``optres.get_config().catch`` (``(Exception,)`` by default). That setting only
accepts Exception subclasses, so ``KeyboardInterrupt`` and
``asyncio.CancelledError`` always propagate.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import Any

from optres._config import get_config
from optres._logging import get_logger
from optres.types.option import Nothing, Option, Some

__all__ = [
    'catchable',
    'option_resolve',
    'optional_catch',
    'optional_defined',
    'to_optional',
]

logger = get_logger(__name__)


def catchable(exceptions: tuple[type[Exception], ...] | None = None) -> tuple[type[Exception], ...]:
    """Resolve the exception types an adapter should catch right now."""
    if exceptions is not None:
        return exceptions
    return get_config().catch


def log_caught(adapter: str, exc: Exception) -> None:
    """Log a swallowed exception when ``log_caught`` is enabled."""
    if get_config().log_caught:
        logger.debug(
            'exception converted',
            adapter=adapter,
            exc_type=type(exc).__name__,
            exc_message=str(exc),
        )


def optional_catch[T](fn: Callable[[], T]) -> Option[T]:
    """Call fn now and wrap its result.

    Returns:
        Some(fn()) on success, Nothing if fn raised a catchable exception.

    Example:
        ```python
        optional_catch(lambda: int('42'))  # Some(value=42)
        optional_catch(lambda: int('x'))  # Nothing
        ```
    """
    try:
        return Some(fn())
    except catchable() as e:
        log_caught('optional_catch', e)
        return Nothing


async def option_resolve[T](awaitable: Awaitable[T]) -> Option[T]:
    """Await and wrap the outcome: Some(result), or Nothing if it raised."""
    try:
        return Some(await awaitable)
    except catchable() as e:
        log_caught('option_resolve', e)
        return Nothing


def to_optional[I](guard: Callable[[I], bool]) -> Callable[[I], Option[I]]:
    """Turn a type-guard predicate into an Option constructor.

    The returned function gives Some(arg) when guard(arg) is truthy and Nothing
    when it is falsy or raises. It carries the guard's name and docstring, and
    the guard itself as ``__wrapped__``.

    Example:
        ```python
        parse_port = to_optional(lambda s: s.isdigit() and 0 < int(s) < 65536)
        parse_port('8080')  # Some(value='8080')
        parse_port(None)  # Nothing (guard raised AttributeError)
        ```
    """

    @functools.wraps(guard)
    def check(arg: I) -> Option[I]:
        try:
            if guard(arg):
                return Some(arg)
        except catchable() as e:
            log_caught('to_optional', e)
        return Nothing

    return check


def _is_defined(arg: Any) -> bool:
    """Some(arg) unless arg is None."""
    return arg is not None


optional_defined: Callable[[Any], Option[Any]] = to_optional(_is_defined)
