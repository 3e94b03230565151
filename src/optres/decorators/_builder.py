"""Shared construction for the catching decorators."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from optres._config import check_catchable
from optres.catching import catchable, log_caught

__all__ = ['catching_decorator']


def catching_decorator(
    adapter: str,
    on_value: Callable[[Any], Any],
    on_error: Callable[[Exception], Any],
    *,
    is_async: bool = False,
) -> Callable[..., Any]:
    """Build a decorator that turns calls into on_value(result) or on_error(exc).

    The decorator works bare (``@deco``) or with ``@deco(exceptions=(...))``.
    Explicit ``exceptions`` are checked when decorating; without them the
    configured ``catch`` types are looked up on every call, so a later
    ``init()`` applies to functions decorated earlier.
    """

    def decorate(func: Callable[..., Any] | None = None, *, exceptions: Any = None) -> Any:
        wanted = check_catchable(exceptions) if exceptions is not None else None

        if is_async:

            @wrapt.decorator
            async def wrapper(wrapped: Any, instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
                try:
                    value = await wrapped(*args, **kwargs)
                except catchable(wanted) as e:
                    log_caught(adapter, e)
                    return on_error(e)
                return on_value(value)

        else:

            @wrapt.decorator
            def wrapper(wrapped: Any, instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
                try:
                    value = wrapped(*args, **kwargs)
                except catchable(wanted) as e:
                    log_caught(adapter, e)
                    return on_error(e)
                return on_value(value)

        if func is None:
            return wrapper
        return wrapper(func)

    decorate.__name__ = adapter
    return decorate
