"""Library configuration: OptresConfig, init(), get_config()."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass

from optres._logging import configure_logging

__all__ = [
    'OptresConfig',
    'check_catchable',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OptresConfig:
    """Configuration for the catching adapters.

    Attributes:
        catch: Exception types the catching adapters convert into Nothing/Err
            when no explicit ``exceptions=`` is given. Only Exception
            subclasses are allowed.
        log_caught: If True, every swallowed exception is logged at debug level.
        log_level: Level name for the ``optres`` logger, or None.
    """

    catch: tuple[type[Exception], ...] = (Exception,)
    log_caught: bool = False
    log_level: str | None = None


_config: OptresConfig | None = None


def check_catchable(exceptions: Iterable[type[BaseException]]) -> tuple[type[Exception], ...]:
    """Return exceptions as a tuple, rejecting anything outside Exception.

    KeyboardInterrupt, SystemExit and asyncio.CancelledError must always reach
    the caller, so BaseException itself and its non-Exception subclasses are
    refused.

    Raises:
        TypeError: If an entry is not an Exception subclass.
    """
    resolved = tuple(exceptions)
    for exc_type in resolved:
        if not (isinstance(exc_type, type) and issubclass(exc_type, Exception)):
            msg = f'catch entries must be Exception subclasses, got {exc_type!r}'
            raise TypeError(msg)
    return resolved  # type: ignore[return-value]


def _env_log_caught() -> bool:
    """Read OPTRES_LOG_CAUGHT, warning on values that are neither on nor off."""
    raw = os.environ.get('OPTRES_LOG_CAUGHT', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logging.warning("Unknown OPTRES_LOG_CAUGHT value '%s', defaulting to off", raw)
    return False


def init(
    catch: Iterable[type[Exception]] | None = None,
    log_caught: bool | None = None,
    log_level: str | None = None,
) -> OptresConfig:
    """Initialize optres with the specified configuration.

    Fields left as None are read from the environment (``OPTRES_LOG_CAUGHT``,
    ``OPTRES_LOG_LEVEL``) and otherwise take their defaults. Only an explicit
    ``log_level`` argument installs a log handler; a level taken from the
    environment is recorded in the config and nothing more.

    Args:
        catch: Exception types converted by the catching adapters.
        log_caught: Log swallowed exceptions at debug level.
        log_level: Configure the ``optres`` logger at this level.

    Returns:
        The OptresConfig that was set.

    Raises:
        TypeError: If ``catch`` holds something that is not an Exception subclass.

    Example:
        ```python
        from optres import init

        init(catch=(ValueError, KeyError), log_caught=True, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    _config = OptresConfig(
        catch=check_catchable(catch) if catch is not None else (Exception,),
        log_caught=log_caught if log_caught is not None else _env_log_caught(),
        log_level=log_level if log_level is not None else os.environ.get('OPTRES_LOG_LEVEL') or None,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> OptresConfig:
    """Get the current configuration.

    If init() has not been called, builds one from the environment without
    touching logging.
    """
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration."""
    global _config  # noqa: PLW0603
    _config = None
