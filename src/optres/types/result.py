"""Result[T, E]: Ok(value) or Err(error)."""

from __future__ import annotations

from typing import NoReturn

import msgspec

from optres.errors import ExpectError, UnwrapError

__all__ = ['Err', 'Ok', 'Result']


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Successful outcome carrying ``value``."""

    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self.value


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Failed outcome carrying ``error``.

    Forcing an Err raises UnwrapError (or ExpectError). When ``error`` is an
    exception it becomes the ``__cause__`` of the raised fault, so the original
    traceback is kept.
    """

    error: E

    def _cause(self) -> BaseException | None:
        return self.error if isinstance(self.error, BaseException) else None

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}') from self._cause()

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, message: str) -> NoReturn:
        raise ExpectError(f'{message}: {self.error!r}') from self._cause()


type Result[T, E = Exception] = Ok[T] | Err[E]
