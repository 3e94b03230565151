"""Misuse faults raised when a value is forced out of an empty container."""

from __future__ import annotations

__all__ = ['ExpectError', 'UnwrapError']


class UnwrapError(RuntimeError):
    """Raised when unwrapping Nothing or Err.

    This is a programming error, not an expected outcome. Absence is
    represented structurally by Nothing and Err; this exception only fires
    when code insists a value is there and it is not.
    """


class ExpectError(UnwrapError):
    """UnwrapError carrying a caller-supplied message.

    Raised by ``expect`` and ``unwrap_expect``. Catching ``UnwrapError``
    also catches this.
    """

    __slots__ = ('message',)

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
