"""Option[T]: Some(value) or the Nothing singleton."""

from __future__ import annotations

from typing import NoReturn

import msgspec

from optres.errors import ExpectError, UnwrapError

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """A present value.

    ``Some(None)`` is a present value too; only ``Nothing`` means absence.
    Transformations live in ``optres.functions``; the methods here are the
    forcing operations the unwrap family delegates to.

    Matches the class pattern ``case Some(value=v)``.
    """

    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value

    def expect(self, message: str) -> T:  # noqa: ARG002
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """The absent value. Use the ``Nothing`` instance.

    Instances carry no payload, so any two compare equal.
    """

    def unwrap(self) -> NoReturn:
        raise UnwrapError('Called unwrap on Nothing')

    def unwrap_or[T](self, default: T) -> T:
        return default

    def expect(self, message: str) -> NoReturn:
        raise ExpectError(message)


Nothing: NothingType = NothingType()

type Option[T] = Some[T] | NothingType
