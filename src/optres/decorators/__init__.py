"""Decorators: @safe, @optional and their async variants."""

from optres.decorators.optional import optional, optional_async
from optres.decorators.safe import safe, safe_async

__all__ = [
    'optional',
    'optional_async',
    'safe',
    'safe_async',
]
