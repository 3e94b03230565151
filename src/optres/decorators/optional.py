"""@optional and @optional_async: calls that return Some(result) or Nothing.

The decorated counterparts of ``optional_catch`` and ``option_resolve``. The
exception is discarded; use ``@safe`` to keep it.
"""

from optres.decorators._builder import catching_decorator
from optres.types.option import Nothing, Some

__all__ = ['optional', 'optional_async']


def _nothing(_exc: Exception) -> object:
    return Nothing


optional = catching_decorator('optional', Some, _nothing)
optional_async = catching_decorator('optional_async', Some, _nothing, is_async=True)
