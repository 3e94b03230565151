"""Core types: Option (Some, Nothing) and Result (Ok, Err)."""

from optres.types.option import Nothing, NothingType, Option, Some
from optres.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
]
