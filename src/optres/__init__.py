"""optres: Option and Result types with free-function combinators.

Flat imports (preferred):
    from optres import Option, Some, Nothing, Result, Ok, Err
    from optres import safe, optional, optional_catch, init

Submodule imports (for organization):
    from optres.types import Option, Result
    from optres import functions as F
    from optres.gated import filter_to_result
"""

from optres import functions, gated
from optres._config import OptresConfig, get_config, init

# Catching adapters
from optres.catching import option_resolve, optional_catch, optional_defined, to_optional

# Decorators
from optres.decorators import optional, optional_async, safe, safe_async

# Errors
from optres.errors import ExpectError, UnwrapError

# Combinators
from optres.functions import (
    filter,
    flat_map,
    for_each,
    from_nullable,
    from_predicate,
    from_result,
    from_unset,
    get_or_else,
    get_or_else_lazy,
    is_err,
    is_none,
    is_ok,
    is_some,
    is_some_and,
    map,
    map_err,
    match,
    match_result,
    or_else,
    or_else_lazy,
    to_awaitable,
    to_list,
    to_nullable,
    to_result,
    to_unset,
    unwrap,
    unwrap_expect,
    unwrap_or,
)
from optres.gated import (
    convert_filtered,
    filter_or,
    filter_or_else,
    filter_to_awaitable,
    filter_to_nullable,
    filter_to_result,
    filter_to_unset,
    gated as gate,
)

# Types
from optres.types import Err, Nothing, NothingType, Ok, Option, Result, Some

__all__ = [
    # Types
    'Err',
    # Errors
    'ExpectError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    # Config
    'OptresConfig',
    'Result',
    'Some',
    'UnwrapError',
    # Gated conversions
    'convert_filtered',
    # Combinators
    'filter',
    'filter_or',
    'filter_or_else',
    'filter_to_awaitable',
    'filter_to_nullable',
    'filter_to_result',
    'filter_to_unset',
    'flat_map',
    'for_each',
    'from_nullable',
    'from_predicate',
    'from_result',
    'from_unset',
    'functions',
    'gate',
    'gated',
    'get_config',
    'get_or_else',
    'get_or_else_lazy',
    'init',
    'is_err',
    'is_none',
    'is_ok',
    'is_some',
    'is_some_and',
    'map',
    'map_err',
    'match',
    'match_result',
    # Catching adapters
    'option_resolve',
    # Decorators
    'optional',
    'optional_async',
    'optional_catch',
    'optional_defined',
    'or_else',
    'or_else_lazy',
    'safe',
    'safe_async',
    'to_awaitable',
    'to_list',
    'to_nullable',
    'to_optional',
    'to_result',
    'to_unset',
    'unwrap',
    'unwrap_expect',
    'unwrap_or',
]
