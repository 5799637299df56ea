"""weft: currying, partial application and collection iteration.

Flat imports (preferred):
    from weft import _, curry, partial, filter_, pick, reduce_

Submodule imports (for organization):
    from weft.fn import curry, partial, nary
    from weft.iterate import BREAK, make_iterator, classify
    from weft.collection import filter_, some, every, pick, omit
    from weft.curried import filter_, pick  # iteratee-first, autocurried
"""

from weft import curried

# Configuration
from weft._config import WeftConfig, get_config, init
from weft._logging import configure_logging, get_logger

# Collection operations
from weft.collection import (
    every,
    filter_,
    find_key,
    find_last,
    for_each,
    for_each_right,
    map_values,
    omit,
    pick,
    reduce_,
    reduce_right,
    some,
)

# Errors
from weft.errors import InvalidArgument, InvalidArgumentError

# Function transformers
from weft.fn import (
    CurriedFunction,
    PartialFunction,
    WrapperKind,
    curry,
    get_arity,
    get_source,
    is_curried,
    is_partial,
    nary,
    partial,
)

# Iteration engine
from weft.iterate import (
    BREAK,
    CollectionKind,
    IteratorOptions,
    classify,
    make_iterator,
    to_iteratee,
)
from weft.placeholder import PLACEHOLDER, Placeholder, _, is_placeholder

__all__ = [
    'BREAK',
    'PLACEHOLDER',
    'CollectionKind',
    'CurriedFunction',
    'InvalidArgument',
    'InvalidArgumentError',
    'IteratorOptions',
    'PartialFunction',
    'Placeholder',
    'WeftConfig',
    'WrapperKind',
    '_',
    'classify',
    'configure_logging',
    'curried',
    'curry',
    'every',
    'filter_',
    'find_key',
    'find_last',
    'for_each',
    'for_each_right',
    'get_arity',
    'get_config',
    'get_logger',
    'get_source',
    'init',
    'is_curried',
    'is_partial',
    'is_placeholder',
    'make_iterator',
    'map_values',
    'nary',
    'omit',
    'partial',
    'pick',
    'reduce_',
    'reduce_right',
    'some',
    'to_iteratee',
]
