"""Function transformers: curry, partial, and nary.

Curried and partial functions are wrappers that keep a reference to the
source function and its stamped arity:

    ```python
    from weft.fn import _, curry, get_arity, get_source, is_curried, partial

    add = lambda a, b: a + b
    inc = curry(add)(1)
    inc(2)  # 3
    is_curried(inc)  # True
    get_source(inc) is add  # True

    half = partial(lambda a, b: a / b, _, 2)
    half(10)  # 5.0
    get_arity(half)  # 1
    ```
"""

from weft.fn.curry import CurriedFunction, curry
from weft.fn.nary import nary
from weft.fn.partial import PartialFunction, partial
from weft.fn.wrappers import (
    FunctionWrapper,
    WrapperKind,
    get_arity,
    get_kind,
    get_source,
    is_curried,
    is_partial,
    natural_arity,
)
from weft.placeholder import PLACEHOLDER, Placeholder, _, is_placeholder

__all__ = [
    'PLACEHOLDER',
    'CurriedFunction',
    'FunctionWrapper',
    'PartialFunction',
    'Placeholder',
    'WrapperKind',
    '_',
    'curry',
    'get_arity',
    'get_kind',
    'get_source',
    'is_curried',
    'is_partial',
    'is_placeholder',
    'nary',
    'natural_arity',
    'partial',
]
