"""Iteratee-first, autocurried versions of the collection operations.

    ```python
    from weft import curried

    evens = curried.filter_(lambda x: x % 2 == 0)
    evens([1, 2, 3, 4])  # [2, 4]

    names = curried.map_values('name')
    names([{'name': 'a'}, {'name': 'b'}])  # {0: 'a', 1: 'b'}

    total = curried.reduce_(lambda acc, x: acc + x, 0)
    total([1, 2, 3])  # 6
    ```
"""

from __future__ import annotations

from typing import Any

import msgspec

from weft import collection
from weft.fn.curry import curry
from weft.fn.partial import partial
from weft.iterate.engine import IteratorOptions, make_iterator
from weft.placeholder import _

__all__ = [
    '_',
    'curry',
    'every',
    'filter_',
    'find_key',
    'find_last',
    'for_each',
    'for_each_right',
    'map_values',
    'omit',
    'partial',
    'pick',
    'reduce_',
    'reduce_right',
    'some',
]


def _functional(options: IteratorOptions, name: str) -> Any:
    """Curry the flipped variant of an operation."""
    if options.inject:
        flipped = msgspec.structs.replace(options, flipped=True, initial=True)
        arity = 3
    else:
        flipped = msgspec.structs.replace(options, flipped=True)
        arity = 2
    return curry(make_iterator(flipped, name=name), arity=arity, optimized=True)


filter_ = _functional(collection.FILTER, 'filter_')
some = _functional(collection.SOME, 'some')
every = _functional(collection.EVERY, 'every')
for_each = _functional(collection.FOR_EACH, 'for_each')
for_each_right = _functional(collection.FOR_EACH_RIGHT, 'for_each_right')
reduce_ = _functional(collection.REDUCE, 'reduce_')
reduce_right = _functional(collection.REDUCE_RIGHT, 'reduce_right')
find_key = _functional(collection.FIND_KEY, 'find_key')
find_last = _functional(collection.FIND_LAST, 'find_last')
pick = _functional(collection.PICK, 'pick')
omit = _functional(collection.OMIT, 'omit')
map_values = _functional(collection.MAP_VALUES, 'map_values')
