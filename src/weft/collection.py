"""Collection operations built on the iteration engine.

Every operation accepts lists and other sequences, dicts and other
mappings, sets, and attribute records (SimpleNamespace, dataclasses,
msgspec Structs). Iteratees are called with `(value, key, collection)`, or
with as many of those as they accept. None, scalars and unsupported
objects produce the operation's empty result.

Example:
    ```python
    from weft.collection import filter_, map_values, pick, reduce_right, some

    filter_([1, 2, 3, 4], lambda x: x % 2 == 0)  # [2, 4]
    some(None, bool)  # False
    find_last([1, 2, 3, 4], lambda x: x % 2)  # 3
    pick({'a': 1, 'b': 2, 'c': 3}, ['a', 'c'])  # {'a': 1, 'c': 3}
    map_values([1, 2], lambda x: x * 10)  # {0: 10, 1: 20}
    reduce_right([1, 2, 3], lambda acc, x: acc + [x], [])  # [3, 2, 1]
    ```
"""

from __future__ import annotations

from collections.abc import Set
from typing import Any

import msgspec

from weft.iterate.engine import BREAK, NO_SEED, IteratorOptions, make_iterator
from weft.iterate.iteratee import identity, to_iteratee

__all__ = [
    'every',
    'filter_',
    'find_key',
    'find_last',
    'for_each',
    'for_each_right',
    'map_values',
    'omit',
    'pick',
    'reduce_',
    'reduce_right',
    'some',
]


class _Box(msgspec.Struct):
    """Mutable single-value accumulator."""

    value: Any = None


# =============================================================================
# Iteratee preparation
# =============================================================================


def _prepare_callable(iteratee: Any) -> Any:
    """Cap callables to the arguments they accept; leave anything else alone."""
    return to_iteratee(iteratee) if callable(iteratee) else iteratee


def _prepare_key_filter(iteratee: Any) -> Any:
    """pick/omit iteratees: a function, or a collection of keys to match."""
    if callable(iteratee):
        return to_iteratee(iteratee)
    if isinstance(iteratee, (list, tuple, Set)):
        keys = list(iteratee)

        def has_key(value: Any, key: Any, *_: Any) -> bool:
            return key in keys

        return has_key
    return identity


# =============================================================================
# Handlers
# =============================================================================


def _keep_truthy(acc: list[Any], iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    if iteratee(value, key, collection):
        acc.append(value)


def _any_truthy(acc: _Box, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> Any:
    if not iteratee(value, key, collection):
        return None
    acc.value = True
    return BREAK


def _all_truthy(acc: _Box, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> Any:
    if iteratee(value, key, collection):
        return None
    acc.value = False
    return BREAK


def _visit(acc: None, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    iteratee(value, key, collection)


def _fold(acc: _Box, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    if acc.value is NO_SEED:
        acc.value = value
    else:
        acc.value = iteratee(acc.value, value, key, collection)


def _first_key(acc: _Box, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> Any:
    if not iteratee(value, key, collection):
        return None
    acc.value = key
    return BREAK


def _first_value(acc: _Box, iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> Any:
    if not iteratee(value, key, collection):
        return None
    acc.value = value
    return BREAK


def _pick_entry(acc: dict[Any, Any], iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    if iteratee(value, key, collection):
        acc[key] = value


def _omit_entry(acc: dict[Any, Any], iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    if not iteratee(value, key, collection):
        acc[key] = value


def _map_entry(acc: dict[Any, Any], iteratee: Any, index: int, value: Any, key: Any, collection: Any) -> None:
    acc[key] = iteratee(value, key, collection)


def _unbox(acc: _Box) -> Any:
    return acc.value


def _unbox_fold(acc: _Box) -> Any:
    return None if acc.value is NO_SEED else acc.value


# =============================================================================
# Operation hooks
# =============================================================================

FILTER = IteratorOptions(results=list, handler=_keep_truthy, prepare=to_iteratee)

SOME = IteratorOptions(
    results=lambda: _Box(False),
    handler=_any_truthy,
    prepare=to_iteratee,
    unwrap=_unbox,
)

EVERY = IteratorOptions(
    results=lambda: _Box(True),
    handler=_all_truthy,
    prepare=to_iteratee,
    unwrap=_unbox,
)

FOR_EACH = IteratorOptions(results=lambda: None, handler=_visit, prepare=_prepare_callable)

FOR_EACH_RIGHT = msgspec.structs.replace(FOR_EACH, reverse=True)

REDUCE = IteratorOptions(
    results=_Box,
    empty=_Box,
    handler=_fold,
    prepare=_prepare_callable,
    unwrap=_unbox_fold,
    inject=True,
)

REDUCE_RIGHT = msgspec.structs.replace(REDUCE, reverse=True)

FIND_KEY = IteratorOptions(results=_Box, handler=_first_key, prepare=to_iteratee, unwrap=_unbox)

FIND_LAST = msgspec.structs.replace(FIND_KEY, handler=_first_value, reverse=True)

PICK = IteratorOptions(results=dict, empty=dict, handler=_pick_entry, prepare=_prepare_key_filter)

OMIT = IteratorOptions(results=dict, empty=dict, handler=_omit_entry, prepare=_prepare_key_filter)

MAP_VALUES = IteratorOptions(results=dict, empty=dict, handler=_map_entry, prepare=to_iteratee)


# =============================================================================
# Operations
# =============================================================================

filter_ = make_iterator(
    FILTER,
    name='filter_',
    doc='Values for which `iteratee(value, key, collection)` is truthy, as a list.',
)

some = make_iterator(
    SOME,
    name='some',
    doc='True if the iteratee is truthy for any element; stops at the first match.',
)

every = make_iterator(
    EVERY,
    name='every',
    doc='True if the iteratee is truthy for all elements; stops at the first miss.',
)

for_each = make_iterator(
    FOR_EACH,
    name='for_each',
    doc='Call the iteratee for every element, first to last. Returns None.',
)

for_each_right = make_iterator(
    FOR_EACH_RIGHT,
    name='for_each_right',
    doc='Call the iteratee for every element, last to first. Returns None.',
)

reduce_ = make_iterator(
    REDUCE,
    name='reduce_',
    doc="""Fold the collection with `iteratee(acc, value, key, collection)`.

    Without a seed the first element starts the fold; an empty collection
    then yields None.
    """,
)

reduce_right = make_iterator(
    REDUCE_RIGHT,
    name='reduce_right',
    doc='Like reduce_, walking from the last element to the first.',
)

find_key = make_iterator(
    FIND_KEY,
    name='find_key',
    doc='Key of the first element whose iteratee is truthy, or None.',
)

find_last = make_iterator(
    FIND_LAST,
    name='find_last',
    doc='Last value whose iteratee is truthy, or None; walks from the end.',
)

pick = make_iterator(
    PICK,
    name='pick',
    doc="""Dict of the entries the iteratee accepts.

    The iteratee may also be a list, tuple or set of keys to keep.
    """,
)

omit = make_iterator(
    OMIT,
    name='omit',
    doc="""Dict of the entries the iteratee rejects.

    The iteratee may also be a list, tuple or set of keys to drop.
    """,
)

map_values = make_iterator(
    MAP_VALUES,
    name='map_values',
    doc='Dict mapping each key to `iteratee(value, key, collection)`.',
)
