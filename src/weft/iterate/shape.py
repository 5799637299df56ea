"""Collection-shape classification and per-shape traversal.

Every input to the iteration engine is classified once into a closed set of
kinds. Each kind has exactly one traversal implementation in `entries()`.

| kind     | accepted values                                   | keys                   |
|----------|---------------------------------------------------|------------------------|
| EMPTY    | None, scalars, '', b'' and unsupported objects    | -                      |
| MAP_LIKE | collections.abc.Mapping (dict, mappingproxy, ...) | the mapping's keys     |
| SET_LIKE | collections.abc.Set (set, frozenset, keys views)  | 0..n-1, iteration order |
| INDEXED  | collections.abc.Sequence (list, tuple, str, ...)  | 0..len-1               |
| KEYED    | SimpleNamespace, dataclass and msgspec.Struct     | attribute names        |
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterator, Mapping, Sequence, Set
from enum import Enum
from typing import Any

import msgspec

from weft._logging import get_logger

__all__ = [
    'CollectionKind',
    'CollectionView',
    'classify',
    'entries',
    'record_keys',
]

logger = get_logger(__name__)


class CollectionKind(Enum):
    """Traversal strategy for a collection."""

    EMPTY = 'empty'
    INDEXED = 'indexed'
    SET_LIKE = 'set_like'
    MAP_LIKE = 'map_like'
    KEYED = 'keyed'


class CollectionView(msgspec.Struct, frozen=True, gc=False):
    """Result of classifying a value.

    Attributes:
        kind: The traversal strategy.
        size: Number of elements that will be visited.
    """

    kind: CollectionKind
    size: int = 0

    @property
    def is_empty(self) -> bool:
        return self.kind is CollectionKind.EMPTY


EMPTY_VIEW = CollectionView(CollectionKind.EMPTY)


def record_keys(value: Any) -> tuple[str, ...] | None:
    """Field names of an attribute record, or None if `value` is not one."""
    if isinstance(value, msgspec.Struct):
        return tuple(value.__struct_fields__)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return tuple(field.name for field in dataclasses.fields(value))
    if isinstance(value, types.SimpleNamespace):
        return tuple(key for key in vars(value) if not key.startswith('_'))
    return None


def classify(value: Any) -> CollectionView:
    """Classify `value` into a CollectionView.

    Never raises: anything that is not a supported collection is EMPTY.

    Example:
        ```python
        classify([1, 2, 3])  # CollectionView(kind=INDEXED, size=3)
        classify({'a': 1})  # CollectionView(kind=MAP_LIKE, size=1)
        classify(None)  # CollectionView(kind=EMPTY, size=0)
        ```
    """
    if value is None or isinstance(value, (bool, int, float, complex)):
        return EMPTY_VIEW
    if isinstance(value, (str, bytes, bytearray)) and not value:
        return EMPTY_VIEW
    if isinstance(value, Mapping):
        return CollectionView(CollectionKind.MAP_LIKE, len(value))
    if isinstance(value, Set):
        return CollectionView(CollectionKind.SET_LIKE, len(value))
    if isinstance(value, Sequence):
        return CollectionView(CollectionKind.INDEXED, len(value))

    keys = record_keys(value)
    if keys is not None:
        return CollectionView(CollectionKind.KEYED, len(keys))

    logger.debug('collection.unsupported', type=type(value).__qualname__)
    return EMPTY_VIEW


def entries(
    collection: Any,
    view: CollectionView,
    reverse: bool = False,
) -> Iterator[tuple[Any, Any]]:
    """Yield `(key, value)` pairs of a classified collection.

    Args:
        collection: The collection `view` was computed from.
        view: Its classification.
        reverse: Walk from the last element to the first.
    """
    match view.kind:
        case CollectionKind.EMPTY:
            return iter(())
        case CollectionKind.INDEXED:
            indices = range(view.size - 1, -1, -1) if reverse else range(view.size)
            return ((index, collection[index]) for index in indices)
        case CollectionKind.SET_LIKE:
            pairs = enumerate(collection)
            return reversed(tuple(pairs)) if reverse else pairs
        case CollectionKind.MAP_LIKE:
            items = collection.items()
            return reversed(tuple(items)) if reverse else iter(items)
        case CollectionKind.KEYED:
            keys = record_keys(collection) or ()
            if reverse:
                keys = keys[::-1]
            return ((key, getattr(collection, key)) for key in keys)
