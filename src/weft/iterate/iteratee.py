"""Iteratee shorthands: the default `prepare` step of collection operations.

    ```python
    to_iteratee(None)  # identity
    to_iteratee('name')  # lambda item: item['name'] (or item.name)
    to_iteratee(['value', 2])  # lambda item: item['value'] == 2
    to_iteratee({'value': 2})  # every listed key matches
    to_iteratee(lambda v: v)  # called with (value,) only
    ```

Callables are capped to the number of positional parameters they accept,
so a one-argument lambda can be used where the engine supplies
`(value, key, collection)`.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from weft.fn.curry import CurriedFunction
from weft.fn.nary import nary
from weft.fn.partial import PartialFunction
from weft.fn.wrappers import get_arity
from weft.placeholder import PLACEHOLDER

__all__ = [
    'identity',
    'matches',
    'matches_property',
    'prop',
    'to_iteratee',
]

_MISSING = object()

T = TypeVar('T')


def identity(value: T, *_: Any) -> T:
    """Return the first argument."""
    return value


def _lookup(item: Any, key: Any) -> Any:
    """Read `key` from a mapping, sequence index or attribute; _MISSING if absent."""
    if isinstance(item, Mapping):
        return item.get(key, _MISSING)
    if isinstance(item, Sequence) and isinstance(key, int):
        try:
            return item[key]
        except IndexError:
            return _MISSING
    if isinstance(key, str):
        return getattr(item, key, _MISSING)
    return _MISSING


def prop(key: Any) -> Callable[..., Any]:
    """Getter for `key`; missing keys read as None."""

    def getter(item: Any, *_: Any) -> Any:
        value = _lookup(item, key)
        return None if value is _MISSING else value

    return getter


def matches_property(key: Any, expected: Any) -> Callable[..., bool]:
    """Predicate: the item has `key` and it equals `expected`."""

    def predicate(item: Any, *_: Any) -> bool:
        return _lookup(item, key) == expected

    return predicate


def matches(spec: Mapping[Any, Any]) -> Callable[..., bool]:
    """Predicate: every key of `spec` is present on the item with an equal value."""
    expected = tuple(spec.items())

    def predicate(item: Any, *_: Any) -> bool:
        return all(_lookup(item, key) == value for key, value in expected)

    return predicate


def _positional_names(fn: Callable[..., Any]) -> set[str]:
    """Names of the parameters of `fn` that can be passed positionally."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return set()
    return {
        name
        for name, parameter in signature.parameters.items()
        if parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD
    }


def _accepted_positionals(fn: Callable[..., Any]) -> int | None:
    """How many positional arguments `fn` takes; None if unlimited."""
    if isinstance(fn, CurriedFunction):
        # The generic applier forwards surplus arguments to the source.
        if _accepted_positionals(fn.__wrapped__) is None:
            return None
        return get_arity(fn)

    if isinstance(fn, PartialFunction):
        accepted = _accepted_positionals(fn.__wrapped__)
        if accepted is None:
            return None
        fixed = sum(1 for value in fn.args if value is not PLACEHOLDER)
        fixed += len(_positional_names(fn.__wrapped__) & fn.keywords.keys())
        return max(0, accepted - fixed)

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Builtins such as bool or int: value only.
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def to_iteratee(value: Any) -> Any:
    """Turn a shorthand into a callable iteratee.

    Values with no shorthand meaning are returned unchanged; the engine
    then produces the operation's empty result.
    """
    if value is None:
        return identity
    if callable(value):
        accepted = _accepted_positionals(value)
        return value if accepted is None else nary(value, accepted)
    if isinstance(value, Mapping):
        return matches(value)
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return matches_property(value[0], value[1])
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return prop(value)
    return value
