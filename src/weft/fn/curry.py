"""Currying with placeholder support.

A curried function collects positional arguments over any number of calls
and invokes the source function once its arity is satisfied with no
placeholder left in the first `arity` slots.

Every call that does not saturate returns a new CurriedFunction built from
an immutable snapshot of the arguments seen so far, so intermediate
functions can be shared and reused freely.

Example:
    ```python
    from weft import _, curry

    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3)  # 6
    add3(1, 2)(3)  # 6
    add3() is add3  # True

    triples = curry(lambda a, b, c: [a, b, c])
    triples(_, 2, 3)(1)  # [1, 2, 3]
    triples(_, _, 3)(1)(2)  # [1, 2, 3]
    triples(1)(_, 3)(2)  # [1, 2, 3]
    ```
"""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any, ClassVar, TypeAlias

from weft._config import get_config
from weft._logging import get_logger
from weft.fn.wrappers import FunctionWrapper, WrapperKind, get_arity
from weft.placeholder import PLACEHOLDER

__all__ = ['CurriedFunction', 'curry']

logger = get_logger(__name__)

Applier: TypeAlias = Callable[..., Any]


class CurriedFunction(FunctionWrapper):
    """A curried view of a source function.

    Calls are forwarded to an applier closure. The applier either returns
    the source function's result, a new CurriedFunction, or itself to signal
    that the call supplied nothing, in which case this wrapper is returned.
    """

    kind: ClassVar[WrapperKind] = WrapperKind.CURRIED
    banner: ClassVar[str] = '# Curry Wrapped'

    def __init__(self, source: Callable[..., Any], arity: int, applier: Applier) -> None:
        super().__init__(source, arity)
        self._self_applier = applier

    def __call__(self, *args: Any) -> Any:
        if not args:
            return self
        result = self._self_applier(*args)
        return self if result is self._self_applier else result

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        # Bound access supplies the instance as the first argument.
        if instance is None:
            return self
        return types.MethodType(self, instance)


# =============================================================================
# Arity-specialized appliers
# =============================================================================


def _unary(fn: Callable[..., Any], source: Callable[..., Any]) -> Applier:
    def apply(a: Any, *_rest: Any) -> Any:
        return apply if a is PLACEHOLDER else fn(a)

    return apply


def _binary(fn: Callable[..., Any], source: Callable[..., Any]) -> Applier:
    def apply(a: Any, b: Any = PLACEHOLDER, *_rest: Any) -> Any:
        if a is PLACEHOLDER:
            if b is PLACEHOLDER:
                return apply
            return _step(source, 1, _unary(lambda x: fn(x, b), source))
        if b is PLACEHOLDER:
            return _step(source, 1, _unary(lambda x: fn(a, x), source))
        return fn(a, b)

    return apply


def _slotted(arity: int) -> Callable[[Callable[..., Any], Callable[..., Any]], Applier]:
    """Build the applier factory for a fixed arity from a slot table.

    Open slots are the positions that were not supplied or hold a
    placeholder. The next applier has one parameter per open slot and fills
    them left to right.
    """

    def factory(fn: Callable[..., Any], source: Callable[..., Any]) -> Applier:
        def apply(*args: Any) -> Any:
            given = args[:arity] + (PLACEHOLDER,) * (arity - len(args))
            open_slots = tuple(i for i, value in enumerate(given) if value is PLACEHOLDER)
            if not open_slots:
                return fn(*given)
            if len(open_slots) == arity:
                return apply

            def fill(*values: Any) -> Any:
                merged = list(given)
                for slot, value in zip(open_slots, values, strict=True):
                    merged[slot] = value
                return fn(*merged)

            remaining = len(open_slots)
            return _step(source, remaining, _OPTIMIZED[remaining](fill, source))

        return apply

    return factory


_OPTIMIZED: dict[int, Callable[[Callable[..., Any], Callable[..., Any]], Applier]] = {
    1: _unary,
    2: _binary,
    3: _slotted(3),
    4: _slotted(4),
}


# =============================================================================
# Generic applier
# =============================================================================


def _concat(prev: tuple[Any, ...], curr: tuple[Any, ...]) -> tuple[Any, ...]:
    """Fill placeholders in `prev` with `curr` in order, then append the rest."""
    merged = []
    index = 0
    for value in prev:
        if value is PLACEHOLDER and index < len(curr):
            merged.append(curr[index])
            index += 1
        else:
            merged.append(value)
    merged.extend(curr[index:])
    return tuple(merged)


def _open_slots(args: tuple[Any, ...], arity: int) -> int:
    """Number of the first `arity` slots still unfilled."""
    head = args[:arity]
    return arity - len(head) + sum(1 for value in head if value is PLACEHOLDER)


def _recurry(
    fn: Callable[..., Any],
    arity: int,
    prev: tuple[Any, ...],
) -> Applier:
    """Applier collecting arguments until the first `arity` slots are filled.

    Once saturated, `fn` receives the first `arity` arguments followed by
    any surplus ones. Placeholders in the surplus are dropped, so
    `curry(f, arity=2)(1, _, _)(2)` calls `f(1, 2)`.
    """

    def apply(*args: Any) -> Any:
        merged = _concat(prev, args)
        remaining = _open_slots(merged, arity)
        if remaining:
            return _step(fn, remaining, _recurry(fn, arity, merged))
        overflow = (value for value in merged[arity:] if value is not PLACEHOLDER)
        return fn(*merged[:arity], *overflow)

    return apply


def _step(source: Callable[..., Any], arity: int, applier: Applier) -> CurriedFunction:
    return CurriedFunction(source, arity, applier)


# =============================================================================
# Public API
# =============================================================================


def curry(
    fn: Callable[..., Any],
    *,
    arity: int | None = None,
    optimized: bool | None = None,
) -> Any:
    """Curry a function.

    Args:
        fn: The function to curry.
        arity: Number of positional arguments to collect. Defaults to the
            stamped arity of an already wrapped function, otherwise to the
            number of leading positional parameters without defaults.
        optimized: Use the arity-specialized appliers for arities 1-4.
            Defaults to `WeftConfig.optimized` (True unless configured).

    Returns:
        A CurriedFunction, or `fn` itself when the arity is below 1.

    Example:
        ```python
        curried = curry(lambda x, y: x + y)
        curried(1)(2)  # 3
        curried(_, 2)(1)  # 3

        curry(lambda: 42)  # returned unchanged
        ```
    """
    if arity is None:
        arity = get_arity(fn)
    if arity < 1:
        return fn
    if optimized is None:
        optimized = get_config().optimized

    factory = _OPTIMIZED.get(arity) if optimized else None
    if factory is not None:
        applier = factory(fn, fn)
    else:
        applier = _recurry(fn, arity, ())

    logger.debug(
        'curry.wrapped',
        function=getattr(fn, '__qualname__', repr(fn)),
        arity=arity,
        applier='specialized' if factory is not None else 'generic',
    )
    return CurriedFunction(fn, arity, applier)


curry._ = PLACEHOLDER  # type: ignore[attr-defined]
