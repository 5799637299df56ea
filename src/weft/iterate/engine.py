"""The iteration engine shared by every collection operation.

An operation is described by a handful of hooks (an IteratorOptions) and
turned into a traversal function by make_iterator(). The engine classifies
the collection once, builds a fresh accumulator, walks the elements in the
requested direction and hands each one to the operation's handler, which
may stop the walk early by returning BREAK.

Example:
    ```python
    from weft.iterate import BREAK, make_iterator

    def collect(acc, iteratee, index, value, key, collection):
        if index == 2:
            return BREAK
        acc.append(iteratee(value))

    first_two = make_iterator(results=list, handler=collect)
    first_two([1, 2, 3, 4], lambda x: x * 10)  # [10, 20]
    first_two(None, lambda x: x * 10)  # []
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from weft._logging import get_logger
from weft.iterate.shape import classify, entries

__all__ = [
    'BREAK',
    'NO_SEED',
    'IteratorOptions',
    'make_iterator',
]

logger = get_logger(__name__)


class _Break:
    """Sentinel a handler returns to stop the traversal."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'BREAK'


class _NoSeed:
    """Sentinel passed to seeded constructors when the caller gave no seed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'NO_SEED'

    def __bool__(self) -> bool:
        return False


BREAK = _Break()
NO_SEED = _NoSeed()


class IteratorOptions(msgspec.Struct, frozen=True, kw_only=True):
    """Hooks describing one collection operation.

    Attributes:
        handler: `handler(acc, iteratee, index, value, key, collection)`,
            called once per element; returning BREAK stops the walk.
        results: Builds the accumulator; called with the seed when
            `inject` is set, without arguments otherwise.
        empty: Builds the accumulator for EMPTY collections (same
            arguments as `results`); the result is `unwrap(empty(...))`.
            Defaults to `results`.
        prepare: Turns the caller's iteratee into the callable given to
            `handler`. Identity when None.
        unwrap: Extracts the public result from the accumulator. Identity
            when None.
        reverse: Walk from the last element to the first.
        flipped: Take the iteratee before the collection.
        inject: Accept a seed argument and pass it to `results`/`empty`.
        initial: With `flipped`, take the seed between the iteratee and the
            collection: `(iteratee, seed, collection)`.
    """

    handler: Callable[..., Any]
    results: Callable[..., Any] = list
    empty: Callable[..., Any] | None = None
    prepare: Callable[[Any], Any] | None = None
    unwrap: Callable[[Any], Any] | None = None
    reverse: bool = False
    flipped: bool = False
    inject: bool = False
    initial: bool = False


def _split_arguments(options: IteratorOptions, args: tuple[Any, ...]) -> tuple[Any, Any, Any]:
    """Map positional call arguments to `(collection, iteratee, seed)`."""
    first, second, third = (*args, None, None, None)[:3]
    seed = NO_SEED
    if options.flipped and options.initial:
        if len(args) > 1:
            seed = second
        return third, first, seed
    if len(args) > 2:
        seed = third
    if options.flipped:
        return second, first, seed
    return first, second, seed


def make_iterator(
    options: IteratorOptions | None = None,
    /,
    *,
    name: str | None = None,
    doc: str | None = None,
    **hooks: Any,
) -> Callable[..., Any]:
    """Build a traversal function from operation hooks.

    Args:
        options: A prebuilt IteratorOptions. Mutually exclusive with hooks.
        name: `__name__` of the returned function.
        doc: `__doc__` of the returned function.
        **hooks: Fields of IteratorOptions.

    Returns:
        `run(collection, iteratee=None, seed=...)`, or with `flipped`
        `run(iteratee, collection, seed=...)` / `run(iteratee, seed,
        collection)` when `initial` is also set. The options are available
        as `run.options`.

    Raises:
        TypeError: If both `options` and hooks are given, or a hook is unknown.
    """
    if options is None:
        options = IteratorOptions(**hooks)
    elif hooks:
        msg = 'pass either an IteratorOptions or hook keywords, not both'
        raise TypeError(msg)

    def empty_result(seed_args: tuple[Any, ...]) -> Any:
        build = options.results if options.empty is None else options.empty
        acc = build(*seed_args)
        return acc if options.unwrap is None else options.unwrap(acc)

    def run(*args: Any) -> Any:
        collection, iteratee, seed = _split_arguments(options, args)
        seed_args = (seed,) if options.inject else ()

        view = classify(collection)
        if view.is_empty:
            return empty_result(seed_args)

        if options.prepare is not None:
            iteratee = options.prepare(iteratee)
        if not callable(iteratee):
            return empty_result(seed_args)

        acc = options.results(*seed_args)
        handler = options.handler
        for index, (key, value) in enumerate(entries(collection, view, options.reverse)):
            if handler(acc, iteratee, index, value, key, collection) is BREAK:
                break

        return acc if options.unwrap is None else options.unwrap(acc)

    if name is not None:
        run.__name__ = run.__qualname__ = name
    if doc is not None:
        run.__doc__ = doc
    run.options = options  # type: ignore[attr-defined]

    logger.debug(
        'iterator.created',
        name=name or run.__name__,
        reverse=options.reverse,
        flipped=options.flipped,
        inject=options.inject,
    )
    return run
