"""Single-shot partial application with placeholders."""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any, ClassVar

from weft._logging import get_logger
from weft.errors import InvalidArgumentError
from weft.fn.wrappers import FunctionWrapper, WrapperKind, get_arity
from weft.placeholder import PLACEHOLDER

__all__ = ['PartialFunction', 'partial']

logger = get_logger(__name__)


class PartialFunction(FunctionWrapper):
    """A source function with some positional and keyword arguments fixed.

    Bound placeholders are filled left to right by call-time arguments; the
    remaining call-time arguments are appended. Placeholders that nothing
    filled are passed to the source function as-is.
    """

    kind: ClassVar[WrapperKind] = WrapperKind.PARTIAL
    banner: ClassVar[str] = '# Partial Wrapped'

    def __init__(
        self,
        source: Callable[..., Any],
        arity: int,
        bound: tuple[Any, ...],
        bound_kwargs: dict[str, Any],
    ) -> None:
        super().__init__(source, arity)
        self._self_bound = bound
        self._self_bound_kwargs = bound_kwargs

    @property
    def args(self) -> tuple[Any, ...]:
        """The bound positional arguments, placeholders included."""
        return self._self_bound

    @property
    def keywords(self) -> dict[str, Any]:
        """The bound keyword arguments."""
        return dict(self._self_bound_kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        merged = []
        index = 0
        for value in self._self_bound:
            if value is PLACEHOLDER and index < len(args):
                merged.append(args[index])
                index += 1
            else:
                merged.append(value)
        merged.extend(args[index:])
        return self.__wrapped__(*merged, **{**self._self_bound_kwargs, **kwargs})

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        # Like functools.partialmethod: the instance goes before the bound arguments.
        if instance is None:
            return self
        bound_method = types.MethodType(self.__wrapped__, instance)
        return partial(bound_method, *self._self_bound, **self._self_bound_kwargs)


def partial(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Fix some arguments of a function, leaving placeholder gaps.

    Args:
        fn: The function to partially apply.
        *args: Positional arguments to bind. Use `_` to leave a slot open.
        **kwargs: Keyword arguments to bind; call-time keywords override them.

    Returns:
        A PartialFunction, or `fn` itself when nothing was bound.

    Raises:
        InvalidArgumentError: If `fn` is not callable.

    Example:
        ```python
        from weft import _, partial

        pair = lambda a, b: (a, b)
        partial(pair, _, 2)(1)  # (1, 2)
        partial(pair, 1, _)(2)  # (1, 2)
        partial(pair, _, _)(1, 2)  # (1, 2)
        ```
    """
    if not callable(fn):
        raise InvalidArgumentError('first argument must be a function')
    if not args and not kwargs:
        return fn

    fixed = sum(1 for value in args if value is not PLACEHOLDER)
    arity = max(0, get_arity(fn) - fixed)

    logger.debug(
        'partial.wrapped',
        function=getattr(fn, '__qualname__', repr(fn)),
        bound=len(args),
        arity=arity,
    )
    return PartialFunction(fn, arity, args, kwargs)


partial._ = PLACEHOLDER  # type: ignore[attr-defined]
