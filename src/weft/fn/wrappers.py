"""Wrapper type carrying curry/partial metadata.

Curried and partially applied functions are wrapt proxies around their
source function, so `__name__`, `__doc__`, `__module__` and `__wrapped__`
keep pointing at the original. The stamped arity and the wrapper kind live
on the proxy and are read through the accessors below rather than through
hidden attributes.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from enum import Enum
from typing import Any, ClassVar

import wrapt

__all__ = [
    'FunctionWrapper',
    'WrapperKind',
    'get_arity',
    'get_kind',
    'get_source',
    'is_curried',
    'is_partial',
    'natural_arity',
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class WrapperKind(Enum):
    """What produced a FunctionWrapper."""

    CURRIED = 'curried'
    PARTIAL = 'partial'


class FunctionWrapper(wrapt.ObjectProxy):
    """Base proxy for curried and partially applied functions.

    Attributes:
        _self_arity: Number of positional arguments still expected.
    """

    kind: ClassVar[WrapperKind]
    banner: ClassVar[str]

    def __init__(self, source: Callable[..., Any], arity: int) -> None:
        super().__init__(source)
        self._self_arity = arity

    @property
    def arity(self) -> int:
        """Number of positional arguments still expected."""
        return self._self_arity

    @property
    def source(self) -> Callable[..., Any]:
        """The original, unwrapped function."""
        return self.__wrapped__

    # Identity semantics: two wrappers of the same function are different
    # callables with different collected arguments.
    def __eq__(self, other: object) -> bool:
        return self is other

    def __ne__(self, other: object) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return object.__hash__(self)

    def __repr__(self) -> str:
        name = getattr(self.__wrapped__, '__qualname__', None) or repr(self.__wrapped__)
        return f'<{self.kind.value} {name} arity={self._self_arity}>'

    def __str__(self) -> str:
        return f'{self.banner}\n{_source_text(self.__wrapped__)}'


def _source_text(fn: Callable[..., Any]) -> str:
    """Source code of `fn`, or its repr when the source is unavailable."""
    try:
        return inspect.getsource(fn).rstrip('\n')
    except (OSError, TypeError):
        return repr(fn)


def natural_arity(fn: Callable[..., Any]) -> int:
    """Count the leading positional parameters of `fn` that have no default.

    The count stops at the first defaulted, variadic or keyword-only
    parameter. Callables without an inspectable signature have arity 0.

    Example:
        ```python
        natural_arity(lambda a, b, c=1: None)  # 2
        natural_arity(lambda *args: None)  # 0
        ```
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 0

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL or parameter.default is not parameter.empty:
            break
        count += 1
    return count


def get_arity(fn: Callable[..., Any]) -> int:
    """Stamped arity of a wrapper, or the natural arity of a plain callable."""
    if isinstance(fn, FunctionWrapper):
        return fn._self_arity
    return natural_arity(fn)


def get_source(fn: Callable[..., Any]) -> Callable[..., Any]:
    """The function a wrapper was built from; plain callables map to themselves."""
    if isinstance(fn, FunctionWrapper):
        return fn.__wrapped__
    return fn


def get_kind(fn: object) -> WrapperKind | None:
    """WrapperKind of a wrapper, None for anything else."""
    if isinstance(fn, FunctionWrapper):
        return type(fn).kind
    return None


def is_curried(fn: object) -> bool:
    return get_kind(fn) is WrapperKind.CURRIED


def is_partial(fn: object) -> bool:
    return get_kind(fn) is WrapperKind.PARTIAL
