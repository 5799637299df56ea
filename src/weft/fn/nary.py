"""Cap the number of positional arguments a function receives."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from weft.errors import InvalidArgumentError

__all__ = ['nary']

T = TypeVar('T')


def nary(fn: Callable[..., T], n: Any) -> Callable[..., T]:
    """Return a function that passes at most `n` positional arguments to `fn`.

    Args:
        fn: The function to cap.
        n: Maximum number of positional arguments. Negative or non-numeric
            values mean 0.

    Raises:
        InvalidArgumentError: If `fn` is not callable.

    Example:
        ```python
        list(map(nary(int, 1), ['1', '2'], [10, 10]))  # [1, 2]
        ```
    """
    if not callable(fn):
        raise InvalidArgumentError('expected a function')

    try:
        cap = max(0, int(n))
    except (TypeError, ValueError):
        cap = 0

    @wraps(fn)
    def fixed(*args: Any, **kwargs: Any) -> T:
        return fn(*args[:cap], **kwargs)

    return fixed
