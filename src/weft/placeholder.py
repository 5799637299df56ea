"""The placeholder sentinel shared by curry() and partial().

A placeholder marks an argument slot as "not supplied yet". It is compared
by identity only, so it can never collide with a legitimate argument such as
`None`.

Example:
    ```python
    from weft import _, curry

    triples = curry(lambda a, b, c: [a, b, c])
    triples(_, 2, 3)(1)  # [1, 2, 3]
    ```
"""

from __future__ import annotations

from typing import Any, Final, Self

__all__ = ['PLACEHOLDER', 'Placeholder', '_', 'is_placeholder']


class Placeholder:
    """Sentinel type for deferred argument slots.

    There is exactly one instance per process; constructing the class again,
    copying or unpickling returns that same instance.
    """

    __slots__ = ()

    _instance: Placeholder | None = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance  # type: ignore[return-value]

    def __repr__(self) -> str:
        return '_'

    def __reduce__(self) -> tuple[Any, ...]:
        return (Placeholder, ())

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self


PLACEHOLDER: Final = Placeholder()
_: Final = PLACEHOLDER


def is_placeholder(value: object) -> bool:
    """Return True if `value` is the placeholder sentinel."""
    return value is PLACEHOLDER
