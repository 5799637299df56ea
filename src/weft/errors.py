"""Error types: dual struct+exception for Result-style and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidArgument',
    'InvalidArgumentError',
]


class InvalidArgument(msgspec.Struct, frozen=True, gc=False):
    """An argument had the wrong shape - struct variant."""

    message: str = 'first argument must be a function'

    def to_exception(self) -> InvalidArgumentError:
        """Convert to exception for raise-based code."""
        return InvalidArgumentError(self.message)


class InvalidArgumentError(TypeError):
    """An argument had the wrong shape - exception variant.

    Subclasses TypeError so callers that already guard against bad argument
    types keep working.
    """

    def __init__(self, message: str = 'first argument must be a function') -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> InvalidArgument:
        """Convert to struct for Result-based code."""
        return InvalidArgument(self.message)
