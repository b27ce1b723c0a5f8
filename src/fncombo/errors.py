"""Error types for combinator construction and invocation."""

from __future__ import annotations

from typing import Any


class CombinatorError(Exception):
    """Base class for every error raised by fncombo itself."""


class ShapeError(CombinatorError, TypeError):
    """Error raised when a value cannot take the argument-tuple shape a callable needs.

    This error preserves the offending value and the expected arity
    for debugging purposes.
    """

    def __init__(self, message: str, value: Any = None, arity: int | None = None) -> None:
        self.value = value
        self.arity = arity
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, value={self.value!r}, arity={self.arity!r})"


class ArityError(ShapeError):
    """Error raised when an argument count does not match a callable's arity."""


class ConsumedError(CombinatorError, RuntimeError):
    """Error raised when a consume-once callable is invoked a second time."""
