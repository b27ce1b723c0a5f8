"""Auto-tupling: reshaping one callable's output into the next callable's arguments.

Rules, in order of priority:
1. arity 1: the value becomes the single argument, unconditionally
2. arity 0: only the unit value (None, or the empty tuple) converts
3. arity n >= 2: the value must already be an n-tuple; its elements
   become the arguments positionally
"""

from __future__ import annotations

from typing import Any

from fncombo.errors import ShapeError
from fncombo.kernel.shape import Shape
from fncombo.tuples.args import ArgTuple


def _describe(value: Any) -> str:
    if isinstance(value, tuple):
        return f"{len(value)}-tuple"
    return type(value).__name__


def auto_tuple(value: Any, arity: int) -> ArgTuple:
    """Convert an output value into an argument tuple of exactly `arity` elements.

    Args:
        value: Output of the upstream callable
        arity: Arity of the downstream callable

    Returns:
        The argument tuple

    Raises:
        ShapeError: If the value cannot take that shape
    """
    if arity == 1:
        return (value,)
    return spread(value, arity)


def spread(value: Any, arity: int) -> ArgTuple:
    """Destructure a tuple value into `arity` arguments, without arity-1 wrapping."""
    if arity == 0 and value is None:
        return ()
    if isinstance(value, tuple) and len(value) == arity:
        return tuple(value)
    if arity == 0:
        raise ShapeError(
            f"only the unit value converts to an empty argument tuple, got {_describe(value)}",
            value=value,
            arity=arity,
        )
    raise ShapeError(
        f"expected a {arity}-tuple, got {_describe(value)}",
        value=value,
        arity=arity,
    )


def fits(shape: Shape, arity: int) -> bool | None:
    """Static counterpart of auto_tuple.

    Returns:
        True if every value of `shape` converts, False if none does,
        None if the shape is not known well enough to tell
    """
    if arity == 1:
        return True
    return spread_fits(shape, arity)


def spread_fits(shape: Shape, arity: int) -> bool | None:
    """Static counterpart of spread."""
    if shape.kind == "unknown":
        return None
    if shape.kind == "tuple":
        return shape.size == arity
    if shape.kind == "unit":
        return arity == 0
    return False
