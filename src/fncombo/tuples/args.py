"""Argument tuples - the fixed-length parameter lists callables are invoked with."""

from __future__ import annotations

from typing import Any, TypeAlias

from fncombo import config
from fncombo.errors import ArityError

ArgTuple: TypeAlias = tuple[Any, ...]


def check_arity(arity: int) -> int:
    """Validate an arity against the configured bound and return it.

    Raises:
        ArityError: If the arity is negative or above `max_arity`
    """
    max_arity = config.get_config().max_arity
    if arity < 0:
        raise ArityError(f"arity must be non-negative, got {arity}", arity=arity)
    if arity > max_arity:
        raise ArityError(
            f"arity {arity} exceeds the supported maximum of {max_arity}",
            arity=arity,
        )
    return arity


def as_args(values: Any) -> ArgTuple:
    """Return `values` as a plain argument tuple."""
    if type(values) is tuple:
        return values
    if isinstance(values, tuple):
        return tuple(values)
    raise ArityError(f"argument tuple expected, got {type(values).__name__}", value=values)
