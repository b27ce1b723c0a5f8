"""Splitting and extending argument tuples one element at a time."""

from __future__ import annotations

from typing import Any

from fncombo.errors import ArityError
from fncombo.tuples.args import ArgTuple, as_args


def take_first(args: ArgTuple) -> tuple[Any, ArgTuple]:
    """Split an argument tuple into its first element and the rest, in order.

    Raises:
        ArityError: If the tuple is empty
    """
    args = as_args(args)
    if not args:
        raise ArityError("cannot take the first element of an empty argument tuple", value=args, arity=0)
    return args[0], args[1:]


def put_first(head: Any, rest: ArgTuple) -> ArgTuple:
    """Inverse of take_first."""
    return (head,) + as_args(rest)


def extend(args: ArgTuple, value: Any) -> ArgTuple:
    """Append one element to an argument tuple."""
    return as_args(args) + (value,)
