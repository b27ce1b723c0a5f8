"""Reversing argument tuples."""

from __future__ import annotations

from fncombo.tuples.args import ArgTuple, as_args, check_arity


def flip_tuple(args: ArgTuple) -> ArgTuple:
    """Return the same elements in reverse position order.

    Tuples of zero or one element reverse to themselves. Tuples longer
    than the configured `max_arity` are rejected with ArityError.
    """
    args = as_args(args)
    check_arity(len(args))
    return args[::-1]
