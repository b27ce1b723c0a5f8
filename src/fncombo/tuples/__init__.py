"""Argument-tuple model and the generic tuple operations the combinators are built on."""

from fncombo.tuples.args import ArgTuple, as_args, check_arity
from fncombo.tuples.auto import auto_tuple, fits, spread, spread_fits
from fncombo.tuples.flip import flip_tuple
from fncombo.tuples.take import extend, put_first, take_first

__all__ = [
    "ArgTuple",
    "as_args",
    "check_arity",
    # Auto-tupling
    "auto_tuple",
    "spread",
    "fits",
    "spread_fits",
    # Reordering
    "flip_tuple",
    "take_first",
    "put_first",
    "extend",
]
