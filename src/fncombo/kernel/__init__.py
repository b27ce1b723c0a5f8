"""Kernel layer - the callable-value model the combinators operate on."""

from fncombo.kernel.capability import Capability, weakest
from fncombo.kernel.shape import Shape, shape_of_annotation
from fncombo.kernel.signature import arity_of, returns_of, tuple_param_size
from fncombo.kernel.fn import Fn, Lifted, OnceGuard, fn, lift, once, shared

__all__ = [
    "Fn",
    "Lifted",
    "OnceGuard",
    "lift",
    "fn",
    "once",
    "shared",
    # Capabilities
    "Capability",
    "weakest",
    # Shapes
    "Shape",
    "shape_of_annotation",
    "arity_of",
    "returns_of",
    "tuple_param_size",
]
