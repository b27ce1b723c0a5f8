"""Static description of a callable's output."""

from __future__ import annotations

import types
import typing
from dataclasses import dataclass
from typing import Any, Literal, Union, get_args, get_origin


@dataclass(frozen=True)
class Shape:
    """
    What is known about a value before it exists.

    Kinds:
    - unknown: Nothing is known; checks are deferred to call time
    - unit: The value is None
    - value: A single value that is not a tuple
    - tuple: A tuple of exactly `size` elements
    """

    kind: Literal["unknown", "unit", "value", "tuple"]
    size: int | None = None

    @staticmethod
    def Unknown() -> Shape:
        return Shape(kind="unknown")

    @staticmethod
    def Unit() -> Shape:
        return Shape(kind="unit")

    @staticmethod
    def Value() -> Shape:
        return Shape(kind="value")

    @staticmethod
    def Tuple(size: int) -> Shape:
        if size < 0:
            raise ValueError("tuple size must be non-negative")
        return Shape(kind="tuple", size=size)

    @property
    def known(self) -> bool:
        return self.kind != "unknown"

    def __str__(self) -> str:
        if self.kind == "tuple":
            return f"{self.size}-tuple"
        return self.kind


def shape_of_annotation(annotation: Any) -> Shape:
    """Translate a type annotation into the Shape of values it describes.

    Unions, type variables, `Any` and variable-length tuples give no
    usable information and map to Unknown.
    """
    if annotation is None or annotation is type(None):
        return Shape.Unit()
    if isinstance(annotation, str) or annotation is Any or annotation is typing.Tuple:
        return Shape.Unknown()

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return Shape.Unknown()
    if origin is tuple:
        args = get_args(annotation)
        if len(args) == 2 and args[1] is Ellipsis:
            return Shape.Unknown()
        if args == ((),):
            return Shape.Tuple(0)
        return Shape.Tuple(len(args))
    if origin is not None:
        return Shape.Value() if isinstance(origin, type) else Shape.Unknown()

    if isinstance(annotation, type):
        if annotation is tuple:
            return Shape.Unknown()
        if issubclass(annotation, tuple):
            fields = getattr(annotation, "_fields", None)
            return Shape.Tuple(len(fields)) if fields is not None else Shape.Unknown()
        if annotation is object:
            return Shape.Unknown()
        return Shape.Value()
    return Shape.Unknown()
