"""Flip - reversing the argument order of a callable."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fncombo.kernel.capability import Capability
from fncombo.kernel.fn import Fn, lift
from fncombo.kernel.shape import Shape
from fncombo.tuples.args import ArgTuple, check_arity
from fncombo.tuples.flip import flip_tuple


@dataclass(frozen=True)
class Flip(Fn):
    """Accepts `func`'s arguments in reverse order."""

    func: Fn

    def __post_init__(self) -> None:
        check_arity(self.func.arity)
        super().__post_init__()

    @property
    def arity(self) -> int:
        return self.func.arity

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        return self.func.returns

    def _invoke(self, args: ArgTuple) -> Any:
        return self.func.call_args(flip_tuple(args))


def flip(func: Callable[..., Any]) -> Flip:
    """Flip the argument order of `func`.

    Example:
        >>> flip(lambda a, b, c: f"{a}{b}{c}")("c", 17, "hello, ")
        'hello, 17c'
    """
    return Flip(lift(func))
