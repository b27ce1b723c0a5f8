"""Supply - binding the leading argument of a callable."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fncombo.errors import ArityError
from fncombo.kernel.capability import Capability
from fncombo.kernel.fn import Fn, lift
from fncombo.kernel.shape import Shape
from fncombo.tuples.args import ArgTuple
from fncombo.tuples.take import put_first


@dataclass(frozen=True)
class Supply(Fn):
    """`func` with `argument` bound in front of the remaining arguments."""

    func: Fn
    argument: Any

    def __post_init__(self) -> None:
        if self.func.arity < 1:
            raise ArityError(
                f"cannot supply an argument to {type(self.func).__name__} of arity 0",
                value=self.argument,
                arity=0,
            )
        super().__post_init__()

    @property
    def arity(self) -> int:
        return self.func.arity - 1

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        return self.func.returns

    def _invoke(self, args: ArgTuple) -> Any:
        return self.func.call_args(put_first(self.argument, args))


def supply(func: Callable[..., Any], argument: Any) -> Supply:
    """Bind the next argument of `func`.

    Repeated supply() calls bind arguments left to right in call order.

    Example:
        >>> fmt = lambda a, b, c: f"{a}-{b}-{c}"
        >>> supply(supply(supply(fmt, 8), 16), "x")()
        '8-16-x'
    """
    return Supply(lift(func), argument)
