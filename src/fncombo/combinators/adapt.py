"""Shape adapters: Untuple, Tupled and Unit."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fncombo.errors import ArityError
from fncombo.kernel.capability import Capability
from fncombo.kernel.fn import Fn, Lifted, lift
from fncombo.kernel.shape import Shape
from fncombo.kernel.signature import tuple_param_size
from fncombo.tuples.args import ArgTuple, check_arity
from fncombo.tuples.auto import spread, spread_fits


@dataclass(frozen=True)
class Untuple(Fn):
    """Takes one tuple argument and spreads its elements over `func`'s parameters."""

    func: Fn

    @property
    def arity(self) -> int:
        return 1

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        return self.func.returns

    def accepts(self, shape: Shape) -> bool | None:
        return spread_fits(shape, self.func.arity)

    def _invoke(self, args: ArgTuple) -> Any:
        (packed,) = args
        return self.func.call_args(spread(packed, self.func.arity))


@dataclass(frozen=True)
class Tupled(Fn):
    """Takes `size` flat arguments and passes them to `func` as one tuple."""

    func: Fn
    size: int

    def __post_init__(self) -> None:
        check_arity(self.size)
        if self.func.arity != 1:
            raise ArityError(
                f"tupled() needs a callable of one tuple argument, got arity {self.func.arity}",
                value=self.func,
                arity=self.func.arity,
            )
        super().__post_init__()

    @property
    def arity(self) -> int:
        return self.size

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        return self.func.returns

    def _invoke(self, args: ArgTuple) -> Any:
        return self.func.call_args((args,))


@dataclass(frozen=True)
class Unit(Fn):
    """Runs `func` and discards its output."""

    func: Fn

    @property
    def arity(self) -> int:
        return self.func.arity

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        return Shape.Unit()

    def _invoke(self, args: ArgTuple) -> None:
        self.func.call_args(args)
        return None


def untuple(func: Callable[..., Any]) -> Untuple:
    """Adapt a flat-argument callable to accept one argument tuple.

    Example:
        >>> add = untuple(lambda a, b: a + b)
        >>> add((4, 8))
        12
    """
    return Untuple(lift(func))


def tupled(func: Callable[..., Any], arity: int | None = None) -> Tupled:
    """Adapt a callable of one tuple argument to accept the tuple's elements flat.

    Args:
        func: Callable taking a single tuple
        arity: Number of flat arguments; read from a fixed-length
            `tuple[...]` annotation on `func`'s parameter when omitted

    Raises:
        ArityError: If the number of flat arguments cannot be determined
    """
    lifted = lift(func)
    if arity is None:
        raw = lifted.func if isinstance(lifted, Lifted) else lifted
        arity = tuple_param_size(raw)
    if arity is None:
        raise ArityError(
            "cannot tell how many arguments the tuple holds; pass arity= explicitly",
            value=func,
        )
    return Tupled(lifted, arity)


def unit(func: Callable[..., Any]) -> Unit:
    """Wrap `func` so that it always returns None.

    Example:
        >>> unit(lambda a, b: a - b)(2, 1) is None
        True
    """
    return Unit(lift(func))
