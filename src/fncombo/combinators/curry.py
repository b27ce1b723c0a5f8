"""Curry - argument-by-argument application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fncombo.errors import ArityError
from fncombo.kernel.capability import Capability
from fncombo.kernel.fn import Fn, lift
from fncombo.kernel.shape import Shape
from fncombo.tuples.args import ArgTuple
from fncombo.tuples.take import extend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Curry(Fn):
    """Accumulates one argument per call and invokes `func` once all are present.

    States run from an empty accumulator to `func.arity` arguments. Every
    call before the last returns a new Curry holding one more argument;
    the last call returns `func`'s output. A Curry over an arity-0
    callable is already complete and is invoked without arguments.

    Attributes:
        func: The wrapped callable.
        acc: Arguments supplied so far, in call order.
    """

    func: Fn
    acc: ArgTuple = ()

    def __post_init__(self) -> None:
        if len(self.acc) > self.func.arity:
            raise ArityError(
                f"{len(self.acc)} arguments accumulated for a callable of arity {self.func.arity}",
                value=self.acc,
                arity=self.func.arity,
            )
        super().__post_init__()

    @property
    def pending(self) -> int:
        """Number of arguments still missing."""
        return self.func.arity - len(self.acc)

    @property
    def arity(self) -> int:
        return 1 if self.pending else 0

    def _derive_capability(self) -> Capability:
        return self.func.capability

    @property
    def returns(self) -> Shape:
        if self.pending <= 1:
            return self.func.returns
        return Shape.Value()

    def _invoke(self, args: ArgTuple) -> Any:
        if not self.pending:
            return self._fire(self.acc)
        acc = extend(self.acc, args[0])
        if len(acc) == self.func.arity:
            return self._fire(acc)
        return Curry(self.func, acc)

    def _fire(self, acc: ArgTuple) -> Any:
        logger.debug("curry complete after %d argument(s), invoking %s", len(acc), type(self.func).__name__)
        return self.func.call_args(acc)


def curry(func: Callable[..., Any]) -> Curry:
    """Curry a callable of any arity.

    Example:
        >>> add3 = curry(lambda a, b, c: a + b + c)
        >>> add3(1)(2)(3)
        6
    """
    return Curry(lift(func))
