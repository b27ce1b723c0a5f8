"""Sequencing combinators: Chain (`g ∘ f`) and Compose (`f ∘ g`)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fncombo.errors import ShapeError
from fncombo.kernel.capability import Capability, weakest
from fncombo.kernel.fn import Fn, lift
from fncombo.kernel.shape import Shape
from fncombo.tuples.args import ArgTuple
from fncombo.tuples.auto import auto_tuple

from .adapt import untuple

logger = logging.getLogger(__name__)


def check_link(source: Fn, target: Fn) -> None:
    """Reject a pairing whose output and input shapes can never match.

    Raises:
        ShapeError: If `source`'s output can never be auto-tupled for `target`
    """
    verdict = target.accepts(source.returns)
    if verdict is False:
        raise ShapeError(
            f"output of {type(source).__name__} ({source.returns}) cannot be passed "
            f"to {type(target).__name__} of arity {target.arity}",
            value=source.returns,
            arity=target.arity,
        )
    if verdict is None:
        logger.debug("output shape of %s unknown, checking at call time", type(source).__name__)


@dataclass(frozen=True)
class Chain(Fn):
    """Runs `f`, auto-tuples its output and feeds it to `g`.

    Note: Chain and Compose differ only in argument order;
    `Chain(f, g)` behaves exactly like `Compose(g, f)`.
    """

    f: Fn
    g: Fn

    def __post_init__(self) -> None:
        check_link(self.f, self.g)
        super().__post_init__()

    @property
    def arity(self) -> int:
        return self.f.arity

    def _derive_capability(self) -> Capability:
        return weakest([self.f.capability, self.g.capability])

    @property
    def returns(self) -> Shape:
        return self.g.returns

    def _invoke(self, args: ArgTuple) -> Any:
        b = self.f.call_args(args)
        return self.g.call_args(auto_tuple(b, self.g.arity))


@dataclass(frozen=True)
class Compose(Fn):
    """Runs `g`, auto-tuples its output and feeds it to `f`."""

    f: Fn
    g: Fn

    def __post_init__(self) -> None:
        check_link(self.g, self.f)
        super().__post_init__()

    @property
    def arity(self) -> int:
        return self.g.arity

    def _derive_capability(self) -> Capability:
        return weakest([self.f.capability, self.g.capability])

    @property
    def returns(self) -> Shape:
        return self.f.returns

    def _invoke(self, args: ArgTuple) -> Any:
        b = self.g.call_args(args)
        return self.f.call_args(auto_tuple(b, self.f.arity))


def chain(f: Callable[..., Any], g: Callable[..., Any]) -> Chain:
    """Chain two callables (`g ∘ f`): the value flows from `f` to `g`.

    Example:
        >>> add_five = chain(lambda a: a + 2, lambda a: a + 3)
        >>> add_five(4)
        9

    Multi-value outputs are spread over a multi-argument `g`:
        >>> checked = chain(lambda a, b: (a + b, a + b > 10), lambda res, over: None if over else res)
        >>> checked(2, 3)
        5
    """
    return Chain(lift(f), lift(g))


def compose(f: Callable[..., Any], g: Callable[..., Any]) -> Compose:
    """Compose two callables (`f ∘ g`): the value flows from `g` to `f`.

    Example:
        >>> to_str = compose(repr, lambda a: a * 2)
        >>> to_str(21)
        '42'
    """
    return Compose(lift(f), lift(g))


def chain_ut(f: Callable[..., Any], g: Callable[..., Any]) -> Chain:
    """Chain two callables, spreading `f`'s tuple output over `g`'s parameters.

    Unlike chain(), the output is always destructured, even when `g`
    takes a single argument.
    """
    return Chain(lift(f), untuple(g))


def compose_ut(f: Callable[..., Any], g: Callable[..., Any]) -> Compose:
    """Compose two callables, spreading `g`'s tuple output over `f`'s parameters."""
    return Compose(untuple(f), lift(g))
