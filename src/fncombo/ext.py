"""Fn extensions: method-call sugar over the combinators.

Every Fn gains `.chain`, `.chain_ut`, `.compose`, `.compose_ut`,
`.supply`, `.flip`, `.curry`, `.unit`, `.untuple` and `.tupled`, so
pipelines read left to right:

    >>> from fncombo import fn
    >>> add_eight = fn(lambda a: a + 2).chain(lambda a: a + 3).chain(lambda a: a + 3)
    >>> add_eight(4)
    12
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fncombo.combinators import (
    Chain,
    Compose,
    Curry,
    Flip,
    Supply,
    Tupled,
    Unit,
    Untuple,
    chain,
    chain_ut,
    compose,
    compose_ut,
    curry,
    flip,
    supply,
    tupled,
    unit,
    untuple,
)
from fncombo.kernel.fn import Fn


def _chain(self: Fn, g: Callable[..., Any]) -> Chain:
    """Chain `g` after this callable (`g ∘ self`)."""
    return chain(self, g)


def _chain_ut(self: Fn, g: Callable[..., Any]) -> Chain:
    """Chain `g` after this callable, spreading this callable's tuple output."""
    return chain_ut(self, g)


def _compose(self: Fn, g: Callable[..., Any]) -> Compose:
    """Compose this callable after `g` (`self ∘ g`)."""
    return compose(self, g)


def _compose_ut(self: Fn, g: Callable[..., Any]) -> Compose:
    """Compose this callable after `g`, spreading `g`'s tuple output."""
    return compose_ut(self, g)


def _supply(self: Fn, argument: Any) -> Supply:
    return supply(self, argument)


def _flip(self: Fn) -> Flip:
    return flip(self)


def _curry(self: Fn) -> Curry:
    return curry(self)


def _unit(self: Fn) -> Unit:
    return unit(self)


def _untuple(self: Fn) -> Untuple:
    return untuple(self)


def _tupled(self: Fn, arity: int | None = None) -> Tupled:
    return tupled(self, arity)


# Register the operations
Fn.register_op("chain", _chain)
Fn.register_op("chain_ut", _chain_ut)
Fn.register_op("compose", _compose)
Fn.register_op("compose_ut", _compose_ut)
Fn.register_op("supply", _supply)
Fn.register_op("flip", _flip)
Fn.register_op("curry", _curry)
Fn.register_op("unit", _unit)
Fn.register_op("untuple", _untuple)
Fn.register_op("tupled", _tupled)
