"""Combinator laws as executable checks.

Combinators satisfy the following algebraic laws:

1. Duality: chain(f, g) == compose(g, f)
   Chain and Compose differ only in argument order

2. Associativity: chain(chain(f, g), h) == chain(f, chain(g, h))
   Grouping of a pipeline does not matter

3. Flip is an involution: flip(flip(f)) == f

4. Curry matches direct application: curry(f)(a1)(a2)...(an) == f(a1, ..., an)

5. Supply reduces arity by one: supply(...supply(f, a1)..., an)() == f(a1, ..., an)

Each check invokes the callables it is given more than once, so they
must be reinvocable.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fncombo.kernel.fn import lift
from fncombo.tuples.args import ArgTuple

from .chain import chain, compose
from .curry import curry
from .flip import flip
from .supply import supply


def chain_compose_dual(f: Callable[..., Any], g: Callable[..., Any], args: ArgTuple) -> bool:
    return chain(f, g).call_args(args) == compose(g, f).call_args(args)


def chain_associative(
    f: Callable[..., Any],
    g: Callable[..., Any],
    h: Callable[..., Any],
    args: ArgTuple,
) -> bool:
    return chain(chain(f, g), h).call_args(args) == chain(f, chain(g, h)).call_args(args)


def flip_involutive(f: Callable[..., Any], args: ArgTuple) -> bool:
    return flip(flip(f)).call_args(args) == lift(f).call_args(args)


def curry_matches_call(f: Callable[..., Any], args: ArgTuple) -> bool:
    result: Any = curry(f)
    if not args:
        result = result()
    for arg in args:
        result = result(arg)
    return result == lift(f).call_args(args)


def supply_matches_call(f: Callable[..., Any], args: ArgTuple) -> bool:
    supplied = lift(f)
    for arg in args:
        supplied = supply(supplied, arg)
    return supplied() == lift(f).call_args(args)
