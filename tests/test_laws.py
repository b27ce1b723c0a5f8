"""Algebraic laws of the combinators over a range of arities."""

from __future__ import annotations

import pytest

from fncombo import lift
from fncombo.combinators.laws import (
    chain_associative,
    chain_compose_dual,
    curry_matches_call,
    flip_involutive,
    supply_matches_call,
)
from fakes import add, add3, checked, label, overflowing_add, pair


def concat(*parts):
    return "".join(str(p) for p in parts)


CALLABLES = [
    (lambda: "constant", ()),
    (lambda a: a * 2, (21,)),
    (add, (2, 3)),
    (lambda a, b: f"{a}/{b}", ("x", "y")),
    (add3, (1, 2, 3)),
    (label, ("a", 1, None)),
    (lambda a, b, c, d, e: (a - b) * (c - d) + e, (9, 4, 7, 2, 1)),
]


@pytest.mark.parametrize(
    "f, g, args",
    [
        (lambda a: a + 2, lambda a: a * 3, (4,)),
        (overflowing_add, checked, (2**31 - 1, 1)),
        (overflowing_add, checked, (5, 6)),
        (pair, add, (7,)),
        (add3, pair, (1, 2, 3)),
        (lambda: None, lambda: "after unit", ()),
    ],
)
def test_chain_compose_duality(f, g, args):
    assert chain_compose_dual(f, g, args)


@pytest.mark.parametrize(
    "f, g, h, args",
    [
        (lambda a: a + 1, lambda a: a * 2, lambda a: a - 3, (5,)),
        (add, pair, add, (1, 2)),
        (overflowing_add, checked, lambda r: r is None, (2**31 - 1, 1)),
    ],
)
def test_chain_associativity(f, g, h, args):
    assert chain_associative(f, g, h, args)


@pytest.mark.parametrize("f, args", CALLABLES)
def test_flip_involution(f, args):
    assert flip_involutive(f, args)


@pytest.mark.parametrize("f, args", CALLABLES)
def test_curry_matches_direct_call(f, args):
    assert curry_matches_call(f, args)


@pytest.mark.parametrize("f, args", CALLABLES)
def test_supply_matches_direct_call(f, args):
    assert supply_matches_call(f, args)


@pytest.mark.parametrize("size", range(0, 13))
def test_laws_hold_up_to_max_arity(size):
    variadic = lift(concat, arity=size)
    args = tuple(range(size))
    assert flip_involutive(variadic, args)
    assert curry_matches_call(variadic, args)
    assert supply_matches_call(variadic, args)
