"""Tests for the fluent method surface registered on Fn."""

from __future__ import annotations

import operator

from fncombo import Chain, Compose, Curry, Flip, Supply, Tupled, Unit, Untuple, fn
from fakes import I32_MAX, checked, overflowing_add


def test_chain_method():
    add_eight = fn(lambda a: a + 2).chain(lambda a: a + 3).chain(lambda a: a + 3)
    assert isinstance(add_eight, Chain)
    assert add_eight(4) == 12


def test_compose_method():
    add_eight = fn(lambda a: a + 2).compose(lambda a: a + 3).compose(lambda a: a + 3)
    assert isinstance(add_eight, Compose)
    assert add_eight(4) == 12


def test_chain_ut_method():
    add_eight = fn(lambda a: (a, 8)).chain_ut(lambda a, b: a + b)
    assert add_eight(4) == 12


def test_compose_ut_method():
    checked_add = fn(checked).compose_ut(overflowing_add)
    assert checked_add(8, 16) == 24
    assert checked_add(I32_MAX, 1) is None


def test_supply_method():
    formatted = (
        fn(lambda a, b, c: f"a: {a}, b: {b}, c: {c!r}")
        .supply(8)
        .supply(16)
        .supply("AAA")
    )
    assert isinstance(formatted, Supply)
    assert formatted() == "a: 8, b: 16, c: 'AAA'"


def test_flip_method():
    flipped = fn(lambda a, b, c: f"{a}{b}{c}").flip()
    assert isinstance(flipped, Flip)
    assert flipped("c", 17, "hello, ") == "hello, 17c"


def test_curry_method():
    curried = fn(operator.add).curry()
    assert isinstance(curried, Curry)
    assert curried(2)(2) == 4


def test_unit_method():
    discarded = fn(operator.sub).unit()
    assert isinstance(discarded, Unit)
    assert discarded(2, 1) is None


def test_untuple_and_tupled_methods():
    spread = fn(operator.add).untuple()
    assert isinstance(spread, Untuple)
    assert spread((1, 2)) == 3

    packed = fn(sum).tupled(3)
    assert isinstance(packed, Tupled)
    assert packed(1, 2, 3) == 6


def test_methods_on_combinator_results():
    pipeline = fn(lambda a, b: a * b).flip().supply(3).chain(repr)
    assert pipeline(4) == "12"
