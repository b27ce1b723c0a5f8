"""Tests for Supply and Flip."""

from __future__ import annotations

import pytest

from fncombo import ArityError, Capability, Flip, Shape, Supply, flip, lift, once, override, supply
from fakes import CallLog, add3, label, pair


def fmt(a: int, b: int, c: str) -> str:
    return f"a: {a}, b: {b}, c: {c!r}"


class TestSupply:
    """Binding leading arguments."""

    def test_reduces_arity_by_one(self):
        supplied = supply(fmt, 8)
        assert isinstance(supplied, Supply)
        assert supplied.arity == 2
        assert supplied(16, "AAA") == "a: 8, b: 16, c: 'AAA'"

    def test_repeated_supply_binds_left_to_right(self):
        saturated = supply(supply(supply(fmt, 8), 16), "AAA")
        assert saturated.arity == 0
        assert saturated() == "a: 8, b: 16, c: 'AAA'"

    def test_zero_arity_rejected(self):
        with pytest.raises(ArityError, match="arity 0"):
            supply(lambda: None, 1)
        with pytest.raises(ArityError):
            supply(supply(pair, 1), 2)

    def test_argument_not_used_until_called(self):
        log = CallLog()
        supplied = supply(log.wrap("label", label), "x")
        assert log.calls == []
        assert supplied("y", "z") == "xyz"
        assert log.calls == [("label", ("x", "y", "z"))]

    def test_passes_capability_and_returns(self):
        supplied = supply(once(pair), 3)
        assert supplied.capability is Capability.ONCE
        assert supplied.returns == Shape.Tuple(2)

    def test_reusable(self):
        supplied = supply(add3, 1)
        assert supplied(1, 1) == 3
        assert supplied(2, 2) == 5


class TestFlip:
    """Reversing argument order."""

    def test_three_arguments(self):
        log = CallLog()
        flipped = flip(log.wrap("label", label))
        assert flipped("x", 1, "y") == "y1x"
        assert log.calls == [("label", ("y", 1, "x"))]

    def test_two_arguments(self):
        assert flip(lambda a, b: a - b)(1, 10) == 9

    def test_degenerate_arities(self):
        assert flip(lambda: "none")() == "none"
        assert flip(lambda a: a)("same") == "same"

    def test_involution(self):
        twice = flip(flip(label))
        assert twice("a", "b", "c") == label("a", "b", "c")

    def test_arity_preserved(self):
        flipped = flip(add3)
        assert isinstance(flipped, Flip)
        assert flipped.arity == 3

    def test_max_arity(self):
        twelve = lift(lambda *args: args, arity=12)
        assert flip(twelve)(*range(12)) == tuple(range(11, -1, -1))

    def test_beyond_max_arity(self):
        with override(max_arity=13):
            thirteen = lift(lambda *args: args, arity=13)
            assert flip(thirteen)(*range(13))[0] == 12
        with pytest.raises(ArityError):
            flip(thirteen)

    def test_flip_then_supply(self):
        """Supplying to a flipped callable binds the wrapped callable's last parameter."""
        assert supply(flip(label), "c")("b", "a") == "abc"
