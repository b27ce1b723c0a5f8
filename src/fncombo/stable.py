"""Fixed-arity combinators for one- and two-argument callables.

These are plain closures without shape checks; only curry() reads the
signature, to know when to fire. On arity <= 2 they agree with the
combinators in `fncombo.combinators`.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from fncombo.errors import ArityError
from fncombo.kernel.signature import arity_of

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
X = TypeVar("X")
Y = TypeVar("Y")


def compose(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """(b -> c), (a -> b) -> (a -> c)"""
    def composed(a: A) -> C:
        return f(g(a))
    return composed


def chain(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """(a -> b), (b -> c) -> (a -> c)"""
    def chained(a: A) -> C:
        return g(f(a))
    return chained


def flip_args(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """(a, b -> c) -> (b, a -> c)"""
    @functools.wraps(f)
    def flipped(b: B, a: A) -> C:
        return f(a, b)
    return flipped


def product(f: Callable[[A], B], g: Callable[[X], Y]) -> Callable[[A, X], tuple[B, Y]]:
    """(a -> b), (x -> y) -> (a, x -> (b, y))"""
    def both(a: A, x: X) -> tuple[B, Y]:
        return f(a), g(x)
    return both


def supply(f: Callable[..., C], argument: Any) -> Callable[..., C]:
    """Bind the first argument of a one- or two-argument callable."""
    return functools.partial(f, argument)


def curry(f: Callable[..., C]) -> Callable[..., Any]:
    """(a, b -> c) -> (a -> b -> c); one- and zero-argument callables fire on the first call.

    Raises:
        ArityError: If `f` takes more than two arguments
    """
    arity = arity_of(f)
    if arity > 2:
        raise ArityError(f"stable.curry() takes callables of up to 2 arguments, got {arity}", value=f, arity=arity)
    if arity < 2:
        # Already complete after one call (or none)
        @functools.wraps(f)
        def called(*args: Any) -> C:
            if len(args) != arity:
                raise ArityError(f"expected {arity} argument(s), got {len(args)}", value=args, arity=arity)
            return f(*args)
        return called

    @functools.wraps(f)
    def curried(a: Any) -> Callable[[Any], C]:
        return functools.partial(f, a)
    return curried


def unit(f: Callable[..., Any]) -> Callable[..., None]:
    """Discard the output of `f`."""
    @functools.wraps(f)
    def discarded(*args: Any) -> None:
        f(*args)
    return discarded
