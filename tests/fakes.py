from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1


def overflowing_add(a: int, b: int) -> tuple[int, bool]:
    """32-bit wrapping addition reporting whether it overflowed."""
    total = a + b
    wrapped = (total - I32_MIN) % 2**32 + I32_MIN
    return wrapped, wrapped != total


def checked(res: int, over: bool) -> int | None:
    return None if over else res


def add(a: int, b: int) -> int:
    return a + b


def add3(a: int, b: int, c: int) -> int:
    return a + b + c


def pair(a: int) -> tuple[int, int]:
    return a, a


def label(a: Any, b: Any, c: Any) -> str:
    return f"{a}{b}{c}"


def nothing() -> None:
    return None


class Point(NamedTuple):
    x: int
    y: int


def to_point(a: int) -> Point:
    return Point(a, -a)


@dataclass
class CallLog:
    """Records invocations of wrapped callables in order."""

    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def wrap(self, name: str, func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def recorded(*args: Any) -> Any:
            self.calls.append((name, args))
            return func(*args)
        return recorded

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@dataclass
class Counter:
    """Callable whose result depends on how often it ran."""

    calls: int = 0

    def __call__(self, x: int) -> int:
        self.calls += 1
        return x + self.calls
