"""Invocation capabilities of callable values."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Capability(IntEnum):
    """
    Reinvocation contract a callable value offers.

    Ordered from weakest to strongest:
    - ONCE: may be invoked exactly one time
    - MUT: may be invoked repeatedly, possibly mutating captured state
    - SHARED: may be invoked repeatedly without mutation, safe to share across callers
    """

    ONCE = 0
    MUT = 1
    SHARED = 2


def weakest(capabilities: Iterable[Capability]) -> Capability:
    """Return the capability every one of the given capabilities supports."""
    return Capability(min(capabilities, default=Capability.SHARED))
