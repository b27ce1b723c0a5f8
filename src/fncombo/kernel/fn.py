"""Fn - the callable value every combinator consumes and produces."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fncombo import config
from fncombo.errors import ArityError, ConsumedError
from fncombo.kernel.capability import Capability, weakest
from fncombo.kernel.shape import Shape
from fncombo.kernel.signature import arity_of, returns_of
from fncombo.tuples.args import ArgTuple, as_args
from fncombo.tuples.auto import fits

# Extension registry - class-level storage for Fn operations
_extensions_registry: dict[str, Callable[..., Any]] = {}


class OnceGuard:
    """Consumption flag of a consume-once value, shared by its copies."""

    __slots__ = ("spent",)

    def __init__(self) -> None:
        self.spent = False

    def consume(self, owner: Fn) -> None:
        if self.spent:
            raise ConsumedError(f"{type(owner).__name__} can only be invoked once")
        self.spent = True

    def __copy__(self) -> OnceGuard:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> OnceGuard:
        return self


@dataclass(frozen=True)
class Fn(ABC):
    """A callable of fixed arity with a known invocation capability.

    Invoking an Fn checks the argument count (and, for consume-once values,
    prior use) before any wrapped code runs.

    Operations can be registered via register_op() and are then available
    as methods on every Fn.
    """

    _guard: OnceGuard = field(default_factory=OnceGuard, init=False, repr=False, compare=False)
    _capability: Capability = field(default=Capability.SHARED, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Wrapped values are immutable, so the capability is fixed at construction
        object.__setattr__(self, "_capability", self._derive_capability())

    @property
    @abstractmethod
    def arity(self) -> int:
        """Number of positional arguments this value is invoked with."""

    @property
    def capability(self) -> Capability:
        """Reinvocation contract of this value."""
        return self._capability

    @abstractmethod
    def _derive_capability(self) -> Capability:
        """Compute the capability from the wrapped values."""

    @property
    def returns(self) -> Shape:
        """What is statically known about this value's output."""
        return Shape.Unknown()

    def accepts(self, shape: Shape) -> bool | None:
        """Whether outputs of `shape` can be fed to this value (None if unknown)."""
        return fits(shape, self.arity)

    @abstractmethod
    def _invoke(self, args: ArgTuple) -> Any:
        """Run with an argument tuple already checked against arity."""

    def __call__(self, *args: Any) -> Any:
        return self.call_args(args)

    def call_args(self, args: ArgTuple) -> Any:
        """Invoke with an argument tuple.

        Raises:
            ArityError: If the tuple length differs from arity
            ConsumedError: If this is a consume-once value that already ran
        """
        args = as_args(args)
        if len(args) != self.arity:
            raise ArityError(
                f"{type(self).__name__} takes {self.arity} argument(s), got {len(args)}",
                value=args,
                arity=self.arity,
            )
        if self.capability is Capability.ONCE:
            self._guard.consume(self)
        return self._invoke(args)

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Make `fn` available as a method on every callable value.

        Args:
            name: The method name (e.g., "chain")
            fn: Combinator constructor taking the receiving Fn as first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Resolve combinator methods such as `.chain` from the registry."""
        if name in _extensions_registry:
            # The receiver becomes the leftmost callable of the new combinator
            return functools.partial(_extensions_registry[name], self)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")


@dataclass(frozen=True)
class Lifted(Fn):
    """A plain Python callable together with its arity, capability and output shape."""

    func: Callable[..., Any]
    declared_arity: int
    declared_capability: Capability = Capability.MUT
    declared_returns: Shape = field(default_factory=Shape.Unknown)

    @property
    def arity(self) -> int:
        return self.declared_arity

    def _derive_capability(self) -> Capability:
        return self.declared_capability

    @property
    def returns(self) -> Shape:
        return self.declared_returns

    def _invoke(self, args: ArgTuple) -> Any:
        return self.func(*args)


def lift(
    func: Callable[..., Any],
    *,
    arity: int | None = None,
    capability: Capability | None = None,
    returns: Shape | None = None,
) -> Fn:
    """Turn any callable into an Fn.

    Args:
        func: Function, method, builtin, callable object or Fn
        arity: Number of positional arguments, when it cannot or should
            not be read from the signature
        capability: Reinvocation contract; defaults to the configured one
        returns: Output shape; defaults to the return annotation

    Returns:
        `func` itself if it is already an Fn and nothing is overridden,
        otherwise a Lifted wrapper

    Raises:
        ArityError: If the arity cannot be determined or does not fit
        TypeError: If `func` is not callable
    """
    if isinstance(func, Fn):
        if arity is None and capability is None and returns is None:
            return func
        if arity is not None and arity != func.arity:
            raise ArityError(
                f"{type(func).__name__} has arity {func.arity}, not {arity}",
                value=func,
                arity=arity,
            )
        return Lifted(
            func=func,
            declared_arity=func.arity,
            # Lifting never strengthens the capability of what it wraps
            declared_capability=weakest([func.capability, func.capability if capability is None else capability]),
            declared_returns=returns or func.returns,
        )

    if not callable(func):
        raise TypeError(f"{func!r} is not callable")

    settings = config.get_config()
    if returns is None:
        returns = returns_of(func) if settings.infer_returns else Shape.Unknown()
    return Lifted(
        func=func,
        declared_arity=arity_of(func, arity),
        declared_capability=settings.default_capability if capability is None else capability,
        declared_returns=returns,
    )


fn = lift


def once(func: Callable[..., Any], **kwargs: Any) -> Fn:
    """Lift `func` as a consume-once value."""
    return lift(func, capability=Capability.ONCE, **kwargs)


def shared(func: Callable[..., Any], **kwargs: Any) -> Fn:
    """Lift `func` as a read-only, shareable value."""
    return lift(func, capability=Capability.SHARED, **kwargs)
