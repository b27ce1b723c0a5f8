"""Signature introspection for plain Python callables."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from fncombo.errors import ArityError
from fncombo.kernel.shape import Shape, shape_of_annotation
from fncombo.tuples.args import check_arity

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def _signature(func: Callable[..., Any], *, eval_str: bool = False) -> inspect.Signature | None:
    try:
        return inspect.signature(func, eval_str=eval_str)
    except (TypeError, ValueError):
        return None
    except Exception:
        if not eval_str:
            raise
        # String annotations that do not evaluate, e.g. TYPE_CHECKING-only names
        return _signature(func)


def arity_of(func: Callable[..., Any], declared: int | None = None) -> int:
    """Determine how many positional arguments `func` is invoked with.

    Without `declared`, the arity is the number of required positional
    parameters. With it, the declared arity is checked against the
    signature (when there is one) instead.

    Args:
        func: The callable to inspect
        declared: Arity supplied by the caller, if any

    Returns:
        The arity

    Raises:
        ArityError: If the arity cannot be determined, or the declared one
            cannot be bound to the signature
    """
    sig = _signature(func)

    if declared is not None:
        check_arity(declared)
        if sig is not None:
            try:
                sig.bind(*(None,) * declared)
            except TypeError as exc:
                raise ArityError(
                    f"{_name(func)} cannot be called with {declared} positional argument(s): {exc}",
                    value=func,
                    arity=declared,
                ) from exc
        return declared

    if sig is None:
        raise ArityError(
            f"cannot determine the arity of {_name(func)}; pass arity= explicitly",
            value=func,
        )

    arity = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise ArityError(
                f"{_name(func)} takes *{param.name}; pass arity= explicitly",
                value=func,
            )
        if param.kind is inspect.Parameter.KEYWORD_ONLY and param.default is param.empty:
            raise ArityError(
                f"{_name(func)} has required keyword-only parameter {param.name!r}",
                value=func,
            )
        if param.kind in _POSITIONAL and param.default is param.empty:
            arity += 1

    logger.debug("inferred arity %d for %s", arity, _name(func))
    return check_arity(arity)


def returns_of(func: Callable[..., Any]) -> Shape:
    """Shape of `func`'s output according to its return annotation."""
    sig = _signature(func, eval_str=True)
    if sig is None or sig.return_annotation is inspect.Signature.empty:
        return Shape.Unknown()
    return shape_of_annotation(sig.return_annotation)


def tuple_param_size(func: Callable[..., Any]) -> int | None:
    """Length of the fixed-size tuple `func`'s first positional parameter is annotated with."""
    sig = _signature(func, eval_str=True)
    if sig is None:
        return None
    for param in sig.parameters.values():
        if param.kind not in _POSITIONAL:
            return None
        if param.annotation is param.empty:
            return None
        shape = shape_of_annotation(param.annotation)
        return shape.size if shape.kind == "tuple" else None
    return None
