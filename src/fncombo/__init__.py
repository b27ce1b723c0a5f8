"""fncombo - arity-checked function combinators."""

from .kernel import Capability, Fn, Lifted, Shape, fn, lift, once, shared
from .combinators import (
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
from .config import MAX_ARITY, CombinatorConfig, configure, get_config, override
from .errors import ArityError, CombinatorError, ConsumedError, ShapeError
from .tuples import auto_tuple, flip_tuple, put_first, take_first

# Import ext to register Fn methods
from . import ext  # noqa: F401

__all__ = [
    # Callable values
    "Fn",
    "Lifted",
    "fn",
    "lift",
    "once",
    "shared",
    "Capability",
    "Shape",
    # Combinators
    "Chain",
    "Compose",
    "Curry",
    "Supply",
    "Flip",
    "Untuple",
    "Tupled",
    "Unit",
    "chain",
    "chain_ut",
    "compose",
    "compose_ut",
    "curry",
    "supply",
    "flip",
    "untuple",
    "tupled",
    "unit",
    # Tuples
    "auto_tuple",
    "flip_tuple",
    "take_first",
    "put_first",
    # Config
    "MAX_ARITY",
    "CombinatorConfig",
    "get_config",
    "configure",
    "override",
    # Errors
    "CombinatorError",
    "ShapeError",
    "ArityError",
    "ConsumedError",
]
