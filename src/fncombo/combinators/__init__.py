"""Combinators - building new callables out of existing ones."""

from .adapt import Tupled, Unit, Untuple, tupled, unit, untuple
from .chain import Chain, Compose, chain, chain_ut, check_link, compose, compose_ut
from .curry import Curry, curry
from .flip import Flip, flip
from .supply import Supply, supply

__all__ = [
    # Sequencing
    "Chain",
    "Compose",
    "chain",
    "compose",
    "chain_ut",
    "compose_ut",
    "check_link",
    # Application
    "Curry",
    "curry",
    "Supply",
    "supply",
    "Flip",
    "flip",
    # Adapters
    "Untuple",
    "Tupled",
    "Unit",
    "untuple",
    "tupled",
    "unit",
]
