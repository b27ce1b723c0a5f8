"""Process-wide configuration for the combinator engine."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fncombo.kernel.capability import Capability

logger = logging.getLogger(__name__)

# Largest arity the engine is documented to support out of the box.
MAX_ARITY = 12


class CombinatorConfig(BaseModel):
    """Settings consulted when callables are lifted and combinators are built.

    Attributes:
        max_arity: Largest argument tuple any callable may take.
        infer_returns: Read return annotations to reject mismatched
            chains at construction time.
        default_capability: Capability assumed for plain callables.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_arity: int = Field(default=MAX_ARITY, ge=0, le=255)
    infer_returns: bool = True
    default_capability: Capability = Capability.MUT


_config = CombinatorConfig()


def get_config() -> CombinatorConfig:
    """Return the active configuration."""
    return _config


def configure(**changes: Any) -> CombinatorConfig:
    """Validate and install a new configuration built from the active one.

    Raises:
        pydantic.ValidationError: If any of the changed values is invalid.
    """
    global _config
    new_config = CombinatorConfig.model_validate({**_config.model_dump(), **changes})
    logger.debug("combinator config changed: %s", changes)
    _config = new_config
    return new_config


@contextmanager
def override(**changes: Any) -> Iterator[CombinatorConfig]:
    """Temporarily apply configuration changes, restoring the previous config on exit."""
    global _config
    previous = _config
    try:
        yield configure(**changes)
    finally:
        _config = previous
