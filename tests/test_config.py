"""Tests for the configuration model."""

import pytest
from pydantic import ValidationError

from fncombo import MAX_ARITY, Capability, CombinatorConfig, configure, get_config, lift, override


def test_defaults():
    config = CombinatorConfig()
    assert config.max_arity == MAX_ARITY == 12
    assert config.infer_returns is True
    assert config.default_capability is Capability.MUT


def test_config_is_frozen():
    config = get_config()
    with pytest.raises(ValidationError):
        config.max_arity = 3  # type: ignore[misc]


@pytest.mark.parametrize("changes", [{"max_arity": -1}, {"max_arity": 1000}, {"unknown": True}])
def test_invalid_changes_rejected(changes):
    before = get_config()
    with pytest.raises(ValidationError):
        configure(**changes)
    assert get_config() is before


def test_override_restores_previous():
    before = get_config()
    with override(max_arity=3) as config:
        assert config.max_arity == 3
        assert get_config().max_arity == 3
    assert get_config() is before


def test_override_restores_after_configure():
    before = get_config()
    with override():
        configure(max_arity=5)
        assert get_config().max_arity == 5
    assert get_config() is before


def test_capability_accepts_enum_values():
    assert CombinatorConfig(default_capability=2).default_capability is Capability.SHARED


def test_default_capability_applies_to_plain_callables():
    with override(default_capability=Capability.SHARED):
        assert lift(lambda a: a).capability is Capability.SHARED
    assert lift(lambda a: a).capability is Capability.MUT
