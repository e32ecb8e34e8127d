"""Tests for slugroute.__init__: lazy import registry covers all public names."""

import pytest

import slugroute


@pytest.mark.parametrize("name", slugroute.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(slugroute, name)
    assert obj is not None, f"slugroute.{name} resolved to None"


def test_registry_matches_all() -> None:
    assert set(slugroute._LAZY_IMPORTS) == set(slugroute.__all__)


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        slugroute.__getattr__("ThisDoesNotExist")
