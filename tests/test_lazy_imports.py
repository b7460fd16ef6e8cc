"""Tests for linkroute.__init__ — lazy imports cover all public names."""

import pytest

import linkroute


@pytest.mark.parametrize("name", linkroute.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(linkroute, name)
    assert obj is not None, f"linkroute.{name} resolved to None"


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        linkroute.__getattr__("ThisDoesNotExist")
