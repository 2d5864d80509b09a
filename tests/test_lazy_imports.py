"""Tests for crumb.__init__: lazy import registry covers all public names."""

import tomllib
from pathlib import Path

import pytest

import crumb


@pytest.mark.parametrize("name", crumb.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(crumb, name)
    assert obj is not None, f"crumb.{name} resolved to None"


def test_top_level_matches_module() -> None:
    from crumb.http.cookies import Cookie

    assert crumb.Cookie is Cookie


def test_version_matches_packaging() -> None:
    pyproject = Path(__file__).resolve().parent.parent / "pyproject.toml"
    with pyproject.open("rb") as f:
        project = tomllib.load(f)["project"]
    assert crumb.__version__ == project["version"]


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        crumb.__getattr__("ThisDoesNotExist")
