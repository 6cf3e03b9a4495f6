from pathlib import Path

import pytest

from svgtag import TagDefaults, use_defaults

STUBS = Path(__file__).resolve().parent / "stubs"


class DefaultProvider:
    """Gives every builder a class, and circles a fill."""

    def get_defaults(self, tag):
        defaults = {"class": "default-class"}
        if tag.tag_name == "circle":
            defaults["fill"] = "red"
        return defaults


class ThemeProvider:
    def get_attributes(self, theme, tag):
        if theme == "dark":
            return {"stroke": "white"}
        return {}


@pytest.fixture
def stubs() -> Path:
    return STUBS


@pytest.fixture
def registry() -> TagDefaults:
    """An empty defaults registry, active for the duration of the test."""
    with use_defaults() as active:
        yield active
