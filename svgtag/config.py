"""Configuration models and loaders for tag defaults and themes."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .defaults import TagDefaults, tag_key

Scalar = str | int | float | bool


class DefaultsConfig(BaseModel):
    """Per-tag default attributes and named themes.

    Example YAML::

        defaults:
          circle: {fill: none, stroke: black}
        themes:
          dark:
            circle: {stroke: white}
    """

    defaults: dict[str, dict[str, Scalar]] = Field(
        default_factory=dict, description="Tag name -> attributes applied by tag()"
    )
    themes: dict[str, dict[str, dict[str, Scalar]]] = Field(
        default_factory=dict, description="Theme name -> tag name -> attributes"
    )

    def to_registry(self) -> TagDefaults:
        """Build a defaults registry from the ``defaults`` section."""
        return TagDefaults(self.defaults)

    def theme_provider(self) -> "ConfigThemeProvider":
        return ConfigThemeProvider(self.themes)


class ConfigThemeProvider:
    """ThemeProvider reading attributes from a theme table."""

    def __init__(self, themes: Mapping[str, Mapping[str, Mapping[str, Any]]]):
        self.themes = themes

    def get_attributes(self, theme: str, tag: Any) -> dict[str, Any]:
        return dict(self.themes.get(theme, {}).get(tag_key(tag), {}))


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_defaults_config(path: Path) -> DefaultsConfig:
    """Load tag defaults from a YAML file; a missing file yields an empty config."""
    if not path.exists():
        return DefaultsConfig()

    return DefaultsConfig.model_validate(load_yaml(path))


def attributes_from_list(attr_args: list[str] | None) -> dict[str, str]:
    """Parse attributes from a CLI argument list.

    Args:
        attr_args: Items of the form NAME=VALUE; the value may contain "="

    Returns:
        Attributes keyed by name, in argument order

    Raises:
        ValueError: If an item has no "=" or an empty name
    """
    attributes: dict[str, str] = {}
    for item in attr_args or []:
        name, sep, value = item.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"--attr expects NAME=VALUE, got {item!r}")
        attributes[name] = value
    return attributes
