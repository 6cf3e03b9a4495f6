"""Markup string helpers shared by every element builder."""

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any


def escape_xml(text: str) -> str:
    """Escape XML special characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def format_value(value: Any) -> str:
    """Convert an attribute value to its markup text.

    Enum members render their value and integral floats drop the
    fractional part, so 1.0 renders as "1".
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def iter_attributes(attributes: Mapping[str, Any]) -> Iterator[tuple[str, str | None]]:
    """Yield (name, text) pairs for the attributes that should be written.

    Callables are invoked first. None, False and "" are skipped; True yields
    a None text for boolean attributes written by name only.
    """
    for name, value in attributes.items():
        if callable(value) and not isinstance(value, (str, Enum)):
            value = value()
        if value is None or value is False or (isinstance(value, str) and value == ""):
            continue
        if value is True:
            yield name, None
        else:
            yield name, format_value(value)


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render attributes as ' name="value"' pairs in insertion order."""
    parts = []
    for name, text in iter_attributes(attributes):
        if text is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape_xml(text)}"')
    return "".join(parts)


def open_tag(name: str, attributes: Mapping[str, Any]) -> str:
    return f"<{name}{render_attributes(attributes)}>"


def close_tag(name: str) -> str:
    return f"</{name}>"


def element(name: str, content: str, attributes: Mapping[str, Any]) -> str:
    """Build a block element with its content on its own line.

    The content is written unchanged; empty content leaves the closing tag
    on the line after the opening tag.
    """
    if not content:
        return f"{open_tag(name, attributes)}\n{close_tag(name)}"
    return f"{open_tag(name, attributes)}\n{content}\n{close_tag(name)}"
