"""Per-tag default attributes applied when a builder is created with ``tag()``.

The active registry lives in a context variable. ``use_defaults`` swaps in a
registry for the duration of a block, so tests and callers can scope their
defaults without touching the process-wide one.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any


def tag_key(tag: Any) -> str:
    """Return the registry key for a tag name or builder class."""
    if isinstance(tag, str):
        return tag
    return tag.tag_name


class TagDefaults:
    """Mapping of tag name to the attributes every new builder starts with."""

    def __init__(self, defaults: Mapping[str, Mapping[str, Any]] | None = None):
        self._defaults: dict[str, dict[str, Any]] = {}
        for tag, attributes in (defaults or {}).items():
            self.set_defaults(tag, attributes)

    def set_defaults(self, tag: Any, attributes: Mapping[str, Any]) -> None:
        """Register defaults for a tag; an empty mapping clears them."""
        key = tag_key(tag)
        if attributes:
            self._defaults[key] = dict(attributes)
        else:
            self._defaults.pop(key, None)

    def get_defaults(self, tag: Any) -> dict[str, Any]:
        return dict(self._defaults.get(tag_key(tag), {}))

    def clear(self) -> None:
        self._defaults.clear()

    def tags(self) -> list[str]:
        return list(self._defaults)


_active: ContextVar[TagDefaults] = ContextVar("svgtag_defaults", default=TagDefaults())


def current_defaults() -> TagDefaults:
    """Return the registry consulted by ``tag()``."""
    return _active.get()


def set_defaults(tag: Any, attributes: Mapping[str, Any]) -> None:
    current_defaults().set_defaults(tag, attributes)


def get_defaults(tag: Any) -> dict[str, Any]:
    return current_defaults().get_defaults(tag)


@contextmanager
def use_defaults(registry: TagDefaults | None = None) -> Iterator[TagDefaults]:
    """Activate a registry for the duration of a ``with`` block.

    Args:
        registry: Registry to activate; a fresh empty one when omitted

    Yields:
        The active registry
    """
    registry = registry if registry is not None else TagDefaults()
    token = _active.set(registry)
    try:
        yield registry
    finally:
        _active.reset(token)
