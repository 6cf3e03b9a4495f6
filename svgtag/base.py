"""Immutable builders shared by every SVG element.

A builder is a frozen pydantic model. Setters never mutate; they return a
copy carrying the new attribute map (``model_copy``), so a builder can be
reused as a template for any number of variations.
"""

from collections.abc import Mapping
from contextvars import ContextVar
from enum import Enum
from typing import Any, ClassVar, Protocol, Self

from pydantic import BaseModel, ConfigDict, Field

from .defaults import get_defaults
from .errors import UNEXPECTED_END, MarkupError
from .html import close_tag, element, open_tag
from .validator import attribute_name, normalize


class DefaultsProvider(Protocol):
    """Supplies the lowest-precedence attributes for a builder."""

    def get_defaults(self, tag: "BaseTag") -> Mapping[str, Any]: ...


class ThemeProvider(Protocol):
    """Maps a theme name to attributes for a builder."""

    def get_attributes(self, theme: str, tag: "BaseTag") -> Mapping[str, Any]: ...


# Builders opened with begin() and not yet closed, per builder class.
# Each update stores a new mapping; copied contexts keep the one they started with.
_open_blocks: ContextVar[dict[type, tuple["BaseTag", ...]]] = ContextVar(
    "svgtag_open_blocks", default={}
)


def _boolean_text(value: Any) -> Any:
    if callable(value) and not isinstance(value, (str, Enum)):
        value = value()
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _prefixed(prefix: str, name: str | Enum) -> str:
    name = attribute_name(name)
    return name if name.startswith(prefix) else f"{prefix}{name}"


class BaseTag(BaseModel):
    """Attribute map, content and providers common to all builders.

    Attributes:
        attrs: Attributes keyed by wire name, in insertion order
        inner: Raw markup rendered between the opening and closing tags
        default_providers: Providers consulted for default attributes
        theme_providers: (theme, provider) pairs consulted after the defaults
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    tag_name: ClassVar[str] = ""

    attrs: dict[str, Any] = Field(default_factory=dict)
    inner: str = ""
    default_providers: tuple[Any, ...] = ()
    theme_providers: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def tag(cls, defaults: Mapping[str, Any] | None = None) -> Self:
        """Create a builder.

        Registry defaults for this tag are applied first, then ``defaults``,
        so call-site values win. Later setter calls override both.

        Args:
            defaults: Attributes keyed by wire name

        Returns:
            A new builder
        """
        merged = {**get_defaults(cls), **(defaults or {})}
        instance = cls()
        return instance.attributes(merged) if merged else instance

    # --- attribute map ---

    def add_attribute(self, name: str | Enum, value: Any) -> Self:
        """Set one attribute; None removes it."""
        key = attribute_name(name)
        attrs = dict(self.attrs)
        if value is None:
            attrs.pop(key, None)
        else:
            attrs[key] = normalize(value)
        return self.model_copy(update={"attrs": attrs})

    def attributes(self, values: Mapping[str, Any]) -> Self:
        """Merge several attributes at once."""
        attrs = dict(self.attrs)
        for name, value in values.items():
            key = attribute_name(name)
            if value is None:
                attrs.pop(key, None)
            else:
                attrs[key] = normalize(value)
        return self.model_copy(update={"attrs": attrs})

    def remove_attribute(self, name: str | Enum) -> Self:
        return self.add_attribute(name, None)

    def get_attribute(self, name: str | Enum, default: Any = None) -> Any:
        return self.attrs.get(attribute_name(name), default)

    def get_attributes(self) -> dict[str, Any]:
        return dict(self.attrs)

    def resolved_attributes(self) -> dict[str, Any]:
        """Attributes to render: provider values underneath the builder's own."""
        resolved: dict[str, Any] = {}
        for provider in self.default_providers:
            resolved.update(provider.get_defaults(self))
        for theme, provider in self.theme_providers:
            resolved.update(provider.get_attributes(theme, self))
        resolved.update(self.attrs)
        return resolved

    # --- global attributes ---

    def accesskey(self, value: str | None) -> Self:
        return self.add_attribute("accesskey", value)

    def autofocus(self, value: bool) -> Self:
        return self.add_attribute("autofocus", True if value else None)

    def class_(self, value: str | None) -> Self:
        return self.add_attribute("class", value)

    def contenteditable(self, value: bool | str | None) -> Self:
        return self.add_attribute("contenteditable", _boolean_text(value))

    def dir(self, value: str | None) -> Self:
        return self.add_attribute("dir", value)

    def draggable(self, value: bool | str | None) -> Self:
        return self.add_attribute("draggable", _boolean_text(value))

    def hidden(self, value: bool) -> Self:
        return self.add_attribute("hidden", True if value else None)

    def id(self, value: str | None) -> Self:
        return self.add_attribute("id", value)

    def itemid(self, value: str | None) -> Self:
        return self.add_attribute("itemid", value)

    def itemprop(self, value: str | None) -> Self:
        return self.add_attribute("itemprop", value)

    def itemref(self, value: str | None) -> Self:
        return self.add_attribute("itemref", value)

    def itemscope(self, value: bool) -> Self:
        return self.add_attribute("itemscope", True if value else None)

    def itemtype(self, value: str | None) -> Self:
        return self.add_attribute("itemtype", value)

    def lang(self, value: str | None) -> Self:
        return self.add_attribute("lang", value)

    def role(self, value: str | None) -> Self:
        return self.add_attribute("role", value)

    def spellcheck(self, value: bool | str | None) -> Self:
        """Booleans render as "true"/"false"."""
        return self.add_attribute("spellcheck", _boolean_text(value))

    def style(self, value: str | None) -> Self:
        return self.add_attribute("style", value)

    def tabindex(self, value: int | None) -> Self:
        return self.add_attribute("tabindex", value)

    def title(self, value: str | None) -> Self:
        return self.add_attribute("title", value)

    def translate(self, value: bool | str | None) -> Self:
        if isinstance(value, bool):
            value = "yes" if value else "no"
        return self.add_attribute("translate", value)

    def add_aria_attribute(self, name: str | Enum, value: Any) -> Self:
        """Set ``aria-<name>``; booleans render as "true"/"false"."""
        return self.add_attribute(_prefixed("aria-", name), _boolean_text(value))

    def aria_attributes(self, values: Mapping[str, Any]) -> Self:
        return self.attributes(
            {_prefixed("aria-", name): _boolean_text(value) for name, value in values.items()}
        )

    def add_data_attribute(self, name: str | Enum, value: Any) -> Self:
        return self.add_attribute(_prefixed("data-", name), _boolean_text(value))

    def data_attributes(self, values: Mapping[str, Any]) -> Self:
        return self.attributes(
            {_prefixed("data-", name): _boolean_text(value) for name, value in values.items()}
        )

    def add_event_attribute(self, event: str, handler: str | None) -> Self:
        return self.add_attribute(_prefixed("on", event), handler)

    def event_attributes(self, handlers: Mapping[str, str | None]) -> Self:
        return self.attributes({_prefixed("on", event): handler for event, handler in handlers.items()})

    # --- providers ---

    def add_default_provider(self, provider: Any) -> Self:
        """Register a DefaultsProvider (class or instance)."""
        if isinstance(provider, type):
            provider = provider()
        return self.model_copy(update={"default_providers": (*self.default_providers, provider)})

    def add_theme_provider(self, theme: str, provider: Any) -> Self:
        """Register a ThemeProvider (class or instance) for a theme name."""
        if isinstance(provider, type):
            provider = provider()
        return self.model_copy(update={"theme_providers": (*self.theme_providers, (theme, provider))})

    # --- content and rendering ---

    def content(self, *values: "str | BaseTag") -> Self:
        """Replace the content with raw markup; builders are rendered first."""
        return self.model_copy(update={"inner": "".join(str(value) for value in values)})

    def get_content(self) -> str:
        return self.inner

    def render(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render()


class VoidTag(BaseTag):
    """Element written as a single opening tag with no content."""

    def render(self) -> str:
        return open_tag(self.tag_name, self.resolved_attributes())


class BlockTag(BaseTag):
    """Element written with content between opening and closing tags."""

    def render(self) -> str:
        return element(self.tag_name, self.get_content(), self.resolved_attributes())

    def begin(self) -> str:
        """Open the element for streamed content; close it with ``end()``."""
        blocks = _open_blocks.get()
        _open_blocks.set({**blocks, type(self): (*blocks.get(type(self), ()), self)})
        return open_tag(self.tag_name, self.resolved_attributes()) + "\n"

    @classmethod
    def end(cls) -> str:
        """Close the most recent ``begin()`` of this element class.

        Raises:
            MarkupError: If no element of this class is open
        """
        blocks = _open_blocks.get()
        stack = blocks.get(cls, ())
        if not stack:
            raise MarkupError(UNEXPECTED_END.format(tag=cls.tag_name))
        _open_blocks.set({**blocks, cls: stack[:-1]})
        return "\n" + close_tag(cls.tag_name)
