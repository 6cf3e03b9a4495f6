"""The ``<svg>`` root element, built from content or from an existing file."""

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, ClassVar, Self

from defusedxml import DefusedXmlException

from .attributes import (
    AspectRatioMixin,
    FillMixin,
    OpacityMixin,
    PositionMixin,
    SizeMixin,
    StrokeMixin,
    TransformMixin,
    ViewBoxMixin,
    setter,
)
from .base import BaseTag, BlockTag
from .errors import (
    CONTENT_AND_FILE_PATH_BOTH_EMPTY,
    FAILED_TO_READ_FILE,
    FAILED_TO_SANITIZE_SVG,
    TITLE_MUST_BE_STRING_OR_NULL,
    ContentError,
    InvalidValueError,
    SvgFileError,
)
from .html import element, escape_xml, iter_attributes
from .sanitizer import find_svg, sanitize_svg
from .validator import normalize
from .values import SvgAttribute

LOGGER = logging.getLogger(__name__)

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def _register_namespaces() -> None:
    """Register XML namespaces for SVG output."""
    ET.register_namespace("", SVG_NS)
    ET.register_namespace("xlink", XLINK_NS)


def _namespace(tag: str) -> str:
    return tag[1:].split("}", 1)[0] if tag.startswith("{") else ""


class Svg(
    PositionMixin,
    SizeMixin,
    ViewBoxMixin,
    AspectRatioMixin,
    FillMixin,
    StrokeMixin,
    OpacityMixin,
    TransformMixin,
    BlockTag,
):
    """Root ``<svg>`` element.

    The ``title`` attribute is never written as an attribute: it becomes a
    ``<title>`` child placed before everything else, which screen readers use
    as the accessible name of the graphic.

    Attributes:
        source: Path of an SVG file rendered instead of ``inner``
    """

    tag_name: ClassVar[str] = "svg"

    source: str = ""

    def file_path(self, value: str | os.PathLike) -> Self:
        """Render the SVG file at ``value`` instead of the builder's content."""
        return self.model_copy(update={"source": os.fspath(value)})

    @setter(SvgAttribute.XMLNS)
    def xmlns(self, value: str | None) -> Self:
        return self.add_attribute(SvgAttribute.XMLNS, value)

    def title_text(self) -> str:
        """Return the title to render, or "" when none is set.

        Raises:
            InvalidValueError: If the title attribute is not a string
        """
        value = normalize(BaseTag.resolved_attributes(self).get("title"))
        if value is not None and not isinstance(value, str):
            raise InvalidValueError(TITLE_MUST_BE_STRING_OR_NULL, value=value, attribute="title")
        return value or ""

    def resolved_attributes(self) -> dict[str, Any]:
        attributes = super().resolved_attributes()
        attributes.pop("title", None)
        return attributes

    def get_content(self) -> str:
        title = self.title_text()
        if not title:
            return self.inner
        return element("title", escape_xml(title), {}) + "\n" + self.inner

    def render(self) -> str:
        if not self.source and not self.inner:
            raise ContentError(CONTENT_AND_FILE_PATH_BOTH_EMPTY)
        if self.source:
            return self._render_file()
        return super().render()

    def _render_file(self) -> str:
        path = self.source
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise SvgFileError(FAILED_TO_READ_FILE.format(path=path), path) from exc

        if not data.strip():
            raise SvgFileError(FAILED_TO_SANITIZE_SVG.format(path=path), path)

        LOGGER.debug("Loaded %d bytes from %s", len(data), path)
        try:
            root = sanitize_svg(data)
        except DefusedXmlException as exc:
            raise SvgFileError(FAILED_TO_SANITIZE_SVG.format(path=path), path) from exc
        except ET.ParseError as exc:
            LOGGER.warning("Skipping %s: not well-formed XML (%s)", path, exc)
            return ""

        svg = find_svg(root)
        if svg is None:
            LOGGER.warning("Skipping %s: no <svg> element found", path)
            return ""

        namespace = _namespace(svg.tag)
        title = self.title_text()

        for name, text in iter_attributes(self.resolved_attributes()):
            if name == "xmlns" and namespace:
                continue
            svg.set(name, name if text is None else text)

        if title:
            node = ET.Element(f"{{{namespace}}}title" if namespace else "title")
            node.text = title
            svg.insert(0, node)
        svg.tail = None

        _register_namespaces()
        return ET.tostring(svg, encoding="unicode")
