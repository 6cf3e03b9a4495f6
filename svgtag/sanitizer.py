"""Parsing and cleaning of untrusted SVG documents."""

import logging
import xml.etree.ElementTree as ET

from defusedxml import ElementTree as etree

LOGGER = logging.getLogger(__name__)

# Elements that can execute code or load foreign documents
BLOCKED_ELEMENTS = frozenset({"embed", "iframe", "object", "script"})

# Elements that rewrite another element's attributes at runtime
ANIMATION_ELEMENTS = frozenset({"animate", "animateMotion", "animateTransform", "set"})

# Animation attributes holding the values written to the target attribute
ANIMATION_VALUES = frozenset({"by", "from", "to", "values"})

HREF_ATTRIBUTES = frozenset({"href", "{http://www.w3.org/1999/xlink}href"})


def local_name(name: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified names."""
    return name.rsplit("}", 1)[-1]


def _compact(value: str) -> str:
    return "".join(value.split()).lower()


def _is_script_reference(value: str) -> bool:
    return _compact(value).startswith("javascript:")


def _animates_href(node: ET.Element) -> bool:
    target = node.get("attributeName", "")
    return target.strip().rsplit(":", 1)[-1].lower() == "href"


def _is_blocked(node: ET.Element) -> bool:
    if not isinstance(node.tag, str):
        return False
    name = local_name(node.tag)
    if name in BLOCKED_ELEMENTS:
        return True
    return name in ANIMATION_ELEMENTS and _animates_href(node)


def _clean_attributes(node: ET.Element) -> None:
    animation = isinstance(node.tag, str) and local_name(node.tag) in ANIMATION_ELEMENTS
    for name, value in list(node.attrib.items()):
        if local_name(name).lower().startswith("on"):
            LOGGER.debug("Removing event handler %s from <%s>", name, local_name(node.tag))
            del node.attrib[name]
        elif name in HREF_ATTRIBUTES and _is_script_reference(value):
            LOGGER.debug("Removing script reference from <%s>", local_name(node.tag))
            del node.attrib[name]
        elif animation and name in ANIMATION_VALUES and "javascript:" in _compact(value):
            LOGGER.debug("Removing script value %s from <%s>", name, local_name(node.tag))
            del node.attrib[name]


def sanitize_svg(data: str | bytes) -> ET.Element:
    """Parse an SVG document and strip active content from it.

    DTDs, entity declarations and external references are refused by the
    parser. Script-capable elements, animations targeting ``href``, ``on*``
    handlers and ``javascript:`` links or animation values are removed, and
    whitespace-only text between elements is dropped.

    Args:
        data: Raw document text

    Returns:
        The cleaned root element

    Raises:
        defusedxml.DefusedXmlException: If the document uses a forbidden construct
        xml.etree.ElementTree.ParseError: If the document is not well-formed XML
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    root = etree.fromstring(
        data,
        forbid_dtd=True,
        forbid_entities=True,
        forbid_external=True,
    )

    for parent in list(root.iter()):
        for child in list(parent):
            if _is_blocked(child):
                LOGGER.debug("Removing <%s> element", local_name(child.tag))
                parent.remove(child)

    for node in root.iter():
        _clean_attributes(node)
        if node.text is not None and not node.text.strip():
            node.text = None
        if node.tail is not None and not node.tail.strip():
            node.tail = None

    return root


def find_svg(root: ET.Element) -> ET.Element | None:
    """Return the first ``<svg>`` element in document order, namespaced or not."""
    for node in root.iter():
        if isinstance(node.tag, str) and local_name(node.tag) == "svg":
            return node
    return None
