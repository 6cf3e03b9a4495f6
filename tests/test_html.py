from svgtag import FillRule
from svgtag.html import (
    element,
    escape_xml,
    format_value,
    open_tag,
    render_attributes,
)


def test_escape_xml():
    assert escape_xml("<a & \"b\" 'c'>") == "&lt;a &amp; &quot;b&quot; &#x27;c&#x27;&gt;"


def test_format_value():
    assert format_value(1.0) == "1"
    assert format_value(0.5) == "0.5"
    assert format_value(10) == "10"
    assert format_value(FillRule.EVENODD) == "evenodd"


def test_render_attributes_keeps_order_and_skips_empty():
    attributes = {
        "cx": 10,
        "fill": None,
        "stroke": "",
        "hidden": True,
        "focusable": False,
        "fill-rule": FillRule.NONZERO,
        "class": lambda: "computed",
    }

    assert render_attributes(attributes) == ' cx="10" hidden fill-rule="nonzero" class="computed"'


def test_attribute_values_are_escaped():
    assert open_tag("text", {"font-family": 'Say "hi"'}) == '<text font-family="Say &quot;hi&quot;">'


def test_element_puts_content_on_its_own_line():
    assert element("g", "<rect>", {"id": "a"}) == '<g id="a">\n<rect>\n</g>'


def test_element_without_content():
    assert element("defs", "", {}) == "<defs>\n</defs>"


def test_element_keeps_blank_lines_in_content():
    assert element("style", "a {}\n\n\nb {}\n", {}) == "<style>\na {}\n\n\nb {}\n\n</style>"
