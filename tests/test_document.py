import logging

import pytest

from svgtag import (
    ContentError,
    InvalidValueError,
    PreserveAspectRatio,
    Svg,
    SvgFileError,
    set_defaults,
)


def test_svg_with_content():
    svg = Svg.tag().xmlns("http://www.w3.org/2000/svg").view_box("0 0 100 100").content("<circle>")
    assert svg.render() == '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">\n<circle>\n</svg>'


def test_title_renders_as_first_child():
    svg = Svg.tag().content("value").title("test-value")
    assert svg.render() == "<svg>\n<title>\ntest-value\n</title>\nvalue\n</svg>"


def test_title_is_escaped():
    svg = Svg.tag().title("A & B").content("x")
    assert "<title>\nA &amp; B\n</title>" in svg.render()


def test_title_from_tag_defaults(registry):
    set_defaults(Svg, {"title": "default-title"})
    svg = Svg.tag({"class": "default-class"}).content("value")
    assert svg.render() == '<svg class="default-class">\n<title>\ndefault-title\n</title>\nvalue\n</svg>'


def test_title_must_be_a_string():
    with pytest.raises(InvalidValueError, match="Title attribute must be a string or None."):
        Svg.tag().attributes({"title": ["not", "text"]}).content("value").render()


def test_paint_and_aspect_ratio():
    svg = Svg.tag().width(24).height(24).fill("none").preserve_aspect_ratio(PreserveAspectRatio.NONE)
    assert svg.content("x").render() == '<svg width="24" height="24" fill="none" preserveAspectRatio="none">\nx\n</svg>'


def test_empty_content_and_file_path():
    with pytest.raises(ContentError, match="File path and content cannot be empty at the same time for SVG."):
        Svg.tag().render()


def test_file_path(stubs):
    markup = Svg.tag().file_path(stubs / "logo.svg").render()
    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" viewBox="0 0 24 24">'
        '<path d="M0 0h24v24H0z" /></svg>'
    )


def test_file_path_with_title_and_attributes(stubs):
    markup = Svg.tag().file_path(stubs / "logo.svg").class_("icon").hidden(True).title("Logo").render()
    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" viewBox="0 0 24 24" class="icon" hidden="hidden">'
        '<title>Logo</title><path d="M0 0h24v24H0z" /></svg>'
    )


def test_file_path_keeps_namespace_when_xmlns_is_set(stubs):
    markup = Svg.tag().file_path(stubs / "logo.svg").xmlns("http://www.w3.org/2000/svg").render()
    assert markup.count("xmlns=") == 1


def test_blank_file_gets_title(stubs):
    markup = Svg.tag().file_path(stubs / "blank.svg").title("Appended Title").render()
    assert markup == (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><title>Appended Title</title></svg>'
    )


def test_missing_file(stubs):
    path = stubs / "missing.svg"
    with pytest.raises(SvgFileError) as excinfo:
        Svg.tag().file_path(path).render()
    assert str(excinfo.value) == f"Failed to read file: '{path}'."
    assert excinfo.value.path == str(path)


@pytest.mark.parametrize("name", ["empty.svg", "entity.svg"])
def test_file_that_cannot_be_sanitized(stubs, name):
    path = stubs / name
    with pytest.raises(SvgFileError, match="Failed to sanitize SVG content from file"):
        Svg.tag().file_path(path).render()


@pytest.mark.parametrize("name", ["malformed.svg", "no-svg.xml"])
def test_unusable_file_renders_empty(stubs, name, caplog):
    with caplog.at_level(logging.WARNING, logger="svgtag.document"):
        assert Svg.tag().file_path(stubs / name).render() == ""
    assert "Skipping" in caplog.text


def test_file_content_is_sanitized(stubs):
    markup = Svg.tag().file_path(stubs / "scripted.svg").render()
    assert "script" not in markup
    assert "onclick" not in markup
    assert "javascript:" not in markup
    assert '<rect width="10" height="10" />' in markup
    assert "animate" not in markup
    assert "<set" not in markup
    assert '<circle r="1" />' in markup
