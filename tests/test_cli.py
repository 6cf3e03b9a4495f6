import pytest

from svgtag.cli import create_parser, main


def run(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    captured = capsys.readouterr()
    return excinfo.value.code, captured.out, captured.err


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        create_parser().parse_args([])


def test_values_lists_vocabularies(capsys):
    code, out, _ = run(["values"], capsys)
    assert code == 0
    assert "FillRule" in out.splitlines()
    assert "SvgAttribute" not in out


def test_values_of_one_vocabulary(capsys):
    code, out, _ = run(["values", "StrokeLineCap"], capsys)
    assert code == 0
    assert out.splitlines() == ["butt", "round", "square"]


def test_values_unknown(capsys):
    code, _, err = run(["values", "Nope"], capsys)
    assert code == 1
    assert "Unknown vocabulary: Nope" in err


def test_render_element(capsys):
    code, out, _ = run(
        ["render", "circle", "--attr", "cx=50", "--attr", "r=40", "--attr", "class=dot"],
        capsys,
    )
    assert code == 0
    assert out.strip() == '<circle cx="50" r="40" class="dot">'


def test_render_block_with_content(capsys):
    code, out, _ = run(["render", "lineargradient", "-a", "id=g", "--content", "<stop>"], capsys)
    assert code == 0
    assert out.strip() == '<linearGradient id="g">\n<stop>\n</linearGradient>'


def test_render_validates_attributes(capsys):
    code, out, err = run(["render", "path", "--attr", "fill-rule=sideways"], capsys)
    assert code == 1
    assert out == ""
    assert '"sideways" is not a valid value for "fill-rule".' in err


def test_render_malformed_attribute(capsys):
    code, _, err = run(["render", "rect", "--attr", "width"], capsys)
    assert code == 1
    assert "--attr expects NAME=VALUE" in err


def test_render_unknown_element(capsys):
    code, _, err = run(["render", "blink"], capsys)
    assert code == 1
    assert "Unknown element: blink" in err


def test_render_with_defaults_and_theme(tmp_path, capsys):
    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(
        "defaults:\n"
        "  rect:\n"
        "    fill: none\n"
        "themes:\n"
        "  dark:\n"
        "    rect:\n"
        "      stroke: white\n"
    )

    code, out, _ = run(
        ["render", "rect", "--defaults", str(defaults), "--theme", "dark", "--attr", "width=5"],
        capsys,
    )
    assert code == 0
    assert out.strip() == '<rect stroke="white" fill="none" width="5">'


def test_render_svg_without_content(capsys):
    code, _, err = run(["render", "svg"], capsys)
    assert code == 1
    assert "File path and content cannot be empty at the same time for SVG." in err


def test_inline(stubs, capsys):
    code, out, _ = run(["inline", str(stubs / "logo.svg"), "--title", "Logo", "--attr", "width=48"], capsys)
    assert code == 0
    assert out.strip() == (
        '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" viewBox="0 0 24 24" width="48">'
        '<title>Logo</title><path d="M0 0h24v24H0z" /></svg>'
    )


def test_inline_missing_file(stubs, capsys):
    code, _, err = run(["inline", str(stubs / "missing.svg")], capsys)
    assert code == 1
    assert "Failed to read file" in err


def test_inline_without_svg_element(stubs, capsys):
    code, _, err = run(["inline", str(stubs / "no-svg.xml")], capsys)
    assert code == 1
    assert "No <svg> element rendered" in err
