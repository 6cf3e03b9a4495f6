import pytest
from pydantic import ValidationError

from svgtag import Circle, DefaultsConfig, load_defaults_config, use_defaults
from svgtag.config import attributes_from_list


def test_load_defaults_config(tmp_path):
    path = tmp_path / "defaults.yaml"
    path.write_text(
        "defaults:\n"
        "  circle:\n"
        "    fill: none\n"
        "    stroke-width: 2\n"
        "themes:\n"
        "  dark:\n"
        "    circle:\n"
        "      stroke: white\n"
    )

    config = load_defaults_config(path)

    assert config.defaults == {"circle": {"fill": "none", "stroke-width": 2}}
    with use_defaults(config.to_registry()):
        circle = Circle.tag().add_theme_provider("dark", config.theme_provider())
    assert circle.render() == '<circle stroke="white" fill="none" stroke-width="2">'


def test_missing_config_is_empty(tmp_path):
    config = load_defaults_config(tmp_path / "missing.yaml")
    assert config == DefaultsConfig()
    assert config.to_registry().tags() == []


def test_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_defaults_config(path).defaults == {}


def test_config_rejects_nested_values(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("defaults:\n  circle:\n    fill: [red, blue]\n")
    with pytest.raises(ValidationError):
        load_defaults_config(path)


def test_unknown_theme_adds_nothing():
    provider = DefaultsConfig(themes={"dark": {"circle": {"stroke": "white"}}}).theme_provider()
    assert provider.get_attributes("light", Circle.tag()) == {}
    assert provider.get_attributes("dark", Circle.tag()) == {"stroke": "white"}


def test_attributes_from_list():
    assert attributes_from_list(["cx=10", "style=a=b", "class="]) == {
        "cx": "10",
        "style": "a=b",
        "class": "",
    }
    assert attributes_from_list(None) == {}


@pytest.mark.parametrize("item", ["cx", "=10"])
def test_attributes_from_list_rejects_malformed(item):
    with pytest.raises(ValueError, match="--attr expects NAME=VALUE"):
        attributes_from_list([item])
