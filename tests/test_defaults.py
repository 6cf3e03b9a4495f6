from svgtag import Circle, Rect, TagDefaults, current_defaults, get_defaults, set_defaults, use_defaults


def test_registry_set_get_and_clear():
    registry = TagDefaults()
    registry.set_defaults("circle", {"fill": "none"})
    registry.set_defaults(Rect, {"rx": 2})

    assert registry.get_defaults(Circle) == {"fill": "none"}
    assert registry.get_defaults("rect") == {"rx": 2}
    assert registry.tags() == ["circle", "rect"]

    registry.set_defaults("circle", {})
    assert registry.get_defaults("circle") == {}

    registry.clear()
    assert registry.tags() == []


def test_get_defaults_returns_a_copy():
    registry = TagDefaults({"circle": {"fill": "none"}})
    registry.get_defaults("circle")["fill"] = "red"
    assert registry.get_defaults("circle") == {"fill": "none"}


def test_use_defaults_scopes_the_registry():
    outer = current_defaults()

    with use_defaults(TagDefaults({"circle": {"r": 4}})) as active:
        assert current_defaults() is active
        assert get_defaults(Circle) == {"r": 4}
        assert Circle.tag().render() == '<circle r="4">'

    assert current_defaults() is outer
    assert Circle.tag().render() == "<circle>"


def test_set_defaults_targets_active_registry(registry):
    set_defaults("rect", {"fill": "blue"})

    assert registry.get_defaults("rect") == {"fill": "blue"}
    assert Rect.tag().width(5).render() == '<rect fill="blue" width="5">'


def test_registry_defaults_are_not_retroactive(registry):
    circle = Circle.tag()
    set_defaults(Circle, {"r": 9})

    assert circle.render() == "<circle>"
    assert Circle.tag().render() == '<circle r="9">'
