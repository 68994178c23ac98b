import pytest

from shellcss import grid, helpers
from shellcss.css.parser import AtRule, QualifiedRule
from shellcss.css.render import render


def test_helper_without_breakpoints(settings):
    [rule] = helpers.helper("hide", settings=settings)
    assert isinstance(rule, QualifiedRule)
    assert rule.prelude == ".h-hide"
    [decl] = rule.declarations
    assert decl.name == "display" and decl.text == "none" and decl.important


def test_hide_visually_at_breakpoints(settings):
    rules = helpers.helper("hide-visually", ["lap", ("desk", "max")], settings)
    assert [type(rule) for rule in rules] == [QualifiedRule, AtRule, AtRule]
    assert [rule.rules[0].prelude for rule in rules[1:]] == [
        ".h-hide-visually-from-lap",
        ".h-hide-visually-up-to-desk",
    ]
    assert [d.name for d in rules[1].rules[0].declarations] == [
        "border", "clip", "height", "margin", "overflow", "padding", "position", "width",
    ]


def test_unknown_helper(settings):
    with pytest.raises(KeyError, match="blink"):
        helpers.helper("blink", settings=settings)


def test_build_all_helpers(settings):
    rules = helpers.build("all", settings)
    per_helper = 1 + len(settings.breakpoints)
    assert len(rules) == per_helper * len(helpers.HELPERS)


def test_build_with_prefix(settings):
    rules = helpers.build(settings=settings, names=["hide"], prefix="u")
    assert render(rules) == ".u-hide {\n  display: none !important;\n}\n"


def test_grid_width():
    assert grid.width("one-half").text == "50%"
    assert grid.width("one-third").text == "33.33333%"
    assert grid.width("one-whole").text == "100%"


def test_unknown_fraction():
    with pytest.raises(KeyError):
        grid.width("one-seventh")


def test_grid_base_classes_come_first(settings):
    rules = grid.build("lap", settings, names=["one-half", "one-quarter"])
    assert [rule.prelude for rule in rules[:2]] == [".g-one-half", ".g-one-quarter"]
    assert [rule.rules[0].prelude for rule in rules[2:]] == [
        ".g-one-half-from-lap",
        ".g-one-quarter-from-lap",
    ]
    assert rules[3].rules[0].declarations[0].text == "25%"


def test_grid_render(settings):
    rules = grid.build(("palm", "min"), settings, names=["one-half"])
    assert render(rules) == (
        ".g-one-half {\n"
        "  width: 50%;\n"
        "}\n"
        "\n"
        "@media (max-width: 44.9375em) {\n"
        "  .g-one-half-up-to-palm {\n"
        "    width: 50%;\n"
        "  }\n"
        "}\n"
    )
