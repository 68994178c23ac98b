import logging

import pytest
from pydantic import ValidationError

from shellcss.config import DEFAULT_BREAKPOINTS, DEFAULT_SETTINGS, Settings, load_settings
from shellcss.css.tokens import Dimension
from shellcss.errors import ConfigError, NestedZLayer


def test_defaults():
    assert DEFAULT_SETTINGS.base_font_size == 16
    assert DEFAULT_SETTINGS.breakpoint_names == list(DEFAULT_BREAKPOINTS)
    assert DEFAULT_SETTINGS.z("header") == 3


def test_settings_are_read_only(settings):
    with pytest.raises(TypeError):
        settings.breakpoints["wall"] = 1400
    with pytest.raises(TypeError):
        settings.z_layers["modal-elements"]["close-button"] = 5
    with pytest.raises(ValidationError):
        settings.base_font_size = 10


def test_settings_copy_their_input():
    breakpoints = {"lap": 720}
    settings = Settings(breakpoints=breakpoints)
    breakpoints["desk"] = 1024
    assert settings.breakpoint_names == ["lap"]


def test_bound_helpers(settings):
    assert settings.em(24) == Dimension(1.5, unit="em")
    assert settings.em(24, 12) == Dimension(2, unit="em")
    assert settings.rem(8) == Dimension(0.5, unit="rem")
    assert settings.breakpoint("desk") == Dimension(64, unit="em")
    assert settings.z("modal-elements", "close-button") == 1


def test_rem_follows_base_font_size():
    settings = Settings(base_font_size="20px")
    assert settings.base_font_size == 20
    assert settings.rem(30) == Dimension(1.5, unit="rem")
    assert settings.em(30) == Dimension(1.5, unit="em")


def test_unit_bearing_breakpoints_are_stripped():
    settings = Settings(breakpoints={"lap": "720px"})
    assert settings.breakpoints["lap"] == 720


@pytest.mark.parametrize(
    "options, message",
    [
        ({"base-font-size": 0}, "base font size"),
        ({"base_font_size": "large"}, "base font size"),
        ({"breakpoints": {"lap": "wide"}}, "pixel value"),
        ({"breakpoints": {"all": 100}}, "reserved"),
        ({"breakpoints": [720]}, "valid dictionary"),
        ({"z-layers": {"header": "top"}}, "integer"),
        ({"z_layers": {"header": True}}, "integer"),
        ({"breakpoints": {900: 1}}, "non empty strings"),
        ({"z_layers": {"modal": {"close": {"icon": 1}}}}, "integer"),
    ],
)
def test_invalid_settings(options, message):
    with pytest.raises(ConfigError, match=message):
        Settings.from_dict(options)


def test_direct_construction_is_validated():
    with pytest.raises(ValidationError, match="reserved"):
        Settings(breakpoints={"all": 100})


def test_settings_are_hashable(settings):
    same = Settings(
        base_font_size=16,
        breakpoints={"palm": 719, "lap": 720, "desk": 1024},
        z_layers={"header": 3, "modal-elements": {"close-button": 1}},
    )
    assert hash(settings) == hash(same)
    assert settings == same
    assert {settings: "cached"}[same] == "cached"
    assert isinstance(hash(DEFAULT_SETTINGS), int)


def test_layer_names_are_text_at_every_level():
    settings = Settings.from_dict({"z-layers": {1: 5, "modal": {2: 7}}})
    assert settings.z("1") == 5
    assert settings.z("modal", "2") == 7


def test_nested_layer_without_sub_layer(settings):
    with pytest.raises(NestedZLayer):
        settings.z("modal-elements")


def test_from_dict_accepts_dashed_keys():
    settings = Settings.from_dict({"base-font-size": 10, "z-layers": {"header": 1}})
    assert settings.base_font_size == 10
    assert settings.z("header") == 1


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ConfigError, match="colors"):
        Settings.from_dict({"colors": {}})


def test_load_settings(tmp_path, caplog):
    path = tmp_path / "settings.yaml"
    path.write_text(
        "base-font-size: 16\n"
        "breakpoints:\n"
        "  palm: 719\n"
        "  lap: 720\n"
        "  desk: 1024\n"
        "  wall: 1400\n"
        "  huge: 1800px\n"
        "z-layers:\n"
        "  header: 3\n"
        "  modal-elements:\n"
        "    close-button: 1\n"
    )
    with caplog.at_level(logging.INFO, logger="shellcss.config"):
        settings = load_settings(path)

    assert settings.breakpoint_names == ["palm", "lap", "desk", "wall", "huge"]
    assert settings.breakpoints["huge"] == 1800
    assert settings.z("modal-elements", "close-button") == 1
    assert "5 breakpoints" in caplog.text


def test_load_empty_settings(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("")
    settings = load_settings(path)
    assert settings.base_font_size == DEFAULT_SETTINGS.base_font_size
    assert dict(settings.breakpoints) == dict(DEFAULT_SETTINGS.breakpoints)


def test_load_missing_settings(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.yaml")


def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("breakpoints: [lap\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(path)


def test_load_non_mapping(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("- lap\n- desk\n")
    with pytest.raises(ConfigError, match="Settings validation failed"):
        load_settings(path)
