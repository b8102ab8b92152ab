"""Tests for style names, styles and the style registry."""

import pytest

from core.context import build_style_registry
from core.exceptions import StyleError
from core.styles import FormatStyle, StyleRegistry, normalize_style_name
from models.config import ConsoleConfig
from utilities.strings import is_numeric, snake_case


@pytest.mark.parametrize(
    "name",
    ["NoticeStyle", "noticeStyle", "notice-style", "notice style", "NOTICE_STYLE", "notice_style"],
)
def test_style_names_normalise_to_snake_case(name):
    assert normalize_style_name(name) == "notice_style"


def test_snake_case_keeps_simple_names():
    assert snake_case("error") == "error"
    assert snake_case("Error") == "error"


def test_is_numeric():
    assert is_numeric(3)
    assert is_numeric("12")
    assert not is_numeric("circle")
    assert not is_numeric(True)
    assert not is_numeric(None)


def test_registry_lookup_ignores_casing_convention():
    registry = StyleRegistry()
    registry.set("NoticeStyle", FormatStyle("blue"))

    assert registry["notice-style"] == FormatStyle("blue")
    assert "notice_style" in registry
    assert registry.get("NOTICE_STYLE") == FormatStyle("blue")


def test_override_replaces_default():
    registry = StyleRegistry.with_formatter_defaults()
    registry.merge({"Error": {"foreground": "black", "background": "yellow"}})

    assert registry["error"] == FormatStyle("black", "yellow")


def test_missing_colours_default():
    style = FormatStyle.from_definition({"foreground": "cyan"})

    assert style.background == "default"
    assert style.to_rich().bgcolor is None


def test_options_accept_a_comma_separated_string():
    style = FormatStyle.from_definition({"options": "bold,underscore"})
    rich_style = style.to_rich()

    assert rich_style.bold
    assert rich_style.underline


def test_unknown_colour_is_rejected():
    with pytest.raises(StyleError):
        FormatStyle("not-a-colour")


def test_unknown_option_is_rejected():
    with pytest.raises(StyleError):
        FormatStyle("red", options=("sparkle",))


def test_inline_style_parsing():
    assert FormatStyle.from_inline("fg=red;bg=white") == FormatStyle("red", "white")
    assert FormatStyle.from_inline("options=bold") == FormatStyle(options=("bold",))
    assert FormatStyle.from_inline("comment") is None
    assert FormatStyle.from_inline("fg=nope") is None


def test_registry_layers_defaults_config_and_command():
    config = ConsoleConfig(styles={"success": {"foreground": "white", "background": "blue"}})
    registry = build_style_registry(config, {"Warning": {"foreground": "red"}})

    # Formatter built-ins
    assert registry["info"] == FormatStyle("green")
    assert registry["comment"] == FormatStyle("yellow")
    # Theme defaults
    assert registry["highlight"] == FormatStyle("black", "white")
    assert registry["error"] == FormatStyle("white", "red")
    # Configuration and command overrides
    assert registry["success"] == FormatStyle("white", "blue")
    assert registry["warning"] == FormatStyle("red")


def test_command_overrides_win_over_configuration():
    config = ConsoleConfig(styles={"notice": {"foreground": "green"}})
    registry = build_style_registry(config, {"Notice": {"foreground": "magenta"}})

    assert registry["notice"] == FormatStyle("magenta")


def test_each_build_is_independent():
    first = build_style_registry(ConsoleConfig(), {"notice": {"foreground": "blue"}})
    second = build_style_registry(ConsoleConfig())

    assert "notice" in first
    assert "notice" not in second
