"""Tests for configuration loading, verbosity parsing and debug logging."""

import json

import pytest

from configuration.manager import ConfigManager
from core.exceptions import ConfigValidationError
from models.config import ConsoleConfig
from models.types import ListStyle, SectionStyle, Verbosity
from utilities import debug_logger
from utilities.logging_utils import log_exception, safe_log


class TestVerbosity:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, Verbosity.NORMAL),
            ("quiet", Verbosity.QUIET),
            ("normal", Verbosity.NORMAL),
            ("v", Verbosity.VERBOSE),
            ("vv", Verbosity.VERY_VERBOSE),
            ("vvv", Verbosity.DEBUG),
            ("DEBUG", Verbosity.DEBUG),
            (64, Verbosity.VERBOSE),
            ("128", Verbosity.VERY_VERBOSE),
            (Verbosity.QUIET, Verbosity.QUIET),
        ],
    )
    def test_parse(self, value, expected):
        assert Verbosity.parse(value) is expected

    @pytest.mark.parametrize("value", ["loud", 3, "vvvv"])
    def test_parse_rejects_unknown_levels(self, value):
        with pytest.raises(ValueError):
            Verbosity.parse(value)

    def test_levels_are_ordered(self):
        assert Verbosity.QUIET < Verbosity.NORMAL < Verbosity.VERBOSE
        assert Verbosity.VERBOSE < Verbosity.VERY_VERBOSE < Verbosity.DEBUG


class TestConfigManager:
    def test_missing_file_gives_defaults(self, isolated_cwd):
        config = ConfigManager(str(isolated_cwd / "absent.json")).load_config()

        assert config == ConsoleConfig()
        assert config.section_style is SectionStyle.LABEL
        assert config.list_style is ListStyle.LISTING

    def test_load_values(self, isolated_cwd):
        path = isolated_cwd / "Console.json"
        path.write_text(
            json.dumps(
                {
                    "verbosity": "vv",
                    "line_length": 60,
                    "section_style": "banner",
                    "list_style": "table",
                    "decorated": False,
                    "interactive": False,
                    "styles": {"Notice": {"foreground": "blue", "options": ["bold"]}},
                }
            )
        )

        config = ConfigManager(str(path)).load_config()

        assert config.verbosity is Verbosity.VERY_VERBOSE
        assert config.line_length == 60
        assert config.section_style is SectionStyle.BANNER
        assert config.list_style is ListStyle.TABLE
        assert config.decorated is False
        assert config.interactive is False
        assert config.styles == {"Notice": {"foreground": "blue", "options": ["bold"]}}

    def test_invalid_json(self, isolated_cwd):
        path = isolated_cwd / "Console.json"
        path.write_text("{not json")

        with pytest.raises(ConfigValidationError) as excinfo:
            ConfigManager(str(path)).load_config()

        assert excinfo.value.errors[0].startswith("Invalid JSON")

    def test_errors_are_collected(self, isolated_cwd):
        path = isolated_cwd / "Console.json"
        path.write_text(
            json.dumps(
                {
                    "verbosity": "loud",
                    "line_length": 5,
                    "section_style": "fancy",
                    "interactive": "yes",
                }
            )
        )

        with pytest.raises(ConfigValidationError) as excinfo:
            ConfigManager(str(path)).load_config()

        assert len(excinfo.value.errors) == 4

    @pytest.mark.parametrize(
        "styles, fragment",
        [
            ({"bad": "red"}, "must be a dictionary"),
            ({"bad": {"colour": "red"}}, "unknown key"),
            ({"bad": {"foreground": 1}}, "must be a string"),
            ({"bad": {"foreground": "not-a-colour"}}, "Style 'bad'"),
            ({"bad": {"options": ["sparkle"]}}, "Style 'bad'"),
        ],
    )
    def test_style_validation(self, styles, fragment):
        errors = ConfigManager().validate_config_dict({"styles": styles})

        assert len(errors) == 1
        assert fragment in errors[0]

    def test_document_must_be_an_object(self):
        assert ConfigManager().validate_config_dict([]) == ["Configuration must be a JSON object"]

    def test_save_and_reload(self, isolated_cwd):
        path = isolated_cwd / "Console.json"
        config = ConsoleConfig(
            verbosity=Verbosity.VERBOSE,
            list_style=ListStyle.TABLE,
            styles={"notice": {"foreground": "blue"}},
        )

        manager = ConfigManager(str(path))
        manager.save_config(config)

        assert manager.load_config() == config


class TestDebugLogging:
    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        debug_logger.finalize()

    def test_helpers_are_silent_without_debug(self):
        safe_log("nothing\n")
        log_exception(ValueError("ignored"), "context")

        assert debug_logger.get_logger() is None
        assert debug_logger.get_log_file() is None

    def test_messages_reach_the_log_file(self, tmp_path):
        debug_logger.init_debug(tmp_path / "logs")
        log_file = debug_logger.get_log_file()

        safe_log("started\n", level="INFO")
        log_exception(ValueError("bad answer"), "Answer rejected", level="WARNING")
        debug_logger.finalize()

        content = log_file.read_text(encoding="utf-8")
        assert log_file.name.startswith("console_debug_")
        assert "INFO console_debug: started" in content
        assert "Answer rejected: ValueError: bad answer" in content
        assert "# In-memory buffer:" in content
        assert debug_logger.get_logger() is None

    def test_init_is_idempotent(self, tmp_path):
        first = debug_logger.init_debug(tmp_path)

        assert debug_logger.init_debug(tmp_path / "other") is first
