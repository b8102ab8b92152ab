"""Configuration file loading with validation."""

from __future__ import annotations

import json
import os
from typing import cast

from core.exceptions import ConfigValidationError, StyleError
from core.styles import FormatStyle
from models.config import ConsoleConfig
from models.types import DEFAULT_CONFIG_FILE, ListStyle, SectionStyle, Verbosity
from utilities.logging_utils import logged, safe_log


class ConfigManager:
    """Loads and validates the optional console configuration file.

    The file is JSON; every key is optional and a missing file means
    defaults.
    """

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initialize ConfigManager.

        Args:
            config_file: Path to the configuration file.
        """
        self.config_file = config_file

    def validate_config_dict(self, config: object) -> list[str]:
        """Validate configuration dictionary structure.

        Args:
            config: Parsed JSON document.

        Returns:
            List of error messages (empty if valid).
        """
        if not isinstance(config, dict):
            return ["Configuration must be a JSON object"]
        config = cast(dict[str, object], config)
        errors: list[str] = []

        # Validate verbosity
        if "verbosity" in config:
            value = config["verbosity"]
            if isinstance(value, bool) or not isinstance(value, (int, str)):
                errors.append("Field 'verbosity' must be a string or an integer")
            else:
                try:
                    Verbosity.parse(value)
                except ValueError:
                    errors.append(
                        "Field 'verbosity' must be one of: quiet, normal, v, vv, vvv"
                    )

        # Validate line_length
        if "line_length" in config:
            value = config["line_length"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 20:
                errors.append("Field 'line_length' must be an integer >= 20")

        # Validate section_style
        if "section_style" in config:
            valid = [s.value for s in SectionStyle]
            if config["section_style"] not in valid:
                errors.append(f"Field 'section_style' must be one of: {', '.join(valid)}")

        # Validate list_style
        if "list_style" in config:
            valid = [s.value for s in ListStyle]
            if config["list_style"] not in valid:
                errors.append(f"Field 'list_style' must be one of: {', '.join(valid)}")

        # Validate decorated
        if "decorated" in config:
            if config["decorated"] is not None and not isinstance(config["decorated"], bool):
                errors.append("Field 'decorated' must be a boolean or null")

        # Validate interactive
        if "interactive" in config:
            if not isinstance(config["interactive"], bool):
                errors.append("Field 'interactive' must be a boolean (true or false)")

        # Validate styles
        if "styles" in config:
            styles = config["styles"]
            if not isinstance(styles, dict):
                errors.append("Field 'styles' must be a dictionary")
            else:
                for name, definition in cast(dict[str, object], styles).items():
                    errors.extend(self._validate_style(name, definition))

        return errors

    def _validate_style(self, name: str, definition: object) -> list[str]:
        if not isinstance(definition, dict):
            return [f"Style '{name}' must be a dictionary"]
        definition = cast(dict[str, object], definition)
        errors: list[str] = []
        for key in definition:
            if key not in ("foreground", "background", "options"):
                errors.append(f"Style '{name}' has unknown key: '{key}'")
        for key in ("foreground", "background"):
            if key in definition and not isinstance(definition[key], str):
                errors.append(f"Style '{name}.{key}' must be a string")
        if "options" in definition and not isinstance(definition["options"], (list, str)):
            errors.append(f"Style '{name}.options' must be a list of strings")
        if errors:
            return errors
        try:
            FormatStyle.from_definition(definition)
        except StyleError as e:
            errors.append(f"Style '{name}': {e}")
        return errors

    @logged("configuration loading")
    def load_config(self) -> ConsoleConfig:
        """Load and validate configuration from file.

        Returns:
            ConsoleConfig instance, defaults if the file does not exist.

        Raises:
            ConfigValidationError: If the file cannot be parsed or is invalid.
        """
        if not os.path.exists(self.config_file):
            safe_log(f"No {self.config_file}, using default configuration\n")
            return ConsoleConfig()

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigValidationError([f"Invalid JSON: {e}"], self.config_file) from e
        except OSError as e:
            raise ConfigValidationError([f"Cannot read file: {e}"], self.config_file) from e

        errors = self.validate_config_dict(data)
        if errors:
            raise ConfigValidationError(errors, self.config_file)

        safe_log(f"Loaded configuration from {self.config_file}\n", level="INFO")
        return ConsoleConfig.from_dict(cast(dict[str, object], data))

    def save_config(self, config: ConsoleConfig) -> None:
        """Save configuration to file.

        Raises:
            OSError: If unable to write to file.
        """
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
