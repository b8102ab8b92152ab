"""Core type definitions for the interactive console toolkit.

This module contains shared enums and constants used throughout the
application.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import TypedDict


class Verbosity(IntEnum):
    """Output verbosity levels.

    A message is written when its level is less than or equal to the
    output's configured level.
    """

    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256

    @classmethod
    def parse(cls, level: Verbosity | int | str | None) -> Verbosity:
        """Resolve a verbosity given as a level, a number or a name.

        Accepts ``quiet``, ``normal``, ``v``, ``vv``, ``vvv`` and the enum
        member names (case-insensitive). None means NORMAL.

        Args:
            level: Verbosity in any supported form.

        Returns:
            The matching Verbosity.

        Raises:
            ValueError: If the level is not recognised.
        """
        if level is None:
            return cls.NORMAL
        if isinstance(level, cls):
            return level
        if isinstance(level, int):
            return cls(level)

        key = level.strip().lower()
        if key.isdigit():
            return cls(int(key))
        if key in VERBOSITY_NAMES:
            return VERBOSITY_NAMES[key]
        raise ValueError(f"Unknown verbosity: {level!r}")


VERBOSITY_NAMES: dict[str, Verbosity] = {
    "quiet": Verbosity.QUIET,
    "normal": Verbosity.NORMAL,
    "v": Verbosity.VERBOSE,
    "verbose": Verbosity.VERBOSE,
    "vv": Verbosity.VERY_VERBOSE,
    "very_verbose": Verbosity.VERY_VERBOSE,
    "vvv": Verbosity.DEBUG,
    "debug": Verbosity.DEBUG,
}


class SectionStyle(str, Enum):
    """Presentation of section headings."""

    LABEL = "label"
    BANNER = "banner"


class ListStyle(str, Enum):
    """Presentation used by the list helper."""

    TABLE = "table"
    LISTING = "listing"


class StyleDefinition(TypedDict, total=False):
    """Shape of a style entry in configuration or on a command."""

    foreground: str
    background: str
    options: list[str]


# Widest line a block is padded to, whatever the terminal width
MAX_LINE_LENGTH = 120

DEFAULT_CONFIG_FILE = "Console.json"
