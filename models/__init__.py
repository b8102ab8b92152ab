"""Data models for the interactive console toolkit."""

from models.config import ConsoleConfig
from models.types import (
    DEFAULT_CONFIG_FILE,
    MAX_LINE_LENGTH,
    ListStyle,
    SectionStyle,
    StyleDefinition,
    Verbosity,
)

__all__ = [
    "ConsoleConfig",
    "DEFAULT_CONFIG_FILE",
    "ListStyle",
    "MAX_LINE_LENGTH",
    "SectionStyle",
    "StyleDefinition",
    "Verbosity",
]
