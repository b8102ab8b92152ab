"""Interactive command base, style registry and application dispatch.

Only the leaf modules are re-exported here; import Command, CommandContext
and Application from their modules.
"""

from core.exceptions import (
    AttemptsExhaustedError,
    CommandError,
    CommandNotFoundError,
    ConfigurationError,
    ConfigValidationError,
    ConsoleError,
    HiddenInputUnavailableError,
    InvalidAnswerError,
    MissingInputError,
    PromptError,
    StyleError,
)
from core.styles import FormatStyle, StyleRegistry, normalize_style_name

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AttemptsExhaustedError",
    "CommandError",
    "CommandNotFoundError",
    "ConfigurationError",
    "ConfigValidationError",
    "ConsoleError",
    "FormatStyle",
    "HiddenInputUnavailableError",
    "InvalidAnswerError",
    "MissingInputError",
    "normalize_style_name",
    "PromptError",
    "StyleError",
    "StyleRegistry",
]
