"""Terminal presentation layer.

Provides CLI parsing, theming, the tag formatter, the output sink, the
prompt engine and reusable list components.
"""

from .cli import CLIParser, ParsedArgs
from .components import ListTable, create_console, is_assoc
from .formatter import RichHelpFormatter
from .markup import OutputFormatter, escape
from .output import ConsoleOutput
from .prompts import AnswerPrompt, ChoiceQuestion, Question, QuestionHelper
from .theme import Theme, theme

__all__ = [
    # CLI
    "CLIParser",
    "ParsedArgs",
    "RichHelpFormatter",
    # Theme
    "Theme",
    "theme",
    # Output
    "ConsoleOutput",
    "OutputFormatter",
    "escape",
    # Prompts
    "AnswerPrompt",
    "ChoiceQuestion",
    "Question",
    "QuestionHelper",
    # Components
    "create_console",
    "is_assoc",
    "ListTable",
]
