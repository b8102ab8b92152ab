"""Commands bundled with the console application."""

from commands.list_command import ListCommand
from commands.profile import ProfileCommand
from commands.styles_command import StylesCommand

BUILTIN_COMMANDS = [ListCommand, ProfileCommand, StylesCommand]

__all__ = [
    "BUILTIN_COMMANDS",
    "ListCommand",
    "ProfileCommand",
    "StylesCommand",
]
