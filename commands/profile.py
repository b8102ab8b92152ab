"""Interactive command building an operator profile.

Exercises every prompt helper: a validated free-text question, a hidden
question, a single choice and a multiple choice, then summarises the
answers as a list and a success block.
"""

from __future__ import annotations

import argparse
import re

from core.command import Command
from core.exceptions import InvalidAnswerError

ROLES = ["developer", "operator", "auditor"]
LANGUAGES = {"py": "Python", "go": "Go", "rs": "Rust", "ts": "TypeScript"}

_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z .'-]*")


def validate_name(value: str | None) -> str:
    """Accept a name made of letters, spaces and simple punctuation."""
    if not value or not _NAME_PATTERN.fullmatch(value):
        raise InvalidAnswerError("A name must start with a letter and contain only letters.")
    return value


def validate_token(value: str | None) -> str:
    if not value or len(value) < 8:
        raise InvalidAnswerError("The token must be at least 8 characters long.")
    return value


class ProfileCommand(Command):
    """Asks a few questions and prints the resulting profile."""

    name = "profile"
    description = "Create an operator profile interactively"
    format_styles = {
        "Notice": {"foreground": "blue", "options": ["bold"]},
    }

    def configure(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--attempts",
            type=int,
            default=3,
            help="Answers accepted per question before giving up (default: 3)",
        )
        parser.add_argument(
            "--numbered",
            action="store_true",
            help="Number the summary instead of using bullets",
        )

    def handle(self) -> int:
        attempts = self.argument("attempts", 3)

        self.title("Operator profile")
        self.section("Identity")
        name = self.ask("What is your name?", validator=validate_name, attempts=attempts)
        token = self.secret("Access token", validator=validate_token, attempts=attempts)
        if name is None or token is None:
            # Questions without a default have no answer under --no-interaction
            self.error_block("A name and an access token are required. Run the command interactively.", "ERROR")
            return 1

        self.section("Preferences")
        role = self.choice("Which role do you have?", ROLES, default=0, attempts=attempts)
        languages = self.choice(
            "Which languages do you use? (comma separated)",
            LANGUAGES,
            default="py",
            attempts=attempts,
            multiple=True,
            normalizer=lambda answer: answer.lower() if isinstance(answer, str) else answer,
        )

        self.section("Summary", level=2)
        self.write_list(
            {
                "Name": name,
                "Role": role,
                "Languages": ", ".join(LANGUAGES[key] for key in languages),
                "Token": "*" * len(token),
            },
            symbol=1 if self.argument("numbered") else "circle",
        )
        self.line("Profile ready.", "notice", verbosity="v")
        self.success_block(f"Profile for {name} created.", "OK")
        return 0
