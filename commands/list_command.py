"""Built-in command listing the application's commands."""

from __future__ import annotations

import argparse

from core.command import Command


class ListCommand(Command):
    """Shows every registered command with its description."""

    name = "list"
    description = "List the available commands"

    def configure(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--numbered",
            action="store_true",
            help="Number the commands instead of using bullets",
        )

    def handle(self) -> int:
        if self.application is None:
            self.warning_block("No application is attached to this command.")
            return 1

        self.title(f"{self.application.name} {self.application.version}")
        self.section("Available commands")

        commands = {
            name: command.description or "-"
            for name, command in self.application.all().items()
        }
        self.write_list(commands, symbol=1 if self.argument("numbered") else "disc")
        self.comment(f"Run '{self.application.program} <command> --help' for a command's arguments.")
        return 0
