"""Command registration and dispatch.

The Application parses the command line, loads configuration, builds the
output and runs one command. It is the only place that turns failures into
exit statuses; commands and helpers raise.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from rich.console import Console

from configuration.manager import ConfigManager
from core.command import Command
from core.exceptions import CommandNotFoundError, ConsoleError, PromptError
from models.config import ConsoleConfig
from models.types import DEFAULT_CONFIG_FILE
from terminal.cli import CLIParser, ParsedArgs
from terminal.components import create_console
from terminal.markup import OutputFormatter
from terminal.output import ConsoleOutput
from utilities.debug_logger import finalize, init_debug
from utilities.logging_utils import log_exception, safe_log

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class Application:
    """A set of commands run from one entry point."""

    def __init__(
        self,
        name: str,
        version: str,
        program: str = "python main.py",
        default_command: str = "list",
        console: Console | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            name: Application name shown in help and the command list.
            version: Application version.
            program: Program name used in usage lines.
            default_command: Command run when none is given.
            console: Console to write to, created from configuration if None.
            input_stream: Stream prompts read from, None for the terminal.
        """
        self.name = name
        self.version = version
        self.program = program
        self.default_command = default_command
        self.console = console
        self.input_stream = input_stream
        self._commands: dict[str, type[Command]] = {}

    def add(self, command: type[Command]) -> type[Command]:
        """Register a command class; usable as a class decorator."""
        if not command.name:
            raise ValueError(f"{command.__name__} has no name")
        self._commands[command.name] = command
        return command

    def add_all(self, commands: Iterable[type[Command]]) -> None:
        for command in commands:
            self.add(command)

    def all(self) -> dict[str, type[Command]]:
        """Registered commands by name, sorted."""
        return dict(sorted(self._commands.items()))

    def find(self, name: str) -> type[Command]:
        """Return the command class registered under ``name``.

        Raises:
            CommandNotFoundError: If no command has that name.
        """
        try:
            return self._commands[name]
        except KeyError:
            raise CommandNotFoundError(name, list(self._commands)) from None

    def create_parser(self) -> CLIParser:
        # Commands are configured on throwaway instances; nothing runs yet
        return CLIParser(
            self.name,
            self.version,
            [command() for command in self.all().values()],
            self.program,
        )

    def load_config(self, parsed: ParsedArgs) -> ConsoleConfig:
        """Load the configuration file and apply command-line overrides."""
        config = ConfigManager(parsed.config or DEFAULT_CONFIG_FILE).load_config()

        verbosity = parsed.verbosity()
        if verbosity is not None:
            config.verbosity = verbosity
        if parsed.ansi is not None:
            config.decorated = parsed.ansi
        if not parsed.interactive:
            config.interactive = False
        return config

    def create_output(self, config: ConsoleConfig) -> ConsoleOutput:
        """Create the output every command run writes to."""
        console = self.console or create_console(
            no_color=config.decorated is False,
            force_terminal=True if config.decorated else None,
        )
        formatter = OutputFormatter(decorated=config.decorated is not False)
        return ConsoleOutput(console, formatter, config.verbosity, config.line_length)

    def run(self, argv: list[str] | None = None) -> int:
        """Parse arguments, run a command and return the exit status.

        Returns:
            0 on success, 1 when a prompt could not be answered or another
            console error occurred, 2 on usage errors, 130 when interrupted.
        """
        try:
            parsed = self.create_parser().parse(argv)
        except SystemExit as e:
            if e.code is None:
                return EXIT_SUCCESS
            return e.code if isinstance(e.code, int) else EXIT_FAILURE

        if parsed.debug:
            init_debug(Path("logs"))
            safe_log(f"{self.name} {self.version} started with {argv}\n", level="INFO")

        output = ConsoleOutput(self.console) if self.console else ConsoleOutput()
        try:
            config = self.load_config(parsed)
            output = self.create_output(config)
            command = self.find(parsed.command or self.default_command)(config, self.input_stream)
            command.application = self
            return command.execute(parsed.namespace, output)
        except PromptError as e:
            # The command already told the operator
            log_exception(e, "Prompt failed", level="ERROR")
            return EXIT_FAILURE
        except ConsoleError as e:
            log_exception(e, "Command failed", level="ERROR")
            output.block(str(e), "ERROR", "error", padding=True, escape_messages=True)
            return EXIT_FAILURE
        except KeyboardInterrupt:
            safe_log("User interrupted execution (KeyboardInterrupt)\n", level="WARNING")
            output.new_line()
            return EXIT_INTERRUPTED
        finally:
            finalize()
