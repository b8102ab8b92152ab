"""Command-line interface configuration and argument parsing.

Global options are parsed before the command name; each registered command
gets a sub-parser it configures with its own arguments.
"""

from __future__ import annotations

import argparse
import functools
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from rich.console import Console

from models.types import Verbosity
from terminal.formatter import RichHelpFormatter
from terminal.help_content import CommandItem, HelpContent


class CommandSpec(Protocol):
    """What the parser needs to know about a command."""

    name: str
    description: str

    def configure(self, parser: argparse.ArgumentParser) -> None: ...


@dataclass
class ParsedArgs:
    """Structured representation of parsed CLI arguments.

    Attributes:
        command: Name of the command to run, None when none was given.
        namespace: Full argparse namespace including command arguments.
    """

    command: str | None = None
    namespace: argparse.Namespace = field(default_factory=argparse.Namespace)

    # Flags
    quiet: bool = False
    verbose: int = 0
    ansi: bool | None = None
    interactive: bool = True
    config: str | None = None
    debug: bool = False

    def verbosity(self) -> Verbosity | None:
        """Verbosity requested on the command line, None if not given."""
        if self.quiet:
            return Verbosity.QUIET
        if self.verbose >= 3:
            return Verbosity.DEBUG
        if self.verbose == 2:
            return Verbosity.VERY_VERBOSE
        if self.verbose == 1:
            return Verbosity.VERBOSE
        return None


class CLIParser:
    """Argument parser for an application and its commands."""

    def __init__(
        self,
        title: str,
        version: str,
        commands: Iterable[CommandSpec],
        program: str = "python main.py",
    ) -> None:
        """Initialize the CLI parser.

        Args:
            title: Application name shown in help.
            version: Application version.
            commands: Commands available as sub-commands.
            program: Program name used in usage lines.
        """
        self.title = title
        self.version = version
        self.commands = list(commands)
        self.program = program
        self.help_content = HelpContent.for_application(
            title,
            version,
            program,
            [CommandItem(command.name, command.description) for command in self.commands],
        )
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with global options and sub-commands."""
        parser = argparse.ArgumentParser(
            prog=self.program,
            description=self.title,
            formatter_class=functools.partial(RichHelpFormatter, content=self.help_content),
            add_help=False,
        )

        self._add_options(parser)

        subparsers = parser.add_subparsers(dest="command", metavar="<command>")
        for command in self.commands:
            sub = subparsers.add_parser(
                command.name,
                help=command.description,
                description=command.description,
            )
            command.configure(sub)

        return parser

    def _add_options(self, parser: argparse.ArgumentParser) -> None:
        """Add global option flags."""
        options = parser.add_argument_group("options")

        options.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Do not output any message",
        )

        options.add_argument(
            "-v",
            "--verbose",
            action="count",
            default=0,
            help="Increase output verbosity (-v, -vv, -vvv)",
        )

        ansi = options.add_mutually_exclusive_group()
        ansi.add_argument(
            "--ansi",
            dest="ansi",
            action="store_const",
            const=True,
            default=None,
            help="Force colour output",
        )
        ansi.add_argument(
            "--no-ansi",
            dest="ansi",
            action="store_const",
            const=False,
            help="Disable colour output",
        )

        options.add_argument(
            "-n",
            "--no-interaction",
            action="store_true",
            help="Answer every question with its default",
        )

        options.add_argument(
            "--config",
            metavar="PATH",
            help="Configuration file (default: Console.json)",
        )

        options.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )

        options.add_argument(
            "-V",
            "--version",
            action="store_true",
            help="Show the application version",
        )

        options.add_argument(
            "-h",
            "--help",
            action="store_true",
            help="Show help message",
        )

    def parse(self, args: list[str] | None = None) -> ParsedArgs:
        """Parse command-line arguments.

        Args:
            args: Optional list of arguments. Uses sys.argv if None.

        Returns:
            ParsedArgs with validated arguments.

        Raises:
            SystemExit: If arguments are invalid or help/version is requested.
        """
        namespace = self.parser.parse_args(args)

        if namespace.help:
            console = Console()
            console.print(self.parser.format_help(), end="", markup=False, highlight=False)
            sys.exit(0)

        if namespace.version:
            Console(highlight=False).print(f"{self.title} [bold]{self.version}[/bold]")
            sys.exit(0)

        self._validate(namespace)

        return self._convert(namespace)

    def _validate(self, args: argparse.Namespace) -> None:
        """Validate argument combinations.

        Raises:
            SystemExit: If validation fails.
        """
        if args.quiet and args.verbose:
            self.parser.error("Cannot use both --quiet and --verbose")

    def _convert(self, args: argparse.Namespace) -> ParsedArgs:
        """Convert namespace to ParsedArgs."""
        return ParsedArgs(
            command=args.command,
            namespace=args,
            quiet=args.quiet,
            verbose=args.verbose,
            ansi=args.ansi,
            interactive=not args.no_interaction,
            config=args.config,
            debug=args.debug,
        )
