"""Custom help formatter for argparse using Rich library.

Provides colorful, well-organized help output for the application.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.panel import Panel
from rich.text import Text

from terminal.help_content import HelpContent, HelpSection, HelpStyles


class HelpRenderer:
    """Renders help content using Rich formatting."""

    def __init__(self, console: Console, content: HelpContent) -> None:
        """Initialize the help renderer.

        Args:
            console: Rich Console instance for output.
            content: Help text to render.
        """
        self.console = console
        self.content = content
        self.styles = HelpStyles()

    def render_title_panel(self) -> None:
        """Render the main title panel with app name and version."""
        title = Text(self.content.app_title, style=self.styles.TITLE)
        subtitle = Text(self.content.app_description, style=self.styles.SUBTITLE)

        self.console.print()
        self.console.print(Panel(
            title + "\n" + subtitle,
            border_style=self.styles.BORDER,
            padding=(1, 2)
        ))

    def render_usage(self) -> None:
        """Render the usage line."""
        self.console.print()
        self.console.print(
            f"  [{self.styles.USAGE_HEADER}]Usage:[/{self.styles.USAGE_HEADER}] "
            f"[{self.styles.USAGE_PROGRAM}]{self.content.usage_program}[/{self.styles.USAGE_PROGRAM}] "
            f"[{self.styles.USAGE_OPTIONS}]{escape_markup(self.content.USAGE_OPTIONS_PLACEHOLDER)}[/{self.styles.USAGE_OPTIONS}] "
            f"[{self.styles.USAGE_COMMAND}]{self.content.USAGE_COMMAND_PLACEHOLDER}[/{self.styles.USAGE_COMMAND}]"
        )
        self.console.print()

    def _render_section(self, section: HelpSection, command_style: str) -> None:
        """Render a section with commands and descriptions."""
        subtitle_text = (
            f" [{self.styles.SECTION_DIM}]{section.subtitle}[/{self.styles.SECTION_DIM}]"
            if section.subtitle
            else ""
        )
        self.console.print(
            f"  [{self.styles.SECTION_HEADER}]{section.title}[/{self.styles.SECTION_HEADER}]{subtitle_text}"
        )

        width = max((len(item.command) for item in section.items), default=0) + 2
        for item in section.items:
            self.console.print(
                f"    [{command_style}]{escape_markup(item.command):<{width}}[/{command_style}] "
                f"{item.description}",
                markup=True,
                highlight=False,
            )

    def render_commands(self) -> None:
        """Render the registered commands."""
        self._render_section(self.content.commands, self.styles.COMMAND)

    def render_options(self) -> None:
        """Render the global options section."""
        self.console.print()
        self._render_section(self.content.options, self.styles.OPTION_COMMAND)

    def render_examples(self) -> None:
        """Render the examples section."""
        if not self.content.examples:
            return
        self.console.print()
        self.console.print(
            f"  [{self.styles.SECTION_HEADER}]Examples[/{self.styles.SECTION_HEADER}]"
        )

        for example in self.content.examples:
            self.console.print(
                f"    [{self.styles.EXAMPLE_TITLE}]{example.title}[/{self.styles.EXAMPLE_TITLE}]"
            )
            self.console.print(
                f"      [{self.styles.EXAMPLE_COMMAND}]$ {example.command}[/{self.styles.EXAMPLE_COMMAND}]"
            )

    def render_notes(self) -> None:
        """Render the notes section."""
        self.console.print()
        if self.content.notes:
            self.console.print(
                f"  [{self.styles.SECTION_HEADER}]Notes[/{self.styles.SECTION_HEADER}]"
            )

            for icon, note in self.content.notes:
                self.console.print(
                    f"    [{self.styles.NOTE_BULLET}]{icon}[/{self.styles.NOTE_BULLET}] {note}"
                )

            self.console.print()

    def render_all(self) -> None:
        """Render all help sections."""
        self.render_title_panel()
        self.render_usage()
        self.render_commands()
        self.render_options()
        self.render_examples()
        self.render_notes()


class RichHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom argparse formatter that uses Rich for colored, formatted help output."""

    def __init__(self, prog: str, content: HelpContent, **kwargs: object) -> None:
        super().__init__(prog, **kwargs)  # type: ignore[arg-type]
        self.content = content

    def _format_usage(
        self,
        usage: str | None,
        actions: Iterable[argparse.Action],
        groups: Iterable[object],
        prefix: str | None,
    ) -> str:
        """Override to hide default usage line."""
        return ""

    def format_help(self) -> str:
        """Override to provide custom Rich-formatted help."""
        output = StringIO()
        console = Console(file=output, legacy_windows=True)

        HelpRenderer(console, self.content).render_all()

        return output.getvalue()
