"""Verbosity-aware output sink built on a Rich console.

All command output flows through ConsoleOutput: plain writes, padded blocks,
titles, sections, listings and Rich renderables such as tables. Messages are
tagged strings interpreted by an OutputFormatter.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from rich.console import Console, RenderableType

from models.types import MAX_LINE_LENGTH, Verbosity
from terminal.markup import OutputFormatter, escape
from terminal.theme import theme


def _as_list(messages: str | Iterable[str]) -> list[str]:
    if isinstance(messages, str):
        return [messages]
    return [str(message) for message in messages]


def _escape_trailing_backslash(text: str) -> str:
    """Keep a trailing backslash from escaping the closing tag."""
    stripped = text.rstrip("\\")
    return stripped + "\\" * (2 * (len(text) - len(stripped)))


class ConsoleOutput:
    """Writes formatted messages to a Rich console."""

    def __init__(
        self,
        console: Console | None = None,
        formatter: OutputFormatter | None = None,
        verbosity: Verbosity = Verbosity.NORMAL,
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        """Initialize the output.

        Args:
            console: Console to print to. Defaults to stdout.
            formatter: Formatter resolving style tags.
            verbosity: Highest message level that is written.
            max_line_length: Upper bound for block and wrap width.
        """
        self.console = console or Console(highlight=False)
        self.formatter = formatter or OutputFormatter()
        self.verbosity = verbosity
        self.max_line_length = max_line_length
        # Last two characters written, used to keep one blank line before blocks
        self._tail = ""

    def with_formatter(self, formatter: OutputFormatter) -> ConsoleOutput:
        """Return an output writing to the same console with another formatter."""
        output = ConsoleOutput(self.console, formatter, self.verbosity, self.max_line_length)
        output._tail = self._tail
        return output

    @property
    def decorated(self) -> bool:
        return self.formatter.decorated

    @property
    def line_length(self) -> int:
        return max(1, min(self.console.width, self.max_line_length))

    def is_verbose(self) -> bool:
        """Whether messages of level VERBOSE are written."""
        return self.verbosity >= Verbosity.VERBOSE

    def _record(self, written: str) -> None:
        self._tail = (self._tail + written)[-2:]

    def write(
        self,
        messages: str | Iterable[str],
        newline: bool = False,
        verbosity: Verbosity | int | str | None = Verbosity.NORMAL,
    ) -> None:
        """Write one or more tagged messages.

        Args:
            messages: A message or an iterable of messages.
            newline: Whether to end each message with a newline.
            verbosity: Level of the message; skipped when above the
                output's verbosity.
        """
        if Verbosity.parse(verbosity) > self.verbosity:
            return

        end = "\n" if newline else ""
        for message in _as_list(messages):
            text = self.formatter.format(message)
            self.console.print(text, end=end, soft_wrap=True, highlight=False)
            self._record(text.plain + end)

    def writeln(
        self,
        messages: str | Iterable[str],
        verbosity: Verbosity | int | str | None = Verbosity.NORMAL,
    ) -> None:
        """Write one or more tagged messages, each followed by a newline."""
        self.write(messages, newline=True, verbosity=verbosity)

    def new_line(self, count: int = 1) -> None:
        """Write ``count`` newlines."""
        if count > 0:
            self.write("\n" * count)

    def render(self, renderable: RenderableType) -> None:
        """Print a Rich renderable such as a table."""
        if Verbosity.NORMAL > self.verbosity:
            return
        self.console.print(renderable, highlight=False)
        self._record(" \n")

    def _auto_prepend_block(self) -> None:
        if not self._tail:
            self.new_line()
            return
        self.new_line(2 - self._tail.count("\n"))

    def _auto_prepend_text(self) -> None:
        if not self._tail.endswith("\n"):
            self.new_line()

    def create_block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        style: str | None = None,
        prefix: str = " ",
        padding: bool = False,
        escape_messages: bool = False,
    ) -> list[str]:
        """Lay out the lines of a block without writing them.

        Each message is word wrapped to the line length minus the prefix and
        label, messages are separated by a blank line, the label appears as
        ``[LABEL] `` on the first line with the following lines indented to
        match, and every line is padded to the full line length so a
        background colour forms a rectangle.

        Returns:
            Tagged lines ready for writeln.
        """
        messages = _as_list(messages)
        prefix_length = self.formatter.width(prefix)
        indent_length = 0
        line_indentation = ""
        if label is not None:
            label = f"[{label}] "
            indent_length = len(label)
            line_indentation = " " * indent_length

        wrap_width = max(1, self.line_length - prefix_length - indent_length)
        lines: list[str] = []
        for index, message in enumerate(messages):
            if escape_messages:
                message = escape(message)
            for paragraph in message.split("\n"):
                lines.extend(
                    textwrap.wrap(
                        paragraph,
                        wrap_width,
                        break_long_words=True,
                        break_on_hyphens=False,
                    )
                    or [""]
                )
            if len(messages) > 1 and index < len(messages) - 1:
                lines.append("")

        first_line_index = 0
        if padding:
            first_line_index = 1
            lines.insert(0, "")
            lines.append("")

        formatted: list[str] = []
        for index, line in enumerate(lines):
            if label is not None:
                line = label + line if index == first_line_index else line_indentation + line
            line = prefix + line
            line += " " * max(self.line_length - self.formatter.width(line), 0)
            if style:
                line = f"<{style}>{line}</>"
            formatted.append(line)
        return formatted

    def block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        style: str | None = None,
        prefix: str = " ",
        padding: bool = False,
        escape_messages: bool = False,
    ) -> None:
        """Write a block of text, see create_block for the layout."""
        self._auto_prepend_block()
        self.writeln(self.create_block(messages, label, style, prefix, padding, escape_messages))
        self.new_line()

    def title(self, message: str) -> None:
        """Write a title underlined with ``=``."""
        self._underlined(message, theme.symbols.TITLE_UNDERLINE)

    def section(self, message: str) -> None:
        """Write a section heading underlined with ``-``."""
        self._underlined(message, theme.symbols.SECTION_UNDERLINE)

    def _underlined(self, message: str, character: str) -> None:
        self._auto_prepend_block()
        self.writeln([
            f"<comment>{_escape_trailing_backslash(message)}</>",
            f"<comment>{character * self.formatter.width(message)}</>",
        ])
        self.new_line()

    def listing(self, elements: Iterable[object]) -> None:
        """Write each element on its own `` * `` line."""
        self._auto_prepend_text()
        self.writeln([f" {theme.symbols.LISTING} {element}" for element in elements])
        self.new_line()
