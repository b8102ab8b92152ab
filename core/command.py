"""Base class for interactive console commands.

Subclasses implement ``handle()`` and talk to the operator only through the
helpers defined here: prompts (``ask``, ``secret``, ``choice``), styled
writes, blocks, headings and lists. Everything is delegated to the
per-invocation CommandContext built by ``execute()``.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, TextIO

from core.context import CommandContext
from core.exceptions import CommandError, PromptError
from models.config import ConsoleConfig
from models.types import ListStyle, SectionStyle, StyleDefinition, Verbosity
from terminal.components import ListTable, is_assoc
from terminal.output import ConsoleOutput
from terminal.prompts import ChoiceQuestion, Normalizer, Question, Validator
from terminal.theme import theme
from utilities.logging_utils import safe_log

if TYPE_CHECKING:
    from core.application import Application

EXHAUSTED_MESSAGE = "Entered incorrect information multiple times. Cancel the action."


class Command:
    """Interactive command base.

    Class attributes:
        name: Name the command is invoked by.
        description: One line shown in the command list.
        format_styles: Style overrides, e.g.
            ``{"notice": {"foreground": "blue", "options": ["bold"]}}``.
            They replace built-in styles of the same (normalised) name.
        section_style: Overrides the configured section presentation.
        list_style: Overrides the configured presentation used by list().
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    format_styles: ClassVar[Mapping[str, StyleDefinition]] = {}
    section_style: ClassVar[SectionStyle | None] = None
    list_style: ClassVar[ListStyle | None] = None

    def __init__(
        self,
        config: ConsoleConfig | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            config: Console configuration, defaults when omitted.
            input_stream: Stream answers are read from, None for the
                terminal.
        """
        self.config = config or ConsoleConfig()
        self.input_stream = input_stream
        self.args = argparse.Namespace()
        self.context: CommandContext | None = None
        self.application: Application | None = None

    # Lifecycle

    def configure(self, parser: argparse.ArgumentParser) -> None:
        """Add command-specific arguments to the command's sub-parser."""

    def execute(self, args: argparse.Namespace, output: ConsoleOutput) -> int:
        """Run the command.

        Registers this run's styles, runs ``handle()`` and drops the
        context afterwards.

        Returns:
            Exit status returned by ``handle()`` (None counts as 0).

        Raises:
            PromptError: If a prompt could not be answered. The error block
                has already been written.
        """
        self.args = args
        self.context = CommandContext.create(
            output, self.config, self.format_styles, self.input_stream
        )
        safe_log(f"Command '{self.name}' started\n", level="INFO")
        try:
            status = self.handle()
        finally:
            self.context = None
        safe_log(f"Command '{self.name}' finished with status {status or 0}\n", level="INFO")
        return int(status or 0)

    def handle(self) -> int | None:
        """Command body.

        Older commands may implement ``fire()`` instead.
        """
        fire = getattr(self, "fire", None)
        if fire is None:
            raise NotImplementedError(f"{type(self).__name__} must implement handle()")
        return fire()

    @property
    def output(self) -> ConsoleOutput:
        """Output of the running command."""
        return self._context().output

    def _context(self) -> CommandContext:
        if self.context is None:
            raise CommandError(f"Command '{self.name}' is not running")
        return self.context

    def argument(self, key: str, default: Any = None) -> Any:
        """Return a parsed argument or option value."""
        return getattr(self.args, key, default)

    # Prompts

    def _ask(self, question: Question) -> Any:
        try:
            return self._context().prompts.ask(question)
        except PromptError:
            self.error_block(EXHAUSTED_MESSAGE, "ERROR")
            raise

    def ask(
        self,
        question: str,
        default: Any = None,
        validator: Validator | None = None,
        attempts: int | None = None,
    ) -> Any:
        """Prompt the operator for input.

        A validator returns the accepted value. Any exception it raises
        rejects the answer and asks again, at most ``attempts`` times in
        total.

        Raises:
            PromptError: When no valid answer was given. An error block is
                written first.
        """
        return self._ask(Question(question, default=default, validator=validator, max_attempts=attempts))

    def secret(
        self,
        question: str,
        fallback: bool = True,
        validator: Validator | None = None,
        attempts: int | None = None,
    ) -> Any:
        """Prompt the operator for input without echoing it.

        Args:
            fallback: Read visibly when the input cannot be hidden, rather
                than failing.
        """
        return self._ask(
            Question(
                question,
                validator=validator,
                max_attempts=attempts,
                hidden=True,
                hidden_fallback=fallback,
            )
        )

    def choice(
        self,
        question: str,
        choices: Iterable[Any] | Mapping[Any, Any],
        default: Any = None,
        attempts: int | None = None,
        multiple: bool = False,
        normalizer: Normalizer | None = None,
    ) -> Any:
        """Give the operator a choice from a set of answers.

        Returns:
            The chosen value, or a list of values when ``multiple`` is set.
        """
        if not isinstance(choices, Mapping):
            choices = list(choices)
        answer = self._ask(
            ChoiceQuestion(
                question,
                default=default,
                max_attempts=attempts,
                normalizer=normalizer,
                choices=choices,
                multiselect=multiple,
            )
        )

        if answer is None:
            return None
        if isinstance(answer, list):
            self.output.block("Selected: " + ", ".join(str(value) for value in answer))
        else:
            self.output.block(f"Selected: {answer}")

        return answer

    # Writing

    def write(
        self,
        message: str,
        style: str | None = None,
        verbosity: Verbosity | int | str | None = None,
    ) -> None:
        """Write a message without a trailing newline."""
        styled = f"<{style}>{message}</{style}>" if style else message
        self.output.write(styled, newline=False, verbosity=Verbosity.parse(verbosity))

    def line(
        self,
        message: str,
        style: str | None = None,
        verbosity: Verbosity | int | str | None = None,
    ) -> None:
        """Write a message followed by a newline."""
        styled = f"<{style}>{message}</{style}>" if style else message
        self.output.writeln(styled, verbosity=Verbosity.parse(verbosity))

    def info(self, message: str, verbosity: Verbosity | int | str | None = None) -> None:
        """Write a message in the info style."""
        self.line(message, "info", verbosity)

    def comment(self, message: str, verbosity: Verbosity | int | str | None = None) -> None:
        """Write a message in the comment style."""
        self.line(message, "comment", verbosity)

    def question(self, message: str, verbosity: Verbosity | int | str | None = None) -> None:
        """Write a message in the question style."""
        self.line(message, "question", verbosity)

    def error(self, message: str, verbosity: Verbosity | int | str | None = None) -> None:
        """Write a message in the error style."""
        self.line(message, "error", verbosity)

    def warn(self, message: str, verbosity: Verbosity | int | str | None = None) -> None:
        """Write a message in the warning style."""
        self.line(message, "warning", verbosity)

    def new_line(self, count: int = 1) -> None:
        """Add newline(s)."""
        self.output.new_line(count)

    # Headings

    def title(self, message: str) -> None:
        """Format a command title."""
        self.output.title(message)

    def section(
        self,
        message: str,
        level: int = 1,
        label: str | None = theme.sections.LABEL,
        style: str = theme.sections.STYLE,
    ) -> None:
        """Format a heading.

        With the label presentation the heading is a block labelled with
        ``label`` repeated ``level`` times, and a full stop is added when
        the message ends in a letter or digit. With the banner presentation
        the message is underlined.
        """
        presentation = self.section_style or self.config.section_style
        if presentation is SectionStyle.BANNER:
            self.output.section(message)
            return

        level = max(1, int(level))
        message = message.strip()
        if re.search(r"\w$", message):
            message += "."

        self.block(message, label * level if label else None, style, "")

    # Blocks

    def block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        style: str | None = None,
        prefix: str = " ",
        padding: bool = False,
        escape: bool = True,
    ) -> None:
        """Format a message as a block of text.

        Args:
            messages: A message or several, separated by blank lines.
            label: Shown as ``[label]`` in front of the first line.
            style: Style applied to every line of the block.
            prefix: Written in front of every line.
            padding: Add an empty line above and below the text.
            escape: Print style tags in the messages literally.
        """
        self.output.block(messages, label, style, prefix, padding, escape)

    def highlight_block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        prefix: str = " ",
        padding: bool = True,
        escape: bool = True,
    ) -> None:
        """Write a padded block in the highlight style."""
        self.block(messages, label, "highlight", prefix, padding, escape)

    def success_block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        prefix: str = " ",
        padding: bool = True,
        escape: bool = True,
    ) -> None:
        """Write a padded block in the success style."""
        self.block(messages, label, "success", prefix, padding, escape)

    def warning_block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        prefix: str = " ",
        padding: bool = True,
        escape: bool = True,
    ) -> None:
        """Write a padded block in the warning style."""
        self.block(messages, label, "warning", prefix, padding, escape)

    def error_block(
        self,
        messages: str | Iterable[str],
        label: str | None = None,
        prefix: str = " ",
        padding: bool = True,
        escape: bool = True,
    ) -> None:
        """Write a padded block in the error style."""
        self.block(messages, label, "error", prefix, padding, escape)

    # Lists

    def write_list(
        self,
        items: Iterable[Any] | Mapping[Any, Any],
        symbol: str | int = theme.lists.SYMBOL,
        style: str | None = theme.lists.STYLE,
        border: bool = False,
    ) -> None:
        """Write items as a horizontal table.

        Mappings with string keys become ``bullet key : value`` rows, other
        input becomes ``bullet value`` rows. A numeric ``symbol`` numbers
        the rows starting from it; any other symbol is passed to bullet().
        """
        table = ListTable.render(
            items,
            self._context().formatter,
            symbol=symbol,
            style=style,
            border=border,
        )
        self.output.render(table)
        self.new_line()

    def listing(self, items: Iterable[Any] | Mapping[Any, Any]) -> None:
        """Write a sequence as `` * item`` lines, a mapping as two columns."""
        if is_assoc(items):
            self.output.render(ListTable.definitions(items, self._context().formatter))  # type: ignore[arg-type]
            self.new_line()
            return
        values = items.values() if isinstance(items, Mapping) else items
        self.output.listing(values)

    def bullet(self, name: str) -> str:
        """Return the glyph for a bullet name, or the name itself."""
        return theme.bullet(name)

    def list(self, items: Iterable[Any] | Mapping[Any, Any]) -> None:
        """Write items with the configured list presentation."""
        presentation = self.list_style or self.config.list_style
        if presentation is ListStyle.TABLE:
            self.write_list(items)
        else:
            self.listing(items)
