"""Per-invocation state of a running command.

A CommandContext is built when a command starts and dropped when it
finishes. It owns the style registry, so styles registered by one command
never leak into another run in the same process.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from core.styles import StyleRegistry
from models.config import ConsoleConfig
from models.types import StyleDefinition
from terminal.markup import OutputFormatter
from terminal.output import ConsoleOutput
from terminal.prompts import QuestionHelper
from terminal.theme import theme
from utilities.logging_utils import safe_log


def build_style_registry(
    config: ConsoleConfig,
    command_styles: Mapping[str, StyleDefinition] | None = None,
) -> StyleRegistry:
    """Assemble the styles for one command run.

    Layers, later ones replacing earlier ones by normalised name: the
    formatter's built-in styles, the theme defaults (highlight, success,
    warning, error), the configuration file, then the command's own
    overrides.
    """
    registry = StyleRegistry.with_formatter_defaults()
    for name, style in theme.styles.as_dict().items():
        registry.set(name, style)
    registry.merge(config.styles)
    registry.merge(command_styles or {})
    return registry


@dataclass
class CommandContext:
    """Everything a command body needs to talk to the operator."""

    config: ConsoleConfig
    styles: StyleRegistry
    formatter: OutputFormatter
    output: ConsoleOutput
    prompts: QuestionHelper

    @classmethod
    def create(
        cls,
        output: ConsoleOutput,
        config: ConsoleConfig,
        command_styles: Mapping[str, StyleDefinition] | None = None,
        input_stream: TextIO | None = None,
    ) -> CommandContext:
        """Build a context writing to ``output``'s console.

        Args:
            output: Sink provided by the caller; its console and verbosity
                are reused with a formatter bound to this run's styles.
            config: Console configuration.
            command_styles: Style overrides declared by the command.
            input_stream: Stream prompts read from, None for the terminal.
        """
        styles = build_style_registry(config, command_styles)
        decorated = output.decorated if config.decorated is None else config.decorated
        formatter = OutputFormatter(styles, decorated=decorated)
        command_output = output.with_formatter(formatter)
        prompts = QuestionHelper(command_output, input_stream, interactive=config.interactive)
        safe_log(f"Registered styles: {', '.join(sorted(styles))}\n")
        return cls(
            config=config,
            styles=styles,
            formatter=formatter,
            output=command_output,
            prompts=prompts,
        )
