"""Help content data structures for the CLI help formatter.

Defines the help text, examples and option descriptions in a structured
way; the command list is filled in from the registered commands.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# Style constants for consistent formatting
class HelpStyles:
    """Color and style constants for help output."""

    # Main styles
    TITLE = "bold cadet_blue"
    SUBTITLE = "pale_turquoise4"
    BORDER = "cadet_blue"

    # Section headers
    SECTION_HEADER = "bold bright_white"
    SECTION_DIM = "dim"

    # Command styles
    COMMAND = "bold steel_blue"
    OPTION_COMMAND = "bold sky_blue3"

    EXAMPLE_TITLE = "bold light_sky_blue3"
    EXAMPLE_COMMAND = "dark_slate_gray3"

    NOTE_BULLET = "bold sky_blue3"

    # Usage line
    USAGE_HEADER = "bold bright_white"
    USAGE_PROGRAM = "white"
    USAGE_COMMAND = "bold cadet_blue"
    USAGE_OPTIONS = "pale_turquoise4"


@dataclass
class CommandItem:
    """Represents a single command or option."""
    command: str
    description: str


@dataclass
class ExampleItem:
    """Represents a usage example."""
    title: str
    command: str


@dataclass
class HelpSection:
    """Represents a section in the help output."""
    title: str
    subtitle: str = ""
    items: list[CommandItem] = field(default_factory=lambda: [])


GLOBAL_OPTIONS = HelpSection(
    title="Options",
    subtitle="(place before the command)",
    items=[
        CommandItem("--quiet, -q", "Do not output any message"),
        CommandItem("--verbose, -v|-vv|-vvv", "Increase the verbosity of messages"),
        CommandItem("--ansi | --no-ansi", "Force or disable colour output"),
        CommandItem("--no-interaction, -n", "Answer every question with its default"),
        CommandItem("--config PATH", "Read settings and styles from PATH (default: Console.json)"),
        CommandItem("--debug", "Enable debug logging to the logs folder"),
        CommandItem("--version, -V", "Show the application version"),
        CommandItem("--help, -h", "Show this help message"),
    ],
)


@dataclass
class HelpContent:
    """Everything the help renderer prints."""

    app_title: str
    app_description: str
    usage_program: str
    commands: HelpSection
    options: HelpSection = field(default_factory=lambda: GLOBAL_OPTIONS)
    examples: list[ExampleItem] = field(default_factory=lambda: [])
    notes: list[tuple[str, str]] = field(default_factory=lambda: [])

    USAGE_COMMAND_PLACEHOLDER = "<command>"
    USAGE_OPTIONS_PLACEHOLDER = "[options]"

    @classmethod
    def for_application(
        cls,
        title: str,
        version: str,
        program: str,
        commands: list[CommandItem],
    ) -> HelpContent:
        """Build the help content for an application's commands."""
        examples = [
            ExampleItem("List the available commands:", f"{program} list"),
        ]
        if commands:
            first = next((item.command for item in commands if item.command != "list"), commands[0].command)
            examples.append(ExampleItem("Run a command with more output:", f"{program} -v {first}"))
            examples.append(ExampleItem("Show a command's own arguments:", f"{program} {first} --help"))

        return cls(
            app_title=title,
            app_description=f"Version {version}",
            usage_program=program,
            commands=HelpSection(
                title="Commands",
                subtitle="Only one command runs per invocation",
                items=commands,
            ),
            examples=examples,
            notes=[
                ("i", "Global options go before the command name"),
                ("!", "A question answered wrongly too many times stops the command with status 1"),
                ("*", "Use --no-interaction or -n in automation"),
            ],
        )
