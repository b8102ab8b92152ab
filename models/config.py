"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import cast

from models.types import MAX_LINE_LENGTH, ListStyle, SectionStyle, StyleDefinition, Verbosity


@dataclass
class ConsoleConfig:
    """Settings shared by every command run.

    Attributes:
        verbosity: Default output verbosity.
        line_length: Upper bound for block width.
        section_style: How section headings are drawn.
        list_style: What the list helper renders.
        styles: Style definitions merged over the built-in defaults and
            under each command's own overrides.
        decorated: Force colours on or off, None to detect.
        interactive: When False, prompts answer with their defaults.
    """

    verbosity: Verbosity = Verbosity.NORMAL
    line_length: int = MAX_LINE_LENGTH
    section_style: SectionStyle = SectionStyle.LABEL
    list_style: ListStyle = ListStyle.LISTING
    styles: dict[str, StyleDefinition] = field(default_factory=lambda: {})
    decorated: bool | None = None
    interactive: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> ConsoleConfig:
        """Create ConsoleConfig from a validated dictionary (loaded from JSON).

        Missing keys keep their defaults.
        """
        config = cls()
        if "verbosity" in data:
            config.verbosity = Verbosity.parse(cast(int | str, data["verbosity"]))
        if "line_length" in data:
            config.line_length = cast(int, data["line_length"])
        if "section_style" in data:
            config.section_style = SectionStyle(cast(str, data["section_style"]))
        if "list_style" in data:
            config.list_style = ListStyle(cast(str, data["list_style"]))
        if "styles" in data:
            config.styles = dict(cast(dict[str, StyleDefinition], data["styles"]))
        if "decorated" in data:
            config.decorated = cast(bool | None, data["decorated"])
        if "interactive" in data:
            config.interactive = cast(bool, data["interactive"])
        return config

    def to_dict(self) -> dict[str, object]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "verbosity": self.verbosity.name.lower(),
            "line_length": self.line_length,
            "section_style": self.section_style.value,
            "list_style": self.list_style.value,
            "styles": dict(self.styles),
            "decorated": self.decorated,
            "interactive": self.interactive,
        }
