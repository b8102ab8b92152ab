"""Named output styles and the per-invocation style registry."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from rich.color import Color, ColorParseError
from rich.style import Style

from core.exceptions import StyleError
from models.types import StyleDefinition
from utilities.strings import snake_case

# Style option names mapped to rich.Style keyword arguments
OPTION_ATTRIBUTES: dict[str, str] = {
    "bold": "bold",
    "underscore": "underline",
    "underline": "underline",
    "blink": "blink",
    "reverse": "reverse",
    "conceal": "conceal",
    "italic": "italic",
    "dim": "dim",
}


def normalize_style_name(name: str) -> str:
    """Return the canonical registry key for a style name."""
    return snake_case(name)


def _rich_color(color: str | None) -> str | None:
    """Translate a colour name to rich's vocabulary, None for the default."""
    if color is None:
        return None
    color = color.strip().lower()
    if color in ("", "default"):
        return None
    return color.replace("-", "_")


@dataclass(frozen=True)
class FormatStyle:
    """A foreground/background colour pair with optional text options."""

    foreground: str = "default"
    background: str = "default"
    options: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for color in (self.foreground, self.background):
            rich_color = _rich_color(color)
            if rich_color is None:
                continue
            try:
                Color.parse(rich_color)
            except ColorParseError as e:
                raise StyleError(str(color), f"unknown colour ({e})") from e
        for option in self.options:
            if option not in OPTION_ATTRIBUTES:
                raise StyleError(
                    option,
                    f"unknown option, expected one of: {', '.join(OPTION_ATTRIBUTES)}",
                )

    @classmethod
    def from_definition(cls, definition: StyleDefinition | Mapping[str, object]) -> FormatStyle:
        """Build a style from a ``{"foreground", "background", "options"}`` mapping.

        Missing colours fall back to ``default``.
        """
        options = definition.get("options") or ()
        if isinstance(options, str):
            options = [part.strip() for part in options.split(",") if part.strip()]
        return cls(
            foreground=str(definition.get("foreground", "default")),
            background=str(definition.get("background", "default")),
            options=tuple(str(option) for option in options),  # type: ignore[union-attr]
        )

    @classmethod
    def from_inline(cls, spec: str) -> FormatStyle | None:
        """Parse an inline ``fg=red;bg=blue;options=bold`` tag body.

        Returns:
            The parsed style, or None if the text is not an inline style.
        """
        definition: dict[str, object] = {}
        for part in spec.split(";"):
            if "=" not in part:
                return None
            key, _, value = part.partition("=")
            key = key.strip().lower()
            value = value.strip()
            if key == "fg":
                definition["foreground"] = value
            elif key == "bg":
                definition["background"] = value
            elif key == "options":
                definition["options"] = value
            else:
                return None
        if not definition:
            return None
        try:
            return cls.from_definition(definition)
        except StyleError:
            return None

    def to_rich(self) -> Style:
        """Convert to a rich Style."""
        attributes = {OPTION_ATTRIBUTES[option]: True for option in self.options}
        return Style(
            color=_rich_color(self.foreground),
            bgcolor=_rich_color(self.background),
            **attributes,
        )


# Styles understood by the formatter before any command adds its own
FORMATTER_STYLES: dict[str, FormatStyle] = {
    "info": FormatStyle("green"),
    "comment": FormatStyle("yellow"),
    "question": FormatStyle("black", "cyan"),
    "error": FormatStyle("white", "red"),
}


class StyleRegistry(Mapping[str, FormatStyle]):
    """Mapping of normalised style names to styles.

    Registration and lookup both normalise the name, so ``"NoticeStyle"``,
    ``"notice-style"`` and ``"notice_style"`` address the same entry.
    """

    def __init__(self, styles: Mapping[str, FormatStyle] | None = None) -> None:
        self._styles: dict[str, FormatStyle] = {}
        for name, style in (styles or {}).items():
            self.set(name, style)

    def set(self, name: str, style: FormatStyle) -> None:
        """Register a style, replacing any existing style of the same name."""
        self._styles[normalize_style_name(name)] = style

    def merge(self, definitions: Mapping[str, StyleDefinition | Mapping[str, object]]) -> None:
        """Register styles from definition mappings, overriding by name."""
        for name, definition in definitions.items():
            self.set(name, FormatStyle.from_definition(definition))

    def has(self, name: str) -> bool:
        return normalize_style_name(name) in self._styles

    def __getitem__(self, name: str) -> FormatStyle:
        return self._styles[normalize_style_name(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def copy(self) -> StyleRegistry:
        return StyleRegistry(self._styles)

    @classmethod
    def with_formatter_defaults(cls) -> StyleRegistry:
        """Create a registry holding the formatter's built-in styles."""
        return cls(FORMATTER_STYLES)
