"""Centralized theme configuration for command output.

This module defines the default styles, bullet glyphs and layout constants
used by the command helpers. Centralizing these values ensures consistent
appearance and makes theming easy to modify.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.box import Box

from core.styles import FormatStyle


@dataclass(frozen=True)
class ThemeStyles:
    """Styles every command registers before its body runs."""

    HIGHLIGHT: FormatStyle = FormatStyle("black", "white")
    SUCCESS: FormatStyle = FormatStyle("black", "green")
    WARNING: FormatStyle = FormatStyle("black", "yellow")
    ERROR: FormatStyle = FormatStyle("white", "red")

    def as_dict(self) -> dict[str, FormatStyle]:
        """Return the styles keyed by their registry name."""
        return {
            "highlight": self.HIGHLIGHT,
            "success": self.SUCCESS,
            "warning": self.WARNING,
            "error": self.ERROR,
        }


@dataclass(frozen=True)
class ThemeSymbols:
    """Unicode symbols used in the UI."""

    DISC: str = "•"
    CIRCLE: str = "○"
    SQUARE: str = "■"
    DOUBLE_LEFT_ARROW: str = "«"
    DOUBLE_RIGHT_ARROW: str = "»"

    # Listing marker
    LISTING: str = "*"

    # Underlines for titles and banner sections
    TITLE_UNDERLINE: str = "="
    SECTION_UNDERLINE: str = "-"

    # Separator between key and value in a list
    COLON: str = ":"


@dataclass(frozen=True)
class ListConfig:
    """Defaults for the list helper."""

    SYMBOL: str = "circle"
    STYLE: str = "info"
    CELL_PADDING: tuple[int, int] = (0, 1)
    LISTING_KEY_STYLE: str = "comment"


@dataclass(frozen=True)
class SectionConfig:
    """Defaults for section headings."""

    LABEL: str = "#"
    STYLE: str = "comment"


# Top and bottom rules only, drawn with ASCII dashes
LIST_BORDER = Box(
    " -- \n"
    "    \n"
    " -- \n"
    "    \n"
    " -- \n"
    " -- \n"
    "    \n"
    " -- \n",
    ascii=True,
)


class Theme:
    """Main theme class providing access to all theme components.

    Usage:
        from terminal.theme import theme

        registry.set("success", theme.styles.SUCCESS)
        glyph = theme.bullet("disc")
    """

    styles = ThemeStyles()
    symbols = ThemeSymbols()
    lists = ListConfig()
    sections = SectionConfig()

    @classmethod
    def bullet(cls, name: str) -> str:
        """Get the glyph for a bullet name.

        Args:
            name: One of disc, circle, square, double-left-arrow or
                double-right-arrow.

        Returns:
            The glyph, or the name itself when it is not a known bullet.
        """
        bullets: dict[str, str] = {
            "disc": cls.symbols.DISC,
            "circle": cls.symbols.CIRCLE,
            "square": cls.symbols.SQUARE,
            "double-left-arrow": cls.symbols.DOUBLE_LEFT_ARROW,
            "double-right-arrow": cls.symbols.DOUBLE_RIGHT_ARROW,
        }
        return bullets.get(name, name)


# Global theme instance for easy import
theme = Theme()
