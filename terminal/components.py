"""Reusable Rich components for list output.

This module provides factory functions for the tables behind the list
helpers, so that every command lays out lists the same way.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from rich.console import Console
from rich.table import Table

from terminal.markup import OutputFormatter
from terminal.theme import LIST_BORDER, theme
from utilities.strings import is_numeric


def is_assoc(items: object) -> bool:
    """Return True for mappings keyed by at least one non-numeric string."""
    if not isinstance(items, Mapping):
        return False
    return any(isinstance(key, str) and not is_numeric(key) for key in items)


def _styled(text: str, style: str | None) -> str:
    return f"<{style}>{text}</{style}>" if style else text


class ListTable:
    """Factory for list tables."""

    @staticmethod
    def headers(
        keys: Iterable[Any] | None,
        count: int,
        symbol: str | int,
    ) -> list[str]:
        """Build the header cell of each row.

        Args:
            keys: Keys shown after the marker, None for value-only lists.
            count: Number of rows.
            symbol: Bullet name, or a number to start numbering from.

        Returns:
            One header per row, e.g. ``"○ Name"``, ``"3. Name"`` or ``"3."``.
        """
        key_list = list(keys) if keys is not None else [None] * count
        headers: list[str] = []
        number = int(symbol) if is_numeric(symbol) else None
        for key in key_list:
            if number is not None:
                marker = f"{number}."
                number += 1
            else:
                marker = theme.bullet(str(symbol))
            headers.append(marker if key is None else f"{marker} {key}")
        return headers

    @staticmethod
    def render(
        items: Iterable[Any] | Mapping[Any, Any],
        formatter: OutputFormatter,
        symbol: str | int = theme.lists.SYMBOL,
        style: str | None = theme.lists.STYLE,
        border: bool = False,
    ) -> Table:
        """Create the horizontal table used by write_list.

        Args:
            items: Mapping rendered as key/colon/value rows, or values
                rendered as marker/value rows.
            formatter: Formatter resolving style tags in the cells.
            symbol: Bullet name or starting number.
            style: Style of the header and colon cells.
            border: Draw a rule above and below the table.

        Returns:
            Configured Table object.
        """
        table = Table(
            show_header=False,
            box=LIST_BORDER if border else None,
            show_edge=border,
            padding=theme.lists.CELL_PADDING,
            pad_edge=True,
        )

        if is_assoc(items):
            mapping = dict(items)  # type: ignore[arg-type]
            headers = ListTable.headers(mapping.keys(), len(mapping), symbol)
            colon = _styled(theme.symbols.COLON, style)
            for header, value in zip(headers, mapping.values()):
                table.add_row(
                    formatter.format(_styled(header, style)),
                    formatter.format(colon),
                    formatter.format(str(value)),
                )
        else:
            values = list(items.values()) if isinstance(items, Mapping) else list(items)
            headers = ListTable.headers(None, len(values), symbol)
            for header, value in zip(headers, values):
                table.add_row(
                    formatter.format(_styled(header, style)),
                    formatter.format(str(value)),
                )

        return table

    @staticmethod
    def definitions(
        items: Mapping[Any, Any],
        formatter: OutputFormatter,
        key_style: str = theme.lists.LISTING_KEY_STYLE,
    ) -> Table:
        """Create a two-column key/value table.

        Args:
            items: Mapping to render.
            formatter: Formatter resolving style tags in the cells.
            key_style: Style of the key column.

        Returns:
            Configured Table object.
        """
        table = Table(show_header=False, box=None, padding=theme.lists.CELL_PADDING)
        for key, value in items.items():
            table.add_row(
                formatter.format(_styled(str(key), key_style)),
                formatter.format(str(value)),
            )
        return table


def create_console(no_color: bool = False, force_terminal: bool | None = None) -> Console:
    """Create a configured Console instance.

    Returns:
        Console with standard configuration.
    """
    return Console(highlight=False, no_color=no_color, force_terminal=force_terminal)

