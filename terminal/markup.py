"""Inline tag formatter.

Messages carry their styling as tags: ``<info>saved</info>``, closing with
either the style name or ``</>``. Inline styles such as
``<fg=red;bg=white;options=bold>`` work without registration. Tags that name
no known style are printed as-is, and ``\\<`` prints a literal ``<``.
"""

from __future__ import annotations

import re

from rich.style import Style
from rich.text import Text

from core.styles import FormatStyle, StyleRegistry

TAG_PATTERN: re.Pattern[str] = re.compile(
    r"<((?P<open>[a-z][^<>]*)|/(?P<close>[a-z][^<>]*)?)>", re.IGNORECASE
)
_ESCAPABLE: re.Pattern[str] = re.compile(r"(?<!\\)([<>])")


def escape(text: str) -> str:
    """Escape ``<`` and ``>`` so the formatter prints them literally."""
    return _ESCAPABLE.sub(r"\\\1", text)


def _unescape(text: str) -> str:
    return text.replace("\\<", "<").replace("\\>", ">")


class OutputFormatter:
    """Turns tagged messages into rich Text using a style registry."""

    def __init__(self, styles: StyleRegistry | None = None, decorated: bool = True) -> None:
        """Initialize the formatter.

        Args:
            styles: Registry used to resolve tag names.
            decorated: When False, tags are removed and no style is applied.
        """
        self.styles = styles if styles is not None else StyleRegistry.with_formatter_defaults()
        self.decorated = decorated

    def _resolve(self, tag: str) -> Style | None:
        if tag in self.styles:
            return self.styles[tag].to_rich()
        inline = FormatStyle.from_inline(tag)
        if inline is not None:
            return inline.to_rich()
        return None

    def format(self, message: str) -> Text:
        """Format a tagged message.

        Args:
            message: Message possibly containing style tags.

        Returns:
            Rich Text with the styles applied (or plain when undecorated).
        """
        text = Text()
        stack: list[tuple[str, Style]] = []
        offset = 0

        def append(segment: str) -> None:
            if not segment:
                return
            if self.decorated and stack:
                text.append(segment, style=Style.combine(style for _, style in stack))
            else:
                text.append(segment)

        for match in TAG_PATTERN.finditer(message):
            start = match.start()
            segment = message[offset:start]
            offset = match.end()

            # An odd run of backslashes escapes the tag, pairs stand for one backslash
            stripped = segment.rstrip("\\")
            run = len(segment) - len(stripped)
            if run:
                segment = stripped + "\\" * (run // 2)
            if run % 2:
                append(_unescape(segment) + _unescape(match.group(0)))
                continue
            append(_unescape(segment))

            if match.group("open") is not None:
                tag = match.group("open")
                style = self._resolve(tag)
                if style is None:
                    append(match.group(0))
                else:
                    stack.append((tag.lower(), style))
                continue

            closing = match.group("close")
            if closing is None:
                if stack:
                    stack.pop()
                continue
            closing = closing.lower()
            if stack and stack[-1][0] == closing:
                stack.pop()
            elif self._resolve(closing) is None:
                append(match.group(0))
            elif stack:
                stack.pop()

        append(_unescape(message[offset:]))
        return text

    def strip(self, message: str) -> str:
        """Return the message as it would be printed, without decoration."""
        return self.format(message).plain

    def width(self, message: str) -> int:
        """Return the printed cell width of a tagged message."""
        return self.format(message).cell_len
