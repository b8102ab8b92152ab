"""Command previewing the styles registered for a command run."""

from __future__ import annotations

import argparse

from core.command import Command
from models.types import ListStyle, SectionStyle


class StylesCommand(Command):
    """Prints a sample of every registered style and the block helpers."""

    name = "styles"
    description = "Preview the registered output styles"

    def configure(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--blocks",
            action="store_true",
            help="Also show the highlight, success, warning and error blocks",
        )
        parser.add_argument(
            "--banner",
            action="store_true",
            help="Draw section headings as underlined banners",
        )

    def handle(self) -> int:
        context = self._context()
        if self.argument("banner"):
            self.section_style = SectionStyle.BANNER

        self.section("Registered styles")
        samples = {
            name: f"<{name}> {style.foreground} on {style.background} </{name}>"
            for name, style in sorted(context.styles.items())
        }
        self.write_list(samples, symbol="double-right-arrow", border=True)

        self.section("Bullets")
        self.list_style = ListStyle.LISTING
        self.list([f"{self.bullet(name)}  {name}" for name in ("disc", "circle", "square")])

        if self.argument("blocks"):
            self.section("Blocks")
            self.highlight_block("Highlighted message.", "NOTE")
            self.success_block("Everything went fine.", "OK")
            self.warning_block("Something needs attention.", "WARNING")
            self.error_block(["Something failed.", "Escaped <tags> stay visible."], "ERROR")

        if self.output.is_verbose():
            self.write("Registered for this run: ", "comment")
            self.line(f"{len(context.styles)} styles")
        return 0
