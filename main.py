#!/usr/bin/env python3
"""Interactive Console - Main CLI Entry Point.

Runs one of the bundled commands. Each command is built on the interactive
command base and shows its prompts, blocks and lists.
"""

from __future__ import annotations

import sys
from types import TracebackType
from typing import cast

from commands import BUILTIN_COMMANDS
from core import __version__
from core.application import Application
from utilities.debug_logger import buffer as debug_buffer, finalize, get_logger


def create_application() -> Application:
    """Build the application with the bundled commands registered."""
    app = Application("Interactive Console", __version__)
    app.add_all(BUILTIN_COMMANDS)
    return app


def setup_exception_hook() -> None:
    """Configure global exception handling for debug logging."""

    def _excepthook(
        exc_type: type[BaseException],
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if get_logger() is not None:
            debug_buffer(
                f"Unhandled exception: {exc_type.__name__}: {exc_value}\n",
                level="ERROR",
            )
            finalize()
        sys.__excepthook__(exc_type, cast(BaseException, exc_value), exc_tb)

    sys.excepthook = _excepthook


def main() -> None:
    """Main entry point for the CLI application."""
    setup_exception_hook()
    sys.exit(create_application().run())


if __name__ == "__main__":
    main()
