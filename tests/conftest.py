"""
Pytest configuration and fixtures.
"""

import argparse
import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Make the top-level packages importable without installation
ROOT = Path(__file__).parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.command import Command  # noqa: E402
from models.config import ConsoleConfig  # noqa: E402
from terminal.output import ConsoleOutput  # noqa: E402


class ScriptedCommand(Command):
    """Command whose body is a function, for exercising the helpers."""

    name = "scripted"
    description = "Runs a test body"

    def __init__(self, body, **kwargs):
        super().__init__(**kwargs)
        self.body = body

    def handle(self):
        return self.body(self)


def make_console(width=80):
    return Console(
        file=io.StringIO(),
        width=width,
        color_system=None,
        force_terminal=False,
        highlight=False,
        legacy_windows=False,
    )


def console_text(console):
    return console.file.getvalue()


def stripped_lines(text):
    return [line.rstrip() for line in text.splitlines()]


@pytest.fixture
def console():
    """Plain 80 column console recording into a StringIO."""
    return make_console()


@pytest.fixture
def output(console):
    return ConsoleOutput(console)


@pytest.fixture
def answers():
    """Build an input stream holding one answer per line."""

    def _answers(*lines):
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _answers


@pytest.fixture
def run_command(console):
    """Execute a body inside a running command.

    Returns a function taking the body and optional answers, config and
    command class; it returns (status, output text, command).
    """

    def _run(body, stream=None, config=None, command_class=ScriptedCommand):
        command = command_class(body, config=config or ConsoleConfig(), input_stream=stream or io.StringIO())
        status = command.execute(argparse.Namespace(), ConsoleOutput(console))
        return status, console_text(console), command

    return _run


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test in an empty directory so no Console.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
