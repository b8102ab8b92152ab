"""Tests for the Command helpers."""

import argparse
import re

import pytest

from conftest import ScriptedCommand, console_text, stripped_lines

from core.command import EXHAUSTED_MESSAGE, Command
from core.exceptions import AttemptsExhaustedError, CommandError, InvalidAnswerError, MissingInputError
from core.styles import FormatStyle
from models.config import ConsoleConfig
from models.types import ListStyle, SectionStyle, Verbosity
from terminal.output import ConsoleOutput


def not_empty(value):
    if not value:
        raise InvalidAnswerError("A value is required.")
    return value


@pytest.fixture
def writes(monkeypatch):
    """Record every ConsoleOutput.write call as (message, newline, verbosity)."""
    calls = []
    original = ConsoleOutput.write

    def spy(self, messages, newline=False, verbosity=Verbosity.NORMAL):
        calls.append((messages, newline, verbosity))
        return original(self, messages, newline, verbosity)

    monkeypatch.setattr(ConsoleOutput, "write", spy)
    return calls


class TestLifecycle:
    def test_status_is_returned(self, run_command):
        status, _, _ = run_command(lambda c: 4)

        assert status == 4

    def test_none_counts_as_success(self, run_command):
        status, _, _ = run_command(lambda c: None)

        assert status == 0

    def test_context_is_dropped_after_run(self, run_command):
        _, _, command = run_command(lambda c: None)

        assert command.context is None
        with pytest.raises(CommandError):
            command.line("too late")

    def test_context_is_dropped_after_failure(self, run_command):
        def body(c):
            raise RuntimeError("boom")

        command = ScriptedCommand(body)
        with pytest.raises(RuntimeError):
            command.execute(argparse.Namespace(), ConsoleOutput())

        assert command.context is None

    def test_fire_is_accepted_as_body(self, console):
        class FireCommand(Command):
            name = "fire"

            def fire(self):
                self.line("fired")
                return 3

        status = FireCommand().execute(argparse.Namespace(), ConsoleOutput(console))

        assert status == 3
        assert console_text(console) == "fired\n"

    def test_missing_body(self, console):
        with pytest.raises(NotImplementedError):
            Command().execute(argparse.Namespace(), ConsoleOutput(console))

    def test_arguments_are_available(self, console):
        seen = []
        command = ScriptedCommand(lambda c: seen.append(c.argument("numbered")))
        command.execute(argparse.Namespace(numbered=True), ConsoleOutput(console))

        assert seen == [True]
        assert command.argument("missing", "fallback") == "fallback"


class TestStyles:
    def test_command_styles_override_defaults(self, run_command):
        class YellowErrors(ScriptedCommand):
            format_styles = {"Error": {"foreground": "black", "background": "yellow"}}

        seen = {}

        def body(c):
            seen["error"] = c.context.styles["error"]

        run_command(body, command_class=YellowErrors)

        assert seen["error"] == FormatStyle("black", "yellow")

    def test_styles_do_not_leak_between_runs(self, run_command):
        class NoticeCommand(ScriptedCommand):
            format_styles = {"Notice": {"foreground": "blue"}}

        run_command(lambda c: None, command_class=NoticeCommand)
        seen = {}
        run_command(lambda c: seen.update(notice="notice" in c.context.styles))

        assert seen == {"notice": False}


class TestWriting:
    def test_write_wraps_message_in_style_tag(self, run_command, writes):
        _, text, _ = run_command(lambda c: c.write("hi", "error"))

        assert ("<error>hi</error>", False, Verbosity.NORMAL) in writes
        assert text == "hi"

    def test_write_without_style(self, run_command, writes):
        run_command(lambda c: c.write("plain"))

        assert ("plain", False, Verbosity.NORMAL) in writes

    def test_shorthands(self, run_command, writes):
        def body(c):
            c.info("a")
            c.comment("b")
            c.question("c")
            c.error("d")
            c.warn("e")

        _, text, _ = run_command(body)

        messages = [call[0] for call in writes if call[1]]
        assert messages == [
            "<info>a</info>",
            "<comment>b</comment>",
            "<question>c</question>",
            "<error>d</error>",
            "<warning>e</warning>",
        ]
        assert text == "a\nb\nc\nd\ne\n"

    def test_verbose_line_hidden_at_normal_verbosity(self, run_command):
        def body(c):
            c.line("detail", verbosity="v")
            c.line("shown")

        _, text, _ = run_command(body)

        assert text == "shown\n"

    def test_new_line(self, run_command):
        _, text, _ = run_command(lambda c: c.new_line(2))

        assert text == "\n\n"


class TestSections:
    def test_label_presentation(self, run_command):
        _, text, _ = run_command(lambda c: c.section("Identity"))

        assert "[#] Identity." in stripped_lines(text)

    def test_level_repeats_the_label(self, run_command):
        _, text, _ = run_command(lambda c: c.section("  Details ", level=2))

        assert "[##] Details." in stripped_lines(text)

    def test_no_full_stop_after_punctuation(self, run_command):
        _, text, _ = run_command(lambda c: c.section("Ready?"))

        assert "[#] Ready?" in stripped_lines(text)

    def test_banner_presentation(self, run_command):
        class BannerCommand(ScriptedCommand):
            section_style = SectionStyle.BANNER

        _, text, _ = run_command(lambda c: c.section("Identity"), command_class=BannerCommand)

        assert stripped_lines(text) == ["", "Identity", "--------", ""]

    def test_title(self, run_command):
        _, text, _ = run_command(lambda c: c.title("Setup"))

        assert stripped_lines(text) == ["", "Setup", "=====", ""]


class TestBlocks:
    def test_success_block_is_padded(self, run_command):
        _, text, _ = run_command(lambda c: c.success_block("Done", "OK"))

        assert stripped_lines(text) == ["", "", " [OK] Done", "", ""]

    def test_block_escapes_tags_by_default(self, run_command):
        _, text, _ = run_command(lambda c: c.block("<info>raw</info>"))

        assert " <info>raw</info>" in stripped_lines(text)

    def test_block_without_escaping_applies_tags(self, run_command):
        _, text, _ = run_command(lambda c: c.block("<info>raw</info>", escape=False))

        assert " raw" in stripped_lines(text)

    @pytest.mark.parametrize(
        "method, style",
        [
            ("highlight_block", "highlight"),
            ("success_block", "success"),
            ("warning_block", "warning"),
            ("error_block", "error"),
        ],
    )
    def test_block_variants_use_their_style(self, run_command, writes, method, style):
        run_command(lambda c: getattr(c, method)("message"))

        lines = [call[0] for call in writes if isinstance(call[0], list)]
        assert lines
        assert all(line.startswith(f"<{style}>") for line in lines[0])


class TestPrompts:
    def test_ask_returns_answer(self, run_command, answers):
        seen = []
        run_command(lambda c: seen.append(c.ask("Name")), answers("Ada"))

        assert seen == ["Ada"]

    def test_ask_default(self, run_command, answers):
        seen = []
        run_command(lambda c: seen.append(c.ask("Name", "Bob")), answers(""))

        assert seen == ["Bob"]

    def test_exhausted_attempts_write_error_and_raise(self, run_command, answers, console):
        def body(c):
            c.ask("Name", validator=not_empty, attempts=2)
            c.line("unreachable")

        with pytest.raises(AttemptsExhaustedError) as excinfo:
            run_command(body, answers("", "", "Ada"))

        text = console_text(console)
        assert excinfo.value.attempts == 2
        assert f"[ERROR] {EXHAUSTED_MESSAGE}" in text
        assert "unreachable" not in text

    def test_missing_input_is_also_reported(self, run_command, console):
        with pytest.raises(MissingInputError):
            run_command(lambda c: c.ask("Name"))

        assert EXHAUSTED_MESSAGE in console_text(console)

    def test_validator_type_error_is_reported(self, run_command, answers, console):
        with pytest.raises(AttemptsExhaustedError):
            run_command(lambda c: c.ask("Port", validator=int, attempts=2), answers("", ""))

        assert f"[ERROR] {EXHAUSTED_MESSAGE}" in console_text(console)

    def test_unanswered_choice_writes_no_selection(self, run_command):
        seen = []
        config = ConsoleConfig(interactive=False)
        _, text, _ = run_command(lambda c: seen.append(c.choice("Colour", ["red"])), config=config)

        assert seen == [None]
        assert "Selected" not in text

    def test_secret(self, run_command, answers, console):
        seen = []
        run_command(lambda c: seen.append(c.secret("Token")), answers("s3cret"))

        assert seen == ["s3cret"]
        assert "s3cret" not in console_text(console)

    def test_choice_writes_selection(self, run_command, answers):
        seen = []
        _, text, _ = run_command(
            lambda c: seen.append(c.choice("Colour", ["red", "green"])), answers("1")
        )

        assert seen == ["green"]
        assert " Selected: green" in stripped_lines(text)

    def test_multiple_choice(self, run_command, answers):
        seen = []
        _, text, _ = run_command(
            lambda c: seen.append(c.choice("Colours", ("red", "green", "blue"), multiple=True)),
            answers("red,blue"),
        )

        assert seen == [["red", "blue"]]
        assert " Selected: red, blue" in stripped_lines(text)

    def test_choice_normalizer(self, run_command, answers):
        seen = []
        run_command(
            lambda c: seen.append(c.choice("Lang", {"py": "Python"}, normalizer=str.lower)),
            answers("PY"),
        )

        assert seen == ["py"]

    def test_invalid_choice_exhausts(self, run_command, answers, console):
        with pytest.raises(AttemptsExhaustedError):
            run_command(lambda c: c.choice("Colour", ["red"], attempts=1), answers("blue"))

        assert EXHAUSTED_MESSAGE in console_text(console)


class TestLists:
    def test_bullet_glyphs(self):
        command = Command()

        assert command.bullet("disc") == "•"
        assert command.bullet("circle") == "○"
        assert command.bullet("square") == "■"
        assert command.bullet("double-left-arrow") == "«"
        assert command.bullet("double-right-arrow") == "»"
        assert command.bullet("->") == "->"

    def test_write_list_mapping(self, run_command):
        _, text, _ = run_command(lambda c: c.write_list({"Name": "Alice", "Role": "Admin"}))

        assert re.search(r"○ Name\s+:\s+Alice", text)
        assert re.search(r"○ Role\s+:\s+Admin", text)

    def test_write_list_sequence(self, run_command):
        _, text, _ = run_command(lambda c: c.write_list(["one", "two"], symbol="disc"))

        assert re.search(r"• +one", text)
        assert re.search(r"• +two", text)

    def test_write_list_numbered(self, run_command):
        _, text, _ = run_command(lambda c: c.write_list(["a", "b"], symbol=3))

        assert re.search(r"3\. +a", text)
        assert re.search(r"4\. +b", text)

    def test_write_list_numbered_mapping(self, run_command):
        _, text, _ = run_command(lambda c: c.write_list({"x": 1, "y": 2}, symbol="1"))

        assert re.search(r"1\. x\s+:\s+1", text)
        assert re.search(r"2\. y\s+:\s+2", text)

    def test_write_list_border(self, run_command):
        _, text, _ = run_command(lambda c: c.write_list(["one"], border=True))

        lines = [line.strip() for line in text.splitlines() if line.strip()]
        assert re.fullmatch(r"-+", lines[0])
        assert re.fullmatch(r"-+", lines[-1])
        assert re.search(r"○ +one", lines[1])

    def test_listing_sequence(self, run_command):
        _, text, _ = run_command(lambda c: c.listing(["a", "b"]))

        assert " * a" in text.splitlines()
        assert " * b" in text.splitlines()

    def test_listing_mapping(self, run_command):
        _, text, _ = run_command(lambda c: c.listing({"Name": "Alice"}))

        assert re.search(r"Name\s+Alice", text)
        assert ":" not in text

    def test_list_uses_listing_by_default(self, run_command):
        _, text, _ = run_command(lambda c: c.list(["a"]))

        assert " * a" in text.splitlines()

    def test_list_uses_table_when_configured(self, run_command):
        config = ConsoleConfig(list_style=ListStyle.TABLE)
        _, text, _ = run_command(lambda c: c.list(["a"]), config=config)

        assert re.search(r"○ +a", text)
        assert "*" not in text
