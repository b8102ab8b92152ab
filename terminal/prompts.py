"""Interactive questions: plain, hidden and multiple-choice.

A Question describes what to ask. QuestionHelper asks it on a ConsoleOutput
through an AnswerPrompt, a rich PromptBase that reads the answer and applies
the default, normalizer and validator. The question is repeated while
answers are rejected and attempts remain.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO

from rich.prompt import InvalidResponse, PromptBase

from core.exceptions import (
    AttemptsExhaustedError,
    HiddenInputUnavailableError,
    InvalidAnswerError,
    MissingInputError,
)
from terminal.markup import escape
from terminal.output import ConsoleOutput
from utilities.logging_utils import log_exception, safe_log
from utilities.strings import is_numeric

Validator = Callable[[Any], Any]
Normalizer = Callable[[Any], Any]

_MULTISELECT_PATTERN: re.Pattern[str] = re.compile(r"[^,]+(?:,[^,]+)*")


@dataclass
class Question:
    """A free-text question.

    Attributes:
        question: Text shown to the operator, may contain style tags.
        default: Answer used when the operator enters nothing.
        validator: Returns the validated answer or raises to have the
            question asked again.
        max_attempts: Number of answers accepted before giving up, None
            for no limit.
        hidden: Whether the answer is read without echo.
        hidden_fallback: Read visibly when input cannot be hidden instead
            of failing.
        normalizer: Applied to the raw answer before validation.
        trimmable: Whether surrounding whitespace is removed.
    """

    question: str
    default: Any = None
    validator: Validator | None = None
    max_attempts: int | None = None
    hidden: bool = False
    hidden_fallback: bool = True
    normalizer: Normalizer | None = None
    trimmable: bool = True

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("Maximum number of attempts must be a positive value.")

    def default_label(self) -> str | None:
        """Text shown in brackets after the question, if any."""
        if self.default is None or self.hidden:
            return None
        return str(self.default)


@dataclass
class ChoiceQuestion(Question):
    """A question answered by picking from a set of choices.

    Sequence choices are addressed by position or by value and answer with
    the value. Mapping choices are addressed by key or by label and answer
    with the key. With ``multiselect`` the operator enters a comma separated
    selection and the answer is a list.
    """

    choices: Sequence[Any] | Mapping[Any, Any] = field(default_factory=list)
    multiselect: bool = False
    error_message: str = 'Value "{}" is invalid'

    def __post_init__(self) -> None:
        super().__post_init__()
        if not self.choices:
            raise ValueError("Choice question must have at least 1 choice available.")
        if self.validator is None:
            self.validator = self.validate_choice

    def _items(self) -> list[tuple[Any, Any]]:
        if isinstance(self.choices, Mapping):
            return list(self.choices.items())
        return list(enumerate(self.choices))

    def default_label(self) -> str | None:
        if self.default is None:
            return None
        keys = self.default if isinstance(self.default, (list, tuple)) else [self.default]
        if self.multiselect and isinstance(self.default, str):
            keys = [key.strip() for key in self.default.split(",")]
        labels: list[str] = []
        for key in keys:
            try:
                labels.append(str(self._lookup(str(key))))
            except InvalidAnswerError:
                labels.append(str(key))
        return ", ".join(labels)

    def _lookup(self, value: str) -> Any:
        """Resolve one entered value to the choice it names."""
        items = self._items()
        if isinstance(self.choices, Mapping):
            matches = [key for key, label in items if str(label) == value]
            if len(matches) > 1:
                raise InvalidAnswerError(
                    f"The provided answer is ambiguous. Value should be one of {', '.join(map(str, matches))}."
                )
            if matches:
                return matches[0]
            for key, _ in items:
                if str(key) == value:
                    return key
        else:
            for _, label in items:
                if str(label) == value:
                    return label
            if is_numeric(value) and 0 <= int(value) < len(items):
                return items[int(value)][1]
        raise InvalidAnswerError(self.error_message.format(value))

    def validate_choice(self, selected: Any) -> Any:
        """Default validator: map the entered selection onto the choices."""
        if selected is None:
            selected = ""
        if isinstance(selected, (list, tuple)):
            selected = ",".join(str(value) for value in selected)
        selected = str(selected)

        if self.multiselect:
            if not _MULTISELECT_PATTERN.fullmatch(selected):
                raise InvalidAnswerError(self.error_message.format(selected))
            values = [value.strip() if self.trimmable else value for value in selected.split(",")]
        else:
            values = [selected.strip() if self.trimmable else selected]

        results = [self._lookup(value) for value in values]
        return results if self.multiselect else results[0]


class AnswerPrompt(PromptBase[Any]):
    """Reads one answer to a Question with rich's prompt machinery.

    The question is written on the ConsoleOutput, so verbosity and style
    tags apply to it. Rich reads the line: hidden when a terminal is
    attached, visibly otherwise, or from an injected stream.
    ``process_response`` turns the raw line into the validated answer.
    """

    def __init__(
        self,
        question: Question,
        output: ConsoleOutput,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the prompt.

        Args:
            question: Question being asked.
            output: Output the question and error blocks are written to.
            stream: Stream answers are read from, None for the terminal.
        """
        super().__init__(
            output.formatter.format(question.question),
            console=output.console,
            password=question.hidden,
        )
        self.question = question
        self.output = output
        self.stream = stream

    def pre_prompt(self) -> None:
        """Write the question line, the choices and the answer marker."""
        text = self.question.question
        default = self.question.default_label()
        if default is None:
            self.output.writeln(f" <info>{text}</info>:")
        else:
            self.output.writeln(f" <info>{text}</info> [<comment>{escape(default)}</comment>]:")

        if isinstance(self.question, ChoiceQuestion):
            items = self.question._items()
            width = max(len(str(key)) for key, _ in items)
            self.output.writeln([
                f"  [<comment>{str(key):<{width}}</comment>] {escape(str(label))}"
                for key, label in items
            ])

        self.output.write(" > ")

    def read(self) -> str:
        """Read one raw answer line.

        Raises:
            MissingInputError: If the input ended.
            HiddenInputUnavailableError: If the answer cannot be hidden and
                the question does not allow reading it visibly.
        """
        password = False
        if self.password:
            if self.stream is None and sys.stdin.isatty():
                password = True
            elif not self.question.hidden_fallback:
                raise HiddenInputUnavailableError()
            else:
                safe_log("Input cannot be hidden, reading it visibly\n", level="WARNING")

        try:
            line = self.get_input(self.console, "", password, stream=self.stream)
        except EOFError as e:
            raise MissingInputError() from e
        if self.stream is not None and not line:
            raise MissingInputError()
        return line.rstrip("\r\n")

    def process_response(self, value: str) -> Any:
        """Apply trimming, the default, the normalizer and the validator.

        Raises:
            InvalidResponse: If the normalizer or the validator failed. The
                original exception is kept as ``__cause__``.
        """
        question = self.question
        if question.trimmable:
            value = value.strip()
        answer: Any = value if value else question.default
        try:
            if question.normalizer is not None:
                answer = question.normalizer(answer)
            if question.validator is None:
                return answer
            return question.validator(answer)
        except Exception as e:
            raise InvalidResponse(str(e) or type(e).__name__) from e

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        """Write the rejection as an error block."""
        self.output.block(str(error.message), label="ERROR", style="error", escape_messages=True)


class QuestionHelper:
    """Asks questions on an output and reads answers from an input stream."""

    def __init__(
        self,
        output: ConsoleOutput,
        input_stream: TextIO | None = None,
        interactive: bool = True,
    ) -> None:
        """Initialize the helper.

        Args:
            output: Output the question is written to.
            input_stream: Stream answers are read from. None reads from the
                terminal through the output's Rich console.
            interactive: When False, questions are answered with their
                default without reading input.
        """
        self.output = output
        self.input_stream = input_stream
        self.interactive = interactive

    def ask(self, question: Question) -> Any:
        """Ask a question until it is answered or its attempts run out.

        Any exception raised by the normalizer or the validator rejects the
        answer.

        Returns:
            The validated answer.

        Raises:
            AttemptsExhaustedError: If every allowed answer was rejected.
            MissingInputError: If the input ended before an answer.
            HiddenInputUnavailableError: If a hidden answer cannot be read.
        """
        if not self.interactive:
            return self._default_answer(question)

        prompt = AnswerPrompt(question, self.output, self.input_stream)
        error: InvalidResponse | None = None
        value = ""
        attempts = 0
        while question.max_attempts is None or attempts < question.max_attempts:
            if error is not None:
                prompt.on_validate_error(value, error)
            attempts += 1
            prompt.pre_prompt()
            value = prompt.read()
            try:
                return prompt.process_response(value)
            except InvalidResponse as e:
                error = e
                log_exception(e.__cause__ or e, f"Answer rejected (attempt {attempts})", level="INFO")

        safe_log(f"Attempt budget of {attempts} exhausted for: {question.question}\n", level="WARNING")
        last_error = error.__cause__ if error is not None else None
        raise AttemptsExhaustedError(attempts, last_error) from last_error

    def _default_answer(self, question: Question) -> Any:
        # No default means no answer; there is nothing to validate
        if question.default is None:
            return None
        answer = question.default
        try:
            if question.normalizer is not None:
                answer = question.normalizer(answer)
            if question.validator is None:
                return answer
            return question.validator(answer)
        except Exception as e:
            raise AttemptsExhaustedError(1, e) from e
