"""Custom exceptions for the interactive console toolkit.

This module defines application-specific exceptions that provide clear,
actionable error messages and enable proper error handling throughout
the application.

Exception Hierarchy:
    ConsoleError (base)
    ├── ConfigurationError
    │   └── ConfigValidationError
    ├── StyleError
    ├── CommandError
    │   └── CommandNotFoundError
    └── PromptError
        ├── InvalidAnswerError
        ├── AttemptsExhaustedError
        ├── MissingInputError
        └── HiddenInputUnavailableError
"""

from __future__ import annotations


class ConsoleError(Exception):
    """Base exception for all console toolkit errors.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


# Configuration Errors


class ConfigurationError(ConsoleError):
    """Base exception for configuration-related errors."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str], source: str = "configuration") -> None:
        """Initialize the exception.

        Args:
            errors: List of validation error messages.
            source: Name of the file or object that failed validation.
        """
        error_list = "\n  - ".join(errors)
        super().__init__(
            f"{source} validation failed",
            f"\n  - {error_list}",
        )
        self.errors = errors
        self.source = source


class StyleError(ConsoleError):
    """Raised when an output style cannot be built."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            name: The style name being registered.
            reason: Why the style is invalid.
        """
        super().__init__(f"Invalid style: {name}", reason)
        self.name = name
        self.reason = reason


# Command Errors


class CommandError(ConsoleError):
    """Base exception for command dispatch errors."""

    pass


class CommandNotFoundError(CommandError):
    """Raised when a command name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        """Initialize the exception.

        Args:
            name: The requested command name.
            available: Names of the registered commands.
        """
        details = None
        if available:
            details = f"available commands: {', '.join(sorted(available))}"
        super().__init__(f'Command "{name}" is not defined', details)
        self.name = name
        self.available = available or []


# Prompt Errors


class PromptError(ConsoleError):
    """Base exception for interactive prompt failures.

    Anything derived from this class means the prompt could not produce an
    answer. The application entry point turns it into exit status 1.
    """

    pass


class InvalidAnswerError(PromptError, ValueError):
    """Raised by validators to reject an answer.

    Being a ValueError, it is retried by the prompt engine like any other
    validation failure.
    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Message shown to the operator before re-prompting.
        """
        super().__init__(message)


class AttemptsExhaustedError(PromptError):
    """Raised when a validated prompt used up its attempt budget."""

    def __init__(self, attempts: int, last_error: BaseException | None = None) -> None:
        """Initialize the exception.

        Args:
            attempts: Number of attempts that were made.
            last_error: The validation error raised by the final attempt.
        """
        super().__init__(
            f"No valid answer after {attempts} attempt{'s' if attempts != 1 else ''}",
            str(last_error) if last_error is not None else None,
        )
        self.attempts = attempts
        self.last_error = last_error


class MissingInputError(PromptError):
    """Raised when the input stream ends before an answer is read."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("Aborted.")


class HiddenInputUnavailableError(PromptError):
    """Raised when a hidden answer is requested but cannot be hidden."""

    def __init__(self) -> None:
        """Initialize the exception."""
        super().__init__("Unable to hide the response.")
