"""Centralized logging helpers that never interrupt a command.

Logging is a side channel: when debug mode is off these helpers do nothing,
and a failure while logging is never allowed to reach the operator.
"""

from __future__ import annotations

import functools
from typing import Callable, ParamSpec, TypeVar

from utilities.debug_logger import buffer as debug_buffer, get_logger


P = ParamSpec("P")
R = TypeVar("R")


def log_exception(
    exception: BaseException,
    context: str = "",
    level: str = "DEBUG",
) -> None:
    """Log an exception with context.

    Args:
        exception: The exception that was caught.
        context: What was being attempted when the error occurred.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    if get_logger() is None:
        return

    exc_name = type(exception).__name__
    exc_msg = str(exception) or "(no message)"
    message = f"{context}: {exc_name}: {exc_msg}\n" if context else f"{exc_name}: {exc_msg}\n"
    try:
        debug_buffer(message, level=level)
    except OSError:
        pass


def safe_log(message: str, level: str = "DEBUG") -> None:
    """Log a message when debug mode is enabled.

    Args:
        message: The message to log.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    if get_logger() is None:
        return

    try:
        debug_buffer(message, level=level)
    except OSError:
        pass


def logged(context: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator logging entry and failure of a function.

    Exceptions are logged and re-raised.

    Example:
        @logged("command execution")
        def execute(self, args, output) -> int:
            ...
    """
    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            safe_log(f"{context}: start\n")
            try:
                return func(*args, **kwargs)
            except BaseException as e:
                log_exception(e, context, level="ERROR")
                raise
        return wrapper
    return decorator
