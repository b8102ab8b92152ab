"""Utility modules for the interactive console toolkit."""

from utilities.debug_logger import buffer as debug_buffer
from utilities.debug_logger import finalize as finalize_debug
from utilities.debug_logger import get_logger, init_debug
from utilities.logging_utils import log_exception, logged, safe_log
from utilities.strings import is_numeric, snake_case

__all__ = [
    "debug_buffer",
    "finalize_debug",
    "get_logger",
    "init_debug",
    "is_numeric",
    "log_exception",
    "logged",
    "safe_log",
    "snake_case",
]
