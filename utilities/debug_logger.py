"""Debug logger used when --debug is passed.

Messages go to a timestamped log file and to an in-memory buffer that is
appended to the file on finalization (including on KeyboardInterrupt and
unhandled exceptions), so nothing is lost if the process stops abruptly.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

LOGGER_NAME = "console_debug"

_logger: logging.Logger | None = None
_handler: logging.Handler | None = None
_buffer: list[str] = []
_log_file: Path | None = None


def init_debug(log_dir: Path | None = None) -> logging.Logger:
    """Initialize the debug logger.

    Creates ``console_debug_<timestamp>.log`` inside log_dir (defaults to
    the current directory). Calling it again returns the existing logger.
    """
    global _logger, _handler, _log_file

    if _logger is not None:
        return _logger

    log_dir = Path(log_dir) if log_dir is not None else Path.cwd()
    log_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    logfile = log_dir / f"console_debug_{ts}.log"
    _log_file = logfile

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # File handler only, the terminal belongs to the command
    fh = logging.FileHandler(str(logfile), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(fh)

    _logger = logger
    _handler = fh
    _buffer.append(f"Debug log initialized: {logfile}\n")

    return logger


def get_logger() -> logging.Logger | None:
    return _logger


def get_log_file() -> Path | None:
    return _log_file


def buffer(msg: str, level: str = "DEBUG") -> None:
    """Store a message in the in-memory buffer and send it to the logger.

    Buffered lines are prefixed with the level (e.g. "INFO: ...").
    """
    formatted = f"{level}: {msg}"
    _buffer.append(formatted)

    if _logger is not None:
        lvl = level.upper()
        if lvl == "WARN":
            lvl = "WARNING"
        numeric = logging.getLevelName(lvl)
        _logger.log(numeric if isinstance(numeric, int) else logging.DEBUG, msg.rstrip("\n"))


def finalize() -> None:
    """Append the in-memory buffer to the log file and close the handler.

    Safe to call multiple times.
    """
    global _logger, _handler, _log_file

    if _log_file is None:
        return

    if _handler is not None and _logger is not None:
        _logger.removeHandler(_handler)
        _handler.close()

    if _buffer:
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write("\n# In-memory buffer:\n")
            for line in _buffer:
                f.write(line.rstrip("\n") + "\n")

    _buffer.clear()
    _logger = None
    _handler = None
    _log_file = None
