"""Package-wide logging for puzzlegraph.

All modules log through children of the ``puzzlegraph`` logger. Puzzle
answers are printed on stdout, so the package handler writes to stderr and
log lines never mix with an answer that a caller might pipe elsewhere.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "puzzlegraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single package handler to the ``puzzlegraph`` logger.

    Does nothing if the handler is already installed; call
    :func:`reset_logging` first to install a different one.

    Args:
        level: Initial level of the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination, a stderr stream handler when omitted.
    """
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # pytest's caplog listens on the logging root
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a puzzlegraph module (pass ``__name__``)."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handler.

    The CLI calls this for ``--verbose`` (DEBUG), ``--quiet`` (WARNING) and
    the INFO default.
    """
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler so the next setup starts fresh (for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
