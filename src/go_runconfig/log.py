"""Color-aware logging setup for the command line."""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

RESET = "\033[0m"

LEVEL_COLORS = {
    "DEBUG": "\033[36m",     # cyan
    "INFO": "\033[32m",      # green
    "WARNING": "\033[33m",   # yellow
    "ERROR": "\033[31m",     # red
    "CRITICAL": "\033[41m",  # red background
}

ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")

LOGGER_NAME = "go_runconfig"
PLAIN_FORMAT = "%(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def decolorize(text: str) -> str:
    return ANSI_SGR_RE.sub("", text)


class LogFormatter(logging.Formatter):
    """Formatter that colors the whole line by level when ``color`` is set."""

    def __init__(self, fmt: str = PLAIN_FORMAT, color: bool = False):
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.color:
            # non-TTY output carries no escape codes
            return decolorize(text)
        code = LEVEL_COLORS.get(record.levelname)
        return f"{code}{text}{RESET}" if code else text


def configure(verbose: int = 0, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stdout handler to the package logger.

    Calling it again replaces the previous handler, so tests and repeated CLI
    runs in one process do not stack handlers.
    """
    stream = stream if stream is not None else sys.stdout
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    isatty = getattr(stream, "isatty", None)
    color = bool(isatty and isatty())
    handler.setFormatter(LogFormatter(VERBOSE_FORMAT if verbose else PLAIN_FORMAT, color=color))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
