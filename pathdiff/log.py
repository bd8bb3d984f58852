"""Logging setup for the command-line tool.

Report lines go to stdout; everything logged here goes to stderr so the two
streams never mix.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "pathdiff"


class TextFormatter(logging.Formatter):
    """``pathdiff: LEVEL message`` with an optional traceback."""

    def format(self, record: logging.LogRecord) -> str:
        text = f"{LOGGER_NAME}: {record.levelname.lower()}: {record.getMessage()}"
        if record.exc_info and record.exc_info[1] is not None:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


def setup_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Configure the ``pathdiff`` logger and return it.

    Level is WARNING, or DEBUG when ``verbose``. Existing handlers are replaced
    so repeated calls (tests, programmatic use) do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(TextFormatter())
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "TextFormatter", "setup_logging"]
