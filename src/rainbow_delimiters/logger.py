"""Verbosity-driven diagnostics for the colorizer and its commands.

Output goes to stderr so colorized text on stdout stays clean. Two extra
levels sit between the standard ones: CHANGES reports what happened to each
code block, CHECKS reports the scanner's fallback paths.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

CHANGES_LEVEL = 25  # Block colorized or skipped
CHECKS_LEVEL = 15  # Unmatched closer, palette recycled, unclosed openers

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0
VERBOSITY_CHANGES = 1
VERBOSITY_CHECKS = 2
VERBOSITY_DEBUG = 3  # One line per decorated delimiter

_LEVELS = {
    VERBOSITY_SILENT: logging.ERROR,
    VERBOSITY_CHANGES: CHANGES_LEVEL,
    VERBOSITY_CHECKS: CHECKS_LEVEL,
    VERBOSITY_DEBUG: logging.DEBUG,
}


class RainbowLogger(logging.Logger):
    """Logger with one method per ``-v`` step above silent."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report a block-level result, shown from ``-v 1``."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Report a scan fallback, shown from ``-v 2``."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> RainbowLogger:
    """Return the shared ``rainbow_delimiters`` logger."""
    logging.setLoggerClass(RainbowLogger)
    logger = logging.getLogger("rainbow_delimiters")
    if not isinstance(logger, RainbowLogger):
        raise TypeError("rainbow_delimiters logger was created before RainbowLogger was set")
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Point the shared logger at ``stream`` and set its threshold.

    Args:
        verbosity: ``-v`` value from the command line; unknown values are silent
        stream: Where messages go, stderr if not given
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(_LEVELS.get(verbosity, logging.ERROR))

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and go back to errors only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    """Whether per-delimiter debug lines would be emitted."""
    return get_logger().isEnabledFor(logging.DEBUG)
