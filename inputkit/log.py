"""Logging for inputkit.

Levels (ascending):
    TRACE =  5  — every table lookup and name derivation step
    DEBUG = 10  — override misses, config merges, emoji list loading
    INFO  = 20  — CLI commands run (default)

Library modules only create loggers; handlers are installed by
``setup_logging()``, which the CLI calls once at startup.

Usage:
    import inputkit.log  # must be imported once before any logger is used
    logger = logging.getLogger(__name__)
    logger.trace("very noisy message")
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

DEFAULT_LOG_FILE = '~/.inputkit.log'
LOG_FORMAT = '[%(asctime)s] %(levelname)-8s %(name)s: %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


# Patch Logger class once at import time
logging.Logger.trace = _trace  # type: ignore[attr-defined]


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach file and console handlers to the ``inputkit`` logger.

    Args:
        debug: Enable debug level logging (console included)
        log_file: Path to log file (default: ~/.inputkit.log)

    The file always gets DEBUG and above, rotated at 10 MB with 5
    backups. The console gets WARNING and above unless *debug* is set.
    Calling it again replaces the handlers of the previous call.
    """
    logger = logging.getLogger('inputkit')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file is None:
        log_file = os.path.expanduser(DEFAULT_LOG_FILE)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger
