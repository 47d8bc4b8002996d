"""Logging setup for the kex command-line tool.

All modules log through ``logging.getLogger(__name__)``; this module only
attaches a stderr handler to the package logger so that log output never
mixes with rendered catalog text on stdout.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "kex"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``kex`` logger and set its level.

    Calling this again replaces the handler, so it always writes to the
    current ``sys.stderr``.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old in [h for h in logger.handlers if getattr(h, "_kex_handler", False)]:
        # Not closed: the old stream may already be gone.
        logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._kex_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False

    return logger
