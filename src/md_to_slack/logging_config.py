"""Logging setup. Logs go to stderr; stdout carries the JSON output."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | int = "WARNING", *, force: bool = True) -> None:
    """Configure the root logger on stderr.

    With force=False, existing root handlers (e.g. a server's or pytest's) are
    left alone and the call does nothing.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=force)
