"""Logging setup for the command line."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Route all log records to a single stderr handler at level."""
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(formatter)
    root.addHandler(sh)
