"""Logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger with one stderr handler, keeping reports on stdout clean."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)
