"""Logging helpers for the fxwindow package."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_HANDLER: logging.Handler | None = None


def get_logger(name: str = "fxwindow") -> logging.Logger:
    return logging.getLogger(name)


def configure(verbose: bool = False) -> None:
    """Send package logs to the current stderr, never to the report stream."""
    global _HANDLER
    root = logging.getLogger("fxwindow")
    if _HANDLER is not None:
        root.removeHandler(_HANDLER)
    _HANDLER = logging.StreamHandler(sys.stderr)
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_HANDLER)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
