"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``nlu_utils`` namespace.
    - Allow the command line to pick a verbosity level.

Notes/Edge cases:
    - Library modules never configure handlers themselves; they only emit
      ``DEBUG`` records through :func:`get_logger`.
    - :func:`configure_logging` is idempotent: repeated calls adjust the level
      of the single package handler instead of stacking new ones.

Dependencies:
    - Python ``logging`` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "nlu_utils"
_HANDLER_NAME = "nlu_utils.stderr"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


class _StderrHandler(logging.StreamHandler):
    """Stream handler that always writes to the current ``sys.stderr``.

    Built like the standard library's ``logging.lastResort`` handler: the
    stream is looked up at emit time, so the handler keeps working after
    ``sys.stderr`` is replaced (``CliRunner`` swaps it per invocation and
    closes the old one).
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def level_from_str(level: str) -> int:
    """Return the numeric level for ``level`` (case-insensitive).

    Unknown names raise ``ValueError``.
    """

    try:
        return _LEVELS[level.strip().lower()]
    except KeyError:
        raise ValueError(f"unknown log level {level!r}") from None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "warning") -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""

    numeric = level if isinstance(level, int) else level_from_str(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = _StderrHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(numeric)
    handler.setLevel(numeric)
    return root


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger", "level_from_str"]
