"""Logging for the ``statement_wrapped`` package.

Library modules ask for a logger with ``get_logger("statement_wrapped.<module>")``
and never attach handlers themselves; until an entrypoint calls
:func:`configure_logging` the package logger only carries a ``NullHandler``.

The CLI configures logging once per process. When the target stream is an
interactive terminal the records go through ``rich``'s ``RichHandler`` (the
same console library the CLI renders its tables with); otherwise a plain
``StreamHandler`` with a timestamped format is used so redirected output stays
grep-friendly.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "statement_wrapped"
LOG_LEVEL_ENV_VAR = "STATEMENT_WRAPPED_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or ``$STATEMENT_WRAPPED_LOG_LEVEL``) into a logging level.

    Accepts ints, numeric strings and level names in any case. Unknown values
    fall back to ``WARNING``.
    """

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR) or logging.WARNING
    if isinstance(level, int):
        return level
    text = level.strip().upper()
    if text.isdecimal():
        return int(text)
    numeric = logging.getLevelName(text)
    return numeric if isinstance(numeric, int) else logging.WARNING


def _build_handler(stream: IO[str], fmt: str | None) -> logging.Handler:
    isatty = getattr(stream, "isatty", None)
    if fmt is None and callable(isatty) and isatty():
        handler: logging.Handler = RichHandler(
            console=Console(file=stream),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        return handler
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    return handler


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach one handler to the package logger; later calls only adjust the level.

    ``stream`` defaults to the ``sys.stderr`` current at call time, so output
    captured by test runners lands where they expect it. Records do not
    propagate to the root logger.
    """

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = resolve_level(level)

    if _handler is None:
        for h in list(logger.handlers):
            if isinstance(h, logging.NullHandler):
                logger.removeHandler(h)
        _handler = _build_handler(stream or sys.stderr, fmt)
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(resolved)
    logger.setLevel(resolved)
    return logger


def reset_logging() -> None:
    """Detach the handler installed by :func:`configure_logging`."""

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``, silencing the package until configured."""

    pkg = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = [
    "DEFAULT_FORMAT",
    "LOG_LEVEL_ENV_VAR",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "resolve_level",
]
