"""Logging for ``expense_analytics``.

The engine modules only ever *emit* records, through loggers named
``expense_analytics.<module>`` obtained from :func:`get_logger`. Output is
decided once, by whoever owns the process:

- the CLI calls :func:`configure_logging` from its root callback, which sends
  diagnostics to stderr through ``rich`` so they never mix with table or JSON
  output on stdout;
- a host application may call it with its own ``stream``/``fmt``, or configure
  the ``"expense_analytics"`` logger itself and never call it at all.

Until then the package logger carries a ``NullHandler`` and stays silent.
"""

from __future__ import annotations

import logging
import os
from typing import IO

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "expense_analytics"
LEVEL_ENV_VAR = "EXPENSE_ANALYTICS_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_state = {"configured": False}


def resolve_level(level: int | str | None = None) -> int:
    """Turn ``level`` (or the environment, when ``None``) into a numeric level.

    Strings may be level names in any case or digits. Unknown names fall back
    to :data:`DEFAULT_LEVEL`.
    """

    if level is None:
        level = os.getenv(LEVEL_ENV_VAR) or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    mapped = logging.getLevelNamesMapping().get(name)
    return mapped if mapped is not None else DEFAULT_LEVEL


def _package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Install the package's single handler. Later calls are no-ops.

    With an explicit ``stream`` a plain ``StreamHandler`` using ``fmt`` (default
    :data:`DEFAULT_FORMAT`) is attached; otherwise a ``RichHandler`` writing to
    stderr. Records stop propagating to the root logger either way.
    """

    if _state["configured"]:
        return

    logger = _package_logger()
    for h in [h for h in logger.handlers if isinstance(h, logging.NullHandler)]:
        logger.removeHandler(h)

    resolved = resolve_level(level)
    handler: logging.Handler
    if stream is not None:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        if fmt:
            handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(resolved)

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False
    _state["configured"] = True


def reset_logging() -> None:
    """Drop every handler installed on the package logger and allow reconfiguring."""

    logger = _package_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _state["configured"] = False


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``, keeping the package silent by default."""

    pkg = _package_logger()
    if not _state["configured"] and not pkg.handlers:
        pkg.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = [
    "DEFAULT_LEVEL",
    "LEVEL_ENV_VAR",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_logger",
    "reset_logging",
    "resolve_level",
]
