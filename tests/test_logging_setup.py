from __future__ import annotations

import io
import logging

import pytest
from rich.logging import RichHandler

from expense_analytics.logging_setup import configure_logging, get_logger, resolve_level


def test_get_logger_is_silent_until_configured():
    logger = get_logger("expense_analytics.test")
    pkg = logging.getLogger("expense_analytics")

    assert logger.name == "expense_analytics.test"
    assert any(isinstance(h, logging.NullHandler) for h in pkg.handlers)


def test_configure_logging_attaches_single_stream_handler():
    stream = io.StringIO()
    configure_logging("DEBUG", fmt="%(name)s:%(levelname)s:%(message)s", stream=stream)
    # A second call is a no-op.
    configure_logging("ERROR", stream=io.StringIO())

    get_logger("expense_analytics.stats").debug("hello %d", 3)

    pkg = logging.getLogger("expense_analytics")
    assert len(pkg.handlers) == 1
    assert pkg.propagate is False
    assert stream.getvalue() == "expense_analytics.stats:DEBUG:hello 3\n"


def test_configure_logging_defaults_to_warning():
    stream = io.StringIO()
    configure_logging(stream=stream)

    log = get_logger("expense_analytics.cli")
    log.info("hidden")
    log.warning("shown")

    assert "hidden" not in stream.getvalue()
    assert "shown" in stream.getvalue()


@pytest.mark.parametrize(("env_value", "expected"), [("debug", logging.DEBUG), ("15", 15)])
def test_configure_logging_reads_level_from_env(
    monkeypatch: pytest.MonkeyPatch, env_value: str, expected: int
):
    monkeypatch.setenv("EXPENSE_ANALYTICS_LOG_LEVEL", env_value)

    configure_logging(stream=io.StringIO())

    assert logging.getLogger("expense_analytics").level == expected


def test_resolve_level():
    assert resolve_level("info") == logging.INFO
    assert resolve_level(" Error ") == logging.ERROR
    assert resolve_level(logging.DEBUG) == logging.DEBUG
    assert resolve_level("5") == 5
    assert resolve_level("chatty") == logging.WARNING
    assert resolve_level(None) == logging.WARNING


def test_configure_logging_without_stream_uses_rich_handler():
    configure_logging("INFO")

    (handler,) = logging.getLogger("expense_analytics").handlers
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
