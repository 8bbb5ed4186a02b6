"""Pytest configuration for test isolation and shared fixtures.

The CLI reads ``EA_*`` settings and the log level from the environment (and
from a ``.env`` in the working directory). To keep tests hermetic, an autouse
fixture clears those variables, runs each test from its own temporary
directory and resets the package logger afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime
from itertools import count
from pathlib import Path

import pytest

from expense_analytics import Category, Expense, PaymentMethod
from expense_analytics.logging_setup import reset_logging

_ENV_VARS = (
    "EA_TOP_MERCHANTS_LIMIT",
    "EA_DEFAULT_GRANULARITY",
    "EXPENSE_ANALYTICS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop configuration env vars and avoid picking up a developer's ``.env``."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    reset_logging()


type MakeExpense = Callable[..., Expense]


@pytest.fixture
def make_expense() -> MakeExpense:
    """Return a factory building valid expenses with sensible defaults.

    ``date`` accepts an ISO string for brevity. Ids are unique per test.
    """

    ids = count(1)

    def _make(
        amount: float = 10.0,
        date: str | datetime = "2025-11-10T12:00:00",
        category: Category = Category.FOOD_DINING,
        payment_method: PaymentMethod = PaymentMethod.CREDIT_CARD,
        merchant: str = "",
        description: str = "",
        id: str | None = None,
    ) -> Expense:
        when = datetime.fromisoformat(date) if isinstance(date, str) else date
        return Expense(
            id=id or f"e{next(ids)}",
            amount=amount,
            date=when,
            category=category,
            payment_method=payment_method,
            merchant=merchant,
            description=description,
        )

    return _make
