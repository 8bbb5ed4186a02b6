"""Data models and type aliases for ``expense_analytics``.

Two kinds of structures live here:

- :class:`Expense`, the input record. It is owned by the storage collaborator
  and validated once at the boundary (pydantic); the aggregation engine only
  reads it.
- Frozen dataclasses for every aggregate the engine produces. They are plain
  value objects, built fresh on every call and safe to serialize (see
  :func:`to_jsonable`).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as date_type
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .vocabulary import Category, PaymentMethod

MAX_AMOUNT: float = 999999.99
MAX_DESCRIPTION_LENGTH: int = 200
MAX_MERCHANT_LENGTH: int = 100


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------


class Expense(BaseModel):
    """A single expense as handed over by the storage collaborator.

    Field names are snake_case; the camelCase keys written by the browser
    storage export (``paymentMethod``, ``createdAt``, ``updatedAt``) are
    accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str
    amount: float
    date: datetime
    category: Category
    payment_method: PaymentMethod = Field(alias="paymentMethod")
    description: str = Field(default="", max_length=MAX_DESCRIPTION_LENGTH)
    merchant: str = Field(default="", max_length=MAX_MERCHANT_LENGTH)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("id")
    @classmethod
    def _id_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("id must be non-empty")
        return v

    @field_validator("amount")
    @classmethod
    def _amount_in_range(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("amount must be positive")
        if v > MAX_AMOUNT:
            raise ValueError(f"amount must be at most {MAX_AMOUNT}")
        # repr() gives the shortest round-tripping literal, so 12.5 -> -1, 0.1+0.2 -> -17
        exponent = Decimal(repr(v)).as_tuple().exponent
        if isinstance(exponent, int) and exponent < -2:
            raise ValueError("amount can have at most 2 decimal places")
        return v

    @field_validator("date", mode="before")
    @classmethod
    def _date_only_to_midnight(cls, v: Any) -> Any:
        if isinstance(v, date_type) and not isinstance(v, datetime):
            return datetime(v.year, v.month, v.day)
        return v

    @field_validator("date")
    @classmethod
    def _date_not_in_future(cls, v: datetime) -> datetime:
        now = datetime.now(v.tzinfo) if v.tzinfo is not None else datetime.now()
        if v > now:
            raise ValueError("date cannot be in the future")
        return v


# ---------------------------------------------------------------------------
# Statistics aggregates
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CategoryBreakdown:
    category: Category
    total: float
    count: int
    percentage: float


@dataclass(frozen=True, slots=True)
class PaymentMethodBreakdown:
    payment_method: PaymentMethod
    total: float
    count: int
    percentage: float


@dataclass(frozen=True, slots=True)
class SummaryStats:
    """Headline numbers for a set of expenses.

    For empty input every number is zero, ``highest_expense`` and both
    ``most_used_*`` fields are ``None``, and the breakdowns are empty.
    """

    total_spending: float
    average_amount: float
    transaction_count: int
    highest_expense: Expense | None
    most_used_category: Category | None
    most_used_payment_method: PaymentMethod | None
    spending_by_category: tuple[CategoryBreakdown, ...]
    spending_by_payment_method: tuple[PaymentMethodBreakdown, ...]


@dataclass(frozen=True, slots=True)
class PeriodComparison:
    """Totals and averages for two date ranges.

    ``percentage_change`` is 0 when ``period1_total`` is 0. That is a policy,
    not "no change": callers must check the totals to tell the cases apart.
    """

    period1_total: float
    period2_total: float
    difference: float
    percentage_change: float
    period1_average: float
    period2_average: float


@dataclass(frozen=True, slots=True)
class MerchantTotal:
    merchant: str
    total: float
    count: int


# ---------------------------------------------------------------------------
# Trend aggregates
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class TrendPoint:
    """Spending within one bucket. ``period`` is the sortable bucket key."""

    period: str
    label: str
    amount: float
    count: int


@dataclass(frozen=True, slots=True)
class CumulativePoint:
    period: str
    label: str
    cumulative: float


# ---------------------------------------------------------------------------
# Chart points
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PieChartDataPoint:
    name: str
    value: float
    color: str
    percentage: float
    count: int


@dataclass(frozen=True, slots=True)
class BarChartDataPoint:
    date: str
    amount: float
    count: int


@dataclass(frozen=True, slots=True)
class LineChartDataPoint:
    date: str
    amount: float


type CategoryComparisonRow = dict[str, str | float]
"""One grouped-bar row: ``{"category": <label>, <label1>: total, <label2>: total}``."""


_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


def to_jsonable(value: Any) -> Any:
    """Convert any engine output (dataclasses, models, lists) to JSON-ready data."""

    return _ANY_ADAPTER.dump_python(value, mode="json")


__all__ = [
    "MAX_AMOUNT",
    "BarChartDataPoint",
    "CategoryBreakdown",
    "CategoryComparisonRow",
    "CumulativePoint",
    "Expense",
    "LineChartDataPoint",
    "MerchantTotal",
    "PaymentMethodBreakdown",
    "PeriodComparison",
    "PieChartDataPoint",
    "SummaryStats",
    "TrendPoint",
    "to_jsonable",
]
