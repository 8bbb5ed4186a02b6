"""In-memory filtering, search and sorting of expense records.

Every function returns a new list and leaves its input untouched. Empty
criteria (``None`` bounds, empty member tuples, blank query) match everything.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal

from .bucketing import is_in_range
from .models import Expense
from .vocabulary import Category, PaymentMethod

type SortField = Literal["date", "amount", "category", "merchant"]
type SortOrder = Literal["asc", "desc"]


@dataclass(frozen=True, slots=True)
class ExpenseFilter:
    """Combined filter criteria; a record must satisfy all of them."""

    start: datetime | date | None = None
    end: datetime | date | None = None
    categories: tuple[Category, ...] = ()
    min_amount: float | None = None
    max_amount: float | None = None
    payment_methods: tuple[PaymentMethod, ...] = ()
    search_query: str = ""

    def is_empty(self) -> bool:
        return self.active_count() == 0

    def active_count(self) -> int:
        """Number of active criteria groups (date, category, amount, payment, search)."""

        return sum(
            (
                self.start is not None or self.end is not None,
                bool(self.categories),
                self.min_amount is not None or self.max_amount is not None,
                bool(self.payment_methods),
                bool(self.search_query.strip()),
            )
        )


def filter_by_date_range(
    records: Iterable[Expense],
    start: datetime | date | None,
    end: datetime | date | None,
) -> list[Expense]:
    return [r for r in records if is_in_range(r.date, start, end)]


def filter_by_categories(
    records: Iterable[Expense], categories: Iterable[Category]
) -> list[Expense]:
    wanted = set(categories)
    return [r for r in records if not wanted or r.category in wanted]


def filter_by_payment_methods(
    records: Iterable[Expense], payment_methods: Iterable[PaymentMethod]
) -> list[Expense]:
    wanted = set(payment_methods)
    return [r for r in records if not wanted or r.payment_method in wanted]


def filter_by_amount_range(
    records: Iterable[Expense],
    min_amount: float | None,
    max_amount: float | None,
) -> list[Expense]:
    """Keep records with ``min_amount <= amount <= max_amount`` (bounds optional)."""

    return [
        r
        for r in records
        if (min_amount is None or r.amount >= min_amount)
        and (max_amount is None or r.amount <= max_amount)
    ]


def search_expenses(records: Iterable[Expense], query: str) -> list[Expense]:
    """Case-insensitive substring search over description and merchant."""

    needle = query.strip().casefold()
    if not needle:
        return list(records)
    return [
        r
        for r in records
        if needle in r.description.casefold() or needle in r.merchant.casefold()
    ]


def filter_expenses(records: Iterable[Expense], criteria: ExpenseFilter) -> list[Expense]:
    result = filter_by_date_range(records, criteria.start, criteria.end)
    result = filter_by_categories(result, criteria.categories)
    result = filter_by_amount_range(result, criteria.min_amount, criteria.max_amount)
    result = filter_by_payment_methods(result, criteria.payment_methods)
    return search_expenses(result, criteria.search_query)


_SORT_KEYS: dict[str, Callable[[Expense], Any]] = {
    "date": lambda r: r.date.timestamp(),
    "amount": lambda r: r.amount,
    "category": lambda r: list(Category).index(r.category),
    "merchant": lambda r: r.merchant.casefold(),
}


def sort_expenses(
    records: Sequence[Expense], sort_by: SortField = "date", order: SortOrder = "desc"
) -> list[Expense]:
    """Return ``records`` sorted by one field; equal keys keep input order.

    Categories sort by declaration order, merchants case-insensitively. The
    default is newest first.
    """

    if sort_by not in _SORT_KEYS:
        raise ValueError(f"unknown sort field: {sort_by!r}")
    if order not in ("asc", "desc"):
        raise ValueError(f"unknown sort order: {order!r}")
    # reverse=True keeps stability for equal keys in Python's sort.
    return sorted(records, key=_SORT_KEYS[sort_by], reverse=order == "desc")


__all__ = [
    "ExpenseFilter",
    "filter_by_amount_range",
    "filter_by_categories",
    "filter_by_date_range",
    "filter_by_payment_methods",
    "filter_expenses",
    "search_expenses",
    "sort_expenses",
]
