"""Statistics engine: totals, breakdowns, rankings and period comparison.

All functions are pure: they read ``records`` (any ordered sequence of
:class:`~expense_analytics.models.Expense`), never mutate it, and return newly
built values. Empty input yields zero/``None``/empty results, never an error.

Determinism rules
-----------------
- Breakdowns list groups in enumeration declaration order and omit groups with
  no records. Callers that need every category must zero-fill themselves.
- Breakdown percentages come from
  :func:`~expense_analytics.numeric.calculate_percentages`, so they sum to
  exactly 100.0 for non-empty input. Chart projections reuse these values.
- "Most used" ties go to the member declared first in its enumeration.
- The highest expense is the first record (input order) holding the maximum
  amount.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Sequence
from datetime import date, datetime
from enum import StrEnum

from .bucketing import is_in_range
from .logging_setup import get_logger
from .models import (
    CategoryBreakdown,
    Expense,
    MerchantTotal,
    PaymentMethodBreakdown,
    PeriodComparison,
    SummaryStats,
)
from .numeric import (
    average,
    calculate_percentage,
    calculate_percentages,
    round_to_decimals,
    total,
)
from .vocabulary import Category, PaymentMethod

_logger = get_logger("expense_analytics.stats")


# ---- Private helpers ---------------------------------------------------------


def _group_totals[K: StrEnum](
    records: Sequence[Expense],
    members: Sequence[K],
    key: Callable[[Expense], K],
) -> list[tuple[K, float, int, float]]:
    """Return ``(member, total, count, percentage)`` per non-empty group.

    Groups follow ``members`` order. Totals are rounded to cents before the
    percentages are apportioned so both views agree on the same numbers.
    """

    amounts: dict[K, list[float]] = {}
    for record in records:
        amounts.setdefault(key(record), []).append(record.amount)

    present = [m for m in members if m in amounts]
    totals = [round_to_decimals(total(amounts[m])) for m in present]
    percentages = calculate_percentages(totals)
    return [
        (m, t, len(amounts[m]), p)
        for m, t, p in zip(present, totals, percentages, strict=True)
    ]


def _mode[K: StrEnum](
    records: Sequence[Expense],
    members: Sequence[K],
    key: Callable[[Expense], K],
) -> K | None:
    counts = Counter(key(r) for r in records)
    best: K | None = None
    best_count = 0
    for member in members:
        # Strict ">" keeps the earliest-declared member on ties.
        if counts[member] > best_count:
            best, best_count = member, counts[member]
    return best


# ---- Public API --------------------------------------------------------------


def calculate_total_spending(records: Sequence[Expense]) -> float:
    return round_to_decimals(total(r.amount for r in records))


def calculate_average_amount(records: Sequence[Expense]) -> float:
    """Mean amount rounded to cents; ``0.0`` for no records."""

    return round_to_decimals(average([r.amount for r in records]))


def find_highest_expense(records: Sequence[Expense]) -> Expense | None:
    if not records:
        return None
    # max() returns the first maximal element, which is the tie-break we want.
    return max(records, key=lambda r: r.amount)


def find_most_used_category(records: Sequence[Expense]) -> Category | None:
    return _mode(records, list(Category), lambda r: r.category)


def find_most_used_payment_method(records: Sequence[Expense]) -> PaymentMethod | None:
    return _mode(records, list(PaymentMethod), lambda r: r.payment_method)


def calculate_spending_by_category(records: Sequence[Expense]) -> list[CategoryBreakdown]:
    """Spending per category that has at least one record, in declaration order."""

    rows = _group_totals(records, list(Category), lambda r: r.category)
    return [CategoryBreakdown(c, t, n, p) for c, t, n, p in rows]


def calculate_spending_by_payment_method(
    records: Sequence[Expense],
) -> list[PaymentMethodBreakdown]:
    """Spending per payment method that has at least one record, in declaration order."""

    rows = _group_totals(records, list(PaymentMethod), lambda r: r.payment_method)
    return [PaymentMethodBreakdown(m, t, n, p) for m, t, n, p in rows]


def calculate_summary_stats(records: Sequence[Expense]) -> SummaryStats:
    """Compose every headline statistic for ``records`` in one value."""

    stats = SummaryStats(
        total_spending=calculate_total_spending(records),
        average_amount=calculate_average_amount(records),
        transaction_count=len(records),
        highest_expense=find_highest_expense(records),
        most_used_category=find_most_used_category(records),
        most_used_payment_method=find_most_used_payment_method(records),
        spending_by_category=tuple(calculate_spending_by_category(records)),
        spending_by_payment_method=tuple(calculate_spending_by_payment_method(records)),
    )
    _logger.debug(
        "summary: %d records, total=%.2f, %d categories",
        stats.transaction_count,
        stats.total_spending,
        len(stats.spending_by_category),
    )
    return stats


def compare_spending_periods(
    records: Sequence[Expense],
    range1_start: datetime | date | None,
    range1_end: datetime | date | None,
    range2_start: datetime | date | None,
    range2_end: datetime | date | None,
) -> PeriodComparison:
    """Compare spending between two inclusive date ranges.

    Each range filters ``records`` independently, so overlapping ranges count a
    record in both. ``difference`` is ``total2 - total1`` and
    ``percentage_change`` is ``difference / total1 * 100`` to one decimal. When
    ``total1`` is 0 the change is reported as 0 rather than infinity.
    """

    period1 = [r for r in records if is_in_range(r.date, range1_start, range1_end)]
    period2 = [r for r in records if is_in_range(r.date, range2_start, range2_end)]

    total1 = calculate_total_spending(period1)
    total2 = calculate_total_spending(period2)
    difference = round_to_decimals(total2 - total1)

    return PeriodComparison(
        period1_total=total1,
        period2_total=total2,
        difference=difference,
        percentage_change=calculate_percentage(difference, total1),
        period1_average=calculate_average_amount(period1),
        period2_average=calculate_average_amount(period2),
    )


def get_top_merchants(records: Sequence[Expense], limit: int) -> list[MerchantTotal]:
    """Rank merchants by total spending.

    Merchants match exactly (case-sensitive); records without a merchant form
    their own group under ``""``. Order is total descending, then count
    descending, then merchant name ascending. ``limit <= 0`` yields ``[]``.
    """

    if limit <= 0:
        return []

    amounts: dict[str, list[float]] = {}
    for record in records:
        amounts.setdefault(record.merchant, []).append(record.amount)

    ranked = [
        MerchantTotal(merchant=m, total=round_to_decimals(total(vals)), count=len(vals))
        for m, vals in amounts.items()
    ]
    ranked.sort(key=lambda mt: (-mt.total, -mt.count, mt.merchant))
    return ranked[:limit]


__all__ = [
    "calculate_average_amount",
    "calculate_spending_by_category",
    "calculate_spending_by_payment_method",
    "calculate_summary_stats",
    "calculate_total_spending",
    "compare_spending_periods",
    "find_highest_expense",
    "find_most_used_category",
    "find_most_used_payment_method",
    "get_top_merchants",
]
