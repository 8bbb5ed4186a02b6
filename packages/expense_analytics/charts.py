"""Chart projection layer: reshape engine output into chart-ready points.

Nothing here recomputes a statistic. Pie slices carry the totals and
percentages of the statistics engine verbatim, and bar/line points re-label
the trend engine's buckets. The two APIs therefore always agree on the same
input.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date

from .bucketing import Granularity, bucket_start
from .models import (
    BarChartDataPoint,
    CategoryComparisonRow,
    Expense,
    LineChartDataPoint,
    PieChartDataPoint,
)
from .stats import calculate_spending_by_category, calculate_spending_by_payment_method
from .trends import calculate_cumulative_spending, calculate_spending_trend
from .vocabulary import CATEGORY_INFO, PAYMENT_METHOD_INFO, Category

type DateFormat = Callable[[date], str]
"""Formats a bucket's first calendar day into an axis label."""

_CATEGORY_KEY = "category"


def _sorted_by_value(points: list[PieChartDataPoint]) -> list[PieChartDataPoint]:
    # sort() is stable: equal values keep declaration order.
    points.sort(key=lambda p: p.value, reverse=True)
    return points


def to_pie_chart_data(records: Sequence[Expense]) -> list[PieChartDataPoint]:
    """Category slices with label, fixed color and share, largest first."""

    return _sorted_by_value(
        [
            PieChartDataPoint(
                name=CATEGORY_INFO[b.category].label,
                value=b.total,
                color=CATEGORY_INFO[b.category].color,
                percentage=b.percentage,
                count=b.count,
            )
            for b in calculate_spending_by_category(records)
        ]
    )


def to_payment_method_pie_chart_data(records: Sequence[Expense]) -> list[PieChartDataPoint]:
    """Payment-method slices with label, fixed color and share, largest first."""

    return _sorted_by_value(
        [
            PieChartDataPoint(
                name=PAYMENT_METHOD_INFO[b.payment_method].label,
                value=b.total,
                color=PAYMENT_METHOD_INFO[b.payment_method].color,
                percentage=b.percentage,
                count=b.count,
            )
            for b in calculate_spending_by_payment_method(records)
        ]
    )


def _axis_label(
    period: str, label: str, granularity: Granularity, date_format: DateFormat | None
) -> str:
    if date_format is None:
        return label
    return date_format(bucket_start(period, granularity))


def to_bar_chart_data(
    records: Sequence[Expense],
    granularity: Granularity,
    date_format: DateFormat | None = None,
) -> list[BarChartDataPoint]:
    """Per-bucket totals in chronological order.

    ``date_format`` receives the first day of each bucket; by default the
    bucket's own label is used.
    """

    return [
        BarChartDataPoint(
            date=_axis_label(p.period, p.label, granularity, date_format),
            amount=p.amount,
            count=p.count,
        )
        for p in calculate_spending_trend(records, granularity)
    ]


def to_line_chart_data(
    records: Sequence[Expense],
    granularity: Granularity,
    cumulative: bool = False,
    date_format: DateFormat | None = None,
) -> list[LineChartDataPoint]:
    """Per-bucket totals, or their running total when ``cumulative`` is set.

    Both variants use the same buckets, so toggling ``cumulative`` changes the
    values but never the x-axis.
    """

    if cumulative:
        return [
            LineChartDataPoint(
                date=_axis_label(p.period, p.label, granularity, date_format),
                amount=p.cumulative,
            )
            for p in calculate_cumulative_spending(records, granularity)
        ]
    return [
        LineChartDataPoint(
            date=_axis_label(p.period, p.label, granularity, date_format),
            amount=p.amount,
        )
        for p in calculate_spending_trend(records, granularity)
    ]


def to_category_comparison_data(
    records1: Sequence[Expense],
    records2: Sequence[Expense],
    label1: str,
    label2: str,
) -> list[CategoryComparisonRow]:
    """Grouped-bar rows comparing two record sets per category.

    Every category present in *either* set gets a row (outer join), in
    declaration order; a category missing from one set reports ``0.0`` under
    that set's label. Raises ``ValueError`` when the labels collide with each
    other or with the ``"category"`` key, since the rows would lose a column.
    """

    if label1 == label2 or _CATEGORY_KEY in (label1, label2):
        raise ValueError(
            f"comparison labels must be distinct and not {_CATEGORY_KEY!r}: "
            f"{label1!r}, {label2!r}"
        )

    totals1 = {b.category: b.total for b in calculate_spending_by_category(records1)}
    totals2 = {b.category: b.total for b in calculate_spending_by_category(records2)}

    rows: list[CategoryComparisonRow] = []
    for category in Category:
        if category not in totals1 and category not in totals2:
            continue
        rows.append(
            {
                _CATEGORY_KEY: CATEGORY_INFO[category].label,
                label1: totals1.get(category, 0.0),
                label2: totals2.get(category, 0.0),
            }
        )
    return rows


__all__ = [
    "DateFormat",
    "to_bar_chart_data",
    "to_category_comparison_data",
    "to_line_chart_data",
    "to_payment_method_pie_chart_data",
    "to_pie_chart_data",
]
