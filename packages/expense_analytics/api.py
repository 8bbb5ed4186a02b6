"""Public API surface for the ``expense_analytics`` package.

The aggregation functions live in the engine modules (``stats``, ``trends``,
``charts``, ``bucketing``, ``filters``) and are re-exported here as the stable
import path. :func:`report_trends` is the one orchestration defined in this
module: it combines bucketing and the category breakdown into a text table.
"""

from __future__ import annotations

import io
from collections.abc import Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .bucketing import (
    Granularity,
    bucket_label,
    bucket_start,
    format_date_by_granularity,
    group_by_period,
    is_in_range,
)
from .charts import (
    to_bar_chart_data,
    to_category_comparison_data,
    to_line_chart_data,
    to_payment_method_pie_chart_data,
    to_pie_chart_data,
)
from .filters import ExpenseFilter, filter_expenses, sort_expenses
from .models import Expense
from .numeric import format_number
from .stats import (
    calculate_average_amount,
    calculate_spending_by_category,
    calculate_spending_by_payment_method,
    calculate_summary_stats,
    calculate_total_spending,
    compare_spending_periods,
    find_highest_expense,
    find_most_used_category,
    find_most_used_payment_method,
    get_top_merchants,
)
from .trends import calculate_cumulative_spending, calculate_spending_trend
from .vocabulary import CATEGORY_INFO, Category


def report_trends(
    records: Sequence[Expense],
    granularity: Granularity = Granularity.MONTHLY,
    *,
    width: int = 160,
) -> str:
    """Render spending by category per period as a plain-text table.

    Rows are buckets in chronological order; columns are the categories that
    occur anywhere in ``records`` (declaration order) followed by the row
    total. A final ``Total`` row holds the per-category totals over all
    periods. Printing the returned string is the caller's responsibility.
    """

    granularity = Granularity(granularity)
    overall = calculate_spending_by_category(records)
    columns: list[Category] = [b.category for b in overall]

    table = Table(box=box.SIMPLE, show_footer=False)
    table.add_column("Period")
    for category in columns:
        table.add_column(CATEGORY_INFO[category].label, justify="right")
    table.add_column("Total", justify="right")

    groups = group_by_period(records, granularity)
    for key in sorted(groups):
        by_category = {b.category: b.total for b in calculate_spending_by_category(groups[key])}
        table.add_row(
            bucket_label(bucket_start(key, granularity), granularity),
            *(format_number(by_category.get(c, 0.0)) for c in columns),
            format_number(calculate_total_spending(groups[key])),
        )
    table.add_section()
    table.add_row(
        "Total",
        *(format_number(b.total) for b in overall),
        format_number(calculate_total_spending(records)),
    )

    buf = io.StringIO()
    Console(file=buf, width=width, color_system=None, force_terminal=False).print(table)
    return buf.getvalue()


__all__ = [
    "ExpenseFilter",
    "calculate_average_amount",
    "calculate_cumulative_spending",
    "calculate_spending_by_category",
    "calculate_spending_by_payment_method",
    "calculate_spending_trend",
    "calculate_summary_stats",
    "calculate_total_spending",
    "compare_spending_periods",
    "filter_expenses",
    "find_highest_expense",
    "find_most_used_category",
    "find_most_used_payment_method",
    "format_date_by_granularity",
    "get_top_merchants",
    "group_by_period",
    "is_in_range",
    "report_trends",
    "sort_expenses",
    "to_bar_chart_data",
    "to_category_comparison_data",
    "to_line_chart_data",
    "to_payment_method_pie_chart_data",
    "to_pie_chart_data",
]
