"""Public interface for the ``expense_analytics`` package.

This module exposes the package's API functions and public models/types as the
stable import surface. There is no runtime logic here, only symbol re-exports.
"""

from .api import (
    ExpenseFilter,
    calculate_average_amount,
    calculate_cumulative_spending,
    calculate_spending_by_category,
    calculate_spending_by_payment_method,
    calculate_spending_trend,
    calculate_summary_stats,
    calculate_total_spending,
    compare_spending_periods,
    filter_expenses,
    find_highest_expense,
    find_most_used_category,
    find_most_used_payment_method,
    format_date_by_granularity,
    get_top_merchants,
    group_by_period,
    is_in_range,
    report_trends,
    sort_expenses,
    to_bar_chart_data,
    to_category_comparison_data,
    to_line_chart_data,
    to_payment_method_pie_chart_data,
    to_pie_chart_data,
)
from .bucketing import Granularity
from .loading import load_expenses, parse_expenses
from .models import (
    BarChartDataPoint,
    CategoryBreakdown,
    CategoryComparisonRow,
    CumulativePoint,
    Expense,
    LineChartDataPoint,
    MerchantTotal,
    PaymentMethodBreakdown,
    PeriodComparison,
    PieChartDataPoint,
    SummaryStats,
    TrendPoint,
    to_jsonable,
)
from .vocabulary import (
    Category,
    PaymentMethod,
    get_all_categories,
    get_all_payment_methods,
    get_category_color,
    get_category_icon,
    get_category_label,
    get_payment_method_color,
    get_payment_method_icon,
    get_payment_method_label,
)

__all__ = [
    # API
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
    "get_all_categories",
    "get_all_payment_methods",
    "get_category_color",
    "get_category_icon",
    "get_category_label",
    "get_payment_method_color",
    "get_payment_method_icon",
    "get_payment_method_label",
    "get_top_merchants",
    "group_by_period",
    "is_in_range",
    "load_expenses",
    "parse_expenses",
    "report_trends",
    "sort_expenses",
    "to_bar_chart_data",
    "to_category_comparison_data",
    "to_jsonable",
    "to_line_chart_data",
    "to_payment_method_pie_chart_data",
    "to_pie_chart_data",
    # Models / types
    "BarChartDataPoint",
    "Category",
    "CategoryBreakdown",
    "CategoryComparisonRow",
    "CumulativePoint",
    "Expense",
    "ExpenseFilter",
    "Granularity",
    "LineChartDataPoint",
    "MerchantTotal",
    "PaymentMethod",
    "PaymentMethodBreakdown",
    "PeriodComparison",
    "PieChartDataPoint",
    "SummaryStats",
    "TrendPoint",
]
