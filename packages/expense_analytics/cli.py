# ruff: noqa: I001
"""CLI for the ``expense_analytics`` package.

This module exposes callable command handlers (``cmd_summary``, ``cmd_trend``,
...) and a Typer-based console interface. Each handler loads an exported
expenses JSON file, runs one engine operation and prints either a rich table or
JSON. Handlers return an integer exit code; errors are written to stderr.

Environment variables (optionally from a local ``.env``, loaded with
``python-dotenv`` without overriding the real environment):

- ``EA_TOP_MERCHANTS_LIMIT``: default ``--limit`` for ``top-merchants``.
- ``EA_DEFAULT_GRANULARITY``: default ``--granularity`` for ``trend``/``chart``.
- ``EXPENSE_ANALYTICS_LOG_LEVEL``: log level when logging is configured.
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Sequence
from datetime import date
from enum import StrEnum
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .bucketing import Granularity
from .logging_setup import configure_logging, get_logger
from .models import Expense, to_jsonable
from .numeric import format_currency, format_percentage

_logger = get_logger("expense_analytics.cli")

console = Console()

_DEFAULT_TOP_LIMIT = 5
_MAX_TOP_LIMIT = 100
_DEFAULT_GRANULARITY = Granularity.MONTHLY


class ChartKind(StrEnum):
    PIE = "pie"
    PAYMENT_PIE = "payment-pie"
    BAR = "bar"
    LINE = "line"


# ---- Small module-level helpers used by CLI commands -------------------------


def _resolve_top_limit(limit: int | None) -> int:
    """Resolve the merchant ranking size.

    An explicit ``limit`` wins. Otherwise honors ``EA_TOP_MERCHANTS_LIMIT`` when
    it is a positive integer, capped at 100, and falls back to 5.
    """

    if limit is not None:
        return limit
    env_val = os.getenv("EA_TOP_MERCHANTS_LIMIT")
    try:
        parsed = int(env_val) if env_val else None
    except ValueError:
        _logger.warning("ignoring invalid EA_TOP_MERCHANTS_LIMIT=%r", env_val)
        parsed = None
    if parsed is not None and parsed > 0:
        return min(parsed, _MAX_TOP_LIMIT)
    return _DEFAULT_TOP_LIMIT


def _resolve_granularity(granularity: Granularity | None) -> Granularity:
    if granularity is not None:
        return Granularity(granularity)
    env_val = os.getenv("EA_DEFAULT_GRANULARITY")
    if env_val:
        try:
            return Granularity(env_val.strip().lower())
        except ValueError:
            _logger.warning("ignoring invalid EA_DEFAULT_GRANULARITY=%r", env_val)
    return _DEFAULT_GRANULARITY


def _parse_period(raw: str) -> tuple[date | None, date | None]:
    """Parse ``START:END`` (ISO dates, either side may be empty)."""

    start_raw, sep, end_raw = raw.partition(":")
    if not sep:
        raise ValueError(f"period must look like START:END, got {raw!r}")
    start = date.fromisoformat(start_raw.strip()) if start_raw.strip() else None
    end = date.fromisoformat(end_raw.strip()) if end_raw.strip() else None
    return start, end


def _load(json_path: str) -> list[Expense] | None:
    """Load records, reporting failures on stderr. Returns ``None`` on error."""

    from .loading import load_expenses

    try:
        return load_expenses(json_path)
    except FileNotFoundError:
        print(f"Error: File not found: {json_path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {json_path}", file=sys.stderr)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
    return None


def _echo_json(value: Any) -> None:
    typer.echo(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False))


# ---- Command handlers --------------------------------------------------------


def cmd_summary(json_path: str, *, as_json: bool = False) -> int:
    """Print summary statistics with category and payment-method breakdowns."""

    from .stats import calculate_summary_stats
    from .vocabulary import CATEGORY_INFO, PAYMENT_METHOD_INFO

    records = _load(json_path)
    if records is None:
        return 1
    stats = calculate_summary_stats(records)
    if as_json:
        _echo_json(stats)
        return 0

    headline = Table(title="Summary", show_header=False)
    headline.add_row("Total spending", format_currency(stats.total_spending))
    headline.add_row("Average amount", format_currency(stats.average_amount))
    headline.add_row("Transactions", str(stats.transaction_count))
    if stats.highest_expense is not None:
        h = stats.highest_expense
        headline.add_row("Highest expense", f"{format_currency(h.amount)} {h.merchant}".rstrip())
    if stats.most_used_category is not None:
        headline.add_row("Most used category", CATEGORY_INFO[stats.most_used_category].label)
    if stats.most_used_payment_method is not None:
        headline.add_row(
            "Most used payment method",
            PAYMENT_METHOD_INFO[stats.most_used_payment_method].label,
        )
    console.print(headline)

    by_category = Table(title="By category")
    for col in ("Category", "Total", "Count", "Share"):
        by_category.add_column(col)
    for b in stats.spending_by_category:
        by_category.add_row(
            CATEGORY_INFO[b.category].label,
            format_currency(b.total),
            str(b.count),
            format_percentage(b.percentage),
        )
    console.print(by_category)

    by_method = Table(title="By payment method")
    for col in ("Payment method", "Total", "Count", "Share"):
        by_method.add_column(col)
    for m in stats.spending_by_payment_method:
        by_method.add_row(
            PAYMENT_METHOD_INFO[m.payment_method].label,
            format_currency(m.total),
            str(m.count),
            format_percentage(m.percentage),
        )
    console.print(by_method)
    return 0


def cmd_trend(
    json_path: str,
    *,
    granularity: Granularity | None = None,
    cumulative: bool = False,
    as_json: bool = False,
) -> int:
    """Print per-bucket spending (or the running total) in chronological order."""

    from .trends import calculate_cumulative_spending, calculate_spending_trend

    records = _load(json_path)
    if records is None:
        return 1
    g = _resolve_granularity(granularity)

    if cumulative:
        points = calculate_cumulative_spending(records, g)
        if as_json:
            _echo_json(points)
            return 0
        table = Table(title=f"Cumulative spending ({g})")
        table.add_column("Period")
        table.add_column("Cumulative", justify="right")
        for c in points:
            table.add_row(c.label, format_currency(c.cumulative))
        console.print(table)
        return 0

    trend = calculate_spending_trend(records, g)
    if as_json:
        _echo_json(trend)
        return 0
    table = Table(title=f"Spending trend ({g})")
    table.add_column("Period")
    table.add_column("Amount", justify="right")
    table.add_column("Count", justify="right")
    for p in trend:
        table.add_row(p.label, format_currency(p.amount), str(p.count))
    console.print(table)
    return 0


def cmd_top_merchants(json_path: str, *, limit: int | None = None, as_json: bool = False) -> int:
    from .stats import get_top_merchants

    records = _load(json_path)
    if records is None:
        return 1
    ranked = get_top_merchants(records, _resolve_top_limit(limit))
    if as_json:
        _echo_json(ranked)
        return 0
    table = Table(title="Top merchants")
    table.add_column("Merchant")
    table.add_column("Total", justify="right")
    table.add_column("Count", justify="right")
    for m in ranked:
        table.add_row(m.merchant or "(none)", format_currency(m.total), str(m.count))
    console.print(table)
    return 0


def cmd_compare(json_path: str, period1: str, period2: str, *, as_json: bool = False) -> int:
    """Compare two inclusive date ranges given as ``START:END``."""

    from .stats import compare_spending_periods

    try:
        start1, end1 = _parse_period(period1)
        start2, end2 = _parse_period(period2)
    except ValueError as e:
        print(f"Error: invalid period: {e}", file=sys.stderr)
        return 1

    records = _load(json_path)
    if records is None:
        return 1
    comparison = compare_spending_periods(records, start1, end1, start2, end2)
    if as_json:
        _echo_json(comparison)
        return 0
    table = Table(title="Period comparison")
    table.add_column("")
    table.add_column("Period 1", justify="right")
    table.add_column("Period 2", justify="right")
    table.add_row(
        "Total",
        format_currency(comparison.period1_total),
        format_currency(comparison.period2_total),
    )
    table.add_row(
        "Average",
        format_currency(comparison.period1_average),
        format_currency(comparison.period2_average),
    )
    console.print(table)
    console.print(
        f"Difference: {format_currency(comparison.difference)} "
        f"({format_percentage(comparison.percentage_change)})"
    )
    return 0


def cmd_chart(
    json_path: str,
    kind: ChartKind,
    *,
    granularity: Granularity | None = None,
    cumulative: bool = False,
) -> int:
    """Print chart-ready points as JSON."""

    from . import charts

    records = _load(json_path)
    if records is None:
        return 1
    kind = ChartKind(kind)
    points: Sequence[Any]
    if kind is ChartKind.PIE:
        points = charts.to_pie_chart_data(records)
    elif kind is ChartKind.PAYMENT_PIE:
        points = charts.to_payment_method_pie_chart_data(records)
    elif kind is ChartKind.BAR:
        points = charts.to_bar_chart_data(records, _resolve_granularity(granularity))
    else:
        points = charts.to_line_chart_data(
            records, _resolve_granularity(granularity), cumulative=cumulative
        )
    _echo_json(points)
    return 0


def cmd_report(json_path: str, *, granularity: Granularity | None = None) -> int:
    """Print the category-by-period trends table."""

    from .api import report_trends

    records = _load(json_path)
    if records is None:
        return 1
    typer.echo(report_trends(records, _resolve_granularity(granularity)), nl=False)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Summaries, trends and chart data for an exported expenses JSON file. "
        "Loads EA_* settings from a local .env before running."
    ),
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults). Typer will inspect these when used as default values below.
JSON_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--json-path",
    help="Path to an exported expenses JSON array",
    dir_okay=False,
    file_okay=True,
    exists=False,  # allow non-existent here; the handler will report nice errors
)
AS_JSON_OPTION: OptionInfo = typer.Option(False, "--json", help="Emit JSON instead of a table.")
GRANULARITY_OPTION: OptionInfo = typer.Option(
    None,
    "--granularity",
    "-g",
    case_sensitive=False,
    help="Bucket size (defaults to EA_DEFAULT_GRANULARITY, else monthly).",
)
CUMULATIVE_OPTION: OptionInfo = typer.Option(
    False, "--cumulative", help="Show the running total instead of per-bucket totals."
)


@app.command("summary")
def summary_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    as_json: bool = AS_JSON_OPTION,
) -> None:
    """Summary statistics and breakdowns."""

    raise typer.Exit(cmd_summary(str(json_path), as_json=as_json))


@app.command("trend")
def trend_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    granularity: Granularity | None = GRANULARITY_OPTION,
    cumulative: bool = CUMULATIVE_OPTION,
    as_json: bool = AS_JSON_OPTION,
) -> None:
    """Spending per day, week or month."""

    raise typer.Exit(
        cmd_trend(str(json_path), granularity=granularity, cumulative=cumulative, as_json=as_json)
    )


@app.command("top-merchants")
def top_merchants_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    limit: Annotated[
        int | None,
        typer.Option(help="Number of merchants (defaults to EA_TOP_MERCHANTS_LIMIT, else 5)."),
    ] = None,
    as_json: bool = AS_JSON_OPTION,
) -> None:
    """Merchants ranked by total spending."""

    raise typer.Exit(cmd_top_merchants(str(json_path), limit=limit, as_json=as_json))


@app.command("compare")
def compare_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    period1: Annotated[str, typer.Option(help="First range as START:END (ISO dates).")],
    period2: Annotated[str, typer.Option(help="Second range as START:END (ISO dates).")],
    as_json: bool = AS_JSON_OPTION,
) -> None:
    """Compare spending between two date ranges."""

    raise typer.Exit(cmd_compare(str(json_path), period1, period2, as_json=as_json))


@app.command("chart")
def chart_cmd(
    kind: Annotated[ChartKind, typer.Argument(case_sensitive=False)],
    json_path: Annotated[Path, JSON_PATH_OPTION],
    granularity: Granularity | None = GRANULARITY_OPTION,
    cumulative: bool = CUMULATIVE_OPTION,
) -> None:
    """Chart-ready points (pie, payment-pie, bar, line) as JSON."""

    raise typer.Exit(
        cmd_chart(str(json_path), kind, granularity=granularity, cumulative=cumulative)
    )


@app.command("report")
def report_cmd(
    json_path: Annotated[Path, JSON_PATH_OPTION],
    granularity: Granularity | None = GRANULARITY_OPTION,
) -> None:
    """Category-by-period spending table."""

    raise typer.Exit(cmd_report(str(json_path), granularity=granularity))


@app.callback()
def _root(
    log_level: Annotated[
        str | None,
        typer.Option(help="Log level (defaults to EXPENSE_ANALYTICS_LOG_LEVEL, else WARNING)."),
    ] = None,
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures logging before any
    subcommand runs.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging(log_level)


def main() -> None:
    """Console-script entrypoint."""

    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    # Running as a module: `python -m expense_analytics.cli`
    main()
