"""Trend engine: per-bucket spending totals and cumulative series.

Both series are built on :func:`~expense_analytics.bucketing.group_by_period`,
so a given granularity always yields the same bucket boundaries whether the
caller asks for per-bucket totals or for a running total.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .bucketing import Granularity, bucket_label, bucket_start, group_by_period
from .logging_setup import get_logger
from .models import CumulativePoint, Expense, TrendPoint
from .numeric import round_to_decimals, total

_logger = get_logger("expense_analytics.trends")


def _local_timestamp(value: datetime) -> datetime:
    # Naive local wall-clock time, comparable across naive and aware inputs.
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def calculate_spending_trend(
    records: Sequence[Expense], granularity: Granularity
) -> list[TrendPoint]:
    """Return total amount and record count per bucket, oldest bucket first.

    Points are ordered by bucket key, never by label, so weekly and monthly
    labels do not affect the order.
    """

    granularity = Granularity(granularity)
    groups = group_by_period(records, granularity)
    points = [
        TrendPoint(
            period=key,
            label=bucket_label(bucket_start(key, granularity), granularity),
            amount=round_to_decimals(total(r.amount for r in groups[key])),
            count=len(groups[key]),
        )
        for key in sorted(groups)
    ]
    _logger.debug("trend: %d %s points from %d records", len(points), granularity, len(records))
    return points


def calculate_cumulative_spending(
    records: Sequence[Expense], granularity: Granularity = Granularity.DAILY
) -> list[CumulativePoint]:
    """Return the running total of spending, one point per bucket.

    Records are first sorted by date (stable), then aggregated per bucket (one
    point per calendar day by default) before accumulating. Amounts are
    positive, so ``cumulative`` never decreases from one point to the next.
    """

    ordered = sorted(records, key=lambda r: _local_timestamp(r.date))
    running = 0.0
    points: list[CumulativePoint] = []
    for point in calculate_spending_trend(ordered, granularity):
        running = round_to_decimals(running + point.amount)
        points.append(CumulativePoint(period=point.period, label=point.label, cumulative=running))
    return points


__all__ = ["calculate_cumulative_spending", "calculate_spending_trend"]
