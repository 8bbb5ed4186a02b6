"""Calendar bucketing: map dates to daily, weekly and monthly buckets.

Every bucket has a *key* that sorts chronologically as a plain string and a
human *label* for display:

==========  ==============  ==================
Granularity Key             Label
==========  ==============  ==================
daily       ``2025-11-09``  ``2025-11-09``
weekly      ``2025-11-09``  ``Week of 2025-11-09``
monthly     ``2025-11``     ``Nov 2025``
==========  ==============  ==================

Weeks start on Sunday; the weekly key is the ISO date of that Sunday.

Dates follow local calendar semantics. Naive datetimes are taken as-is; aware
datetimes are converted to the local timezone before their calendar date is
read. No other timezone handling is attempted.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import StrEnum

from .logging_setup import get_logger
from .models import Expense

_logger = get_logger("expense_analytics.bucketing")

# Fixed English abbreviations; strftime("%b") would depend on the process locale.
_MONTH_ABBR: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


class Granularity(StrEnum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


def to_local_date(value: datetime | date) -> date:
    """Return the local calendar date of ``value``."""

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def week_start(value: datetime | date) -> date:
    """Return the Sunday that starts the week containing ``value``."""

    d = to_local_date(value)
    # weekday(): Monday=0 .. Sunday=6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def month_start(value: datetime | date) -> date:
    d = to_local_date(value)
    return d.replace(day=1)


def bucket_key(value: datetime | date, granularity: Granularity) -> str:
    """Return the chronologically sortable bucket key for ``value``."""

    granularity = Granularity(granularity)
    if granularity is Granularity.DAILY:
        return to_local_date(value).isoformat()
    if granularity is Granularity.WEEKLY:
        return week_start(value).isoformat()
    d = to_local_date(value)
    return f"{d.year:04d}-{d.month:02d}"


def bucket_start(key: str, granularity: Granularity) -> date:
    """Inverse of :func:`bucket_key`: the first calendar day of the bucket."""

    if Granularity(granularity) is Granularity.MONTHLY:
        return date.fromisoformat(f"{key}-01")
    return date.fromisoformat(key)


def bucket_label(start: date, granularity: Granularity) -> str:
    """Return the display label for the bucket that begins on ``start``."""

    granularity = Granularity(granularity)
    if granularity is Granularity.DAILY:
        return start.isoformat()
    if granularity is Granularity.WEEKLY:
        return f"Week of {start.isoformat()}"
    return f"{_MONTH_ABBR[start.month - 1]} {start.year:04d}"


def format_date_by_granularity(value: datetime | date, granularity: Granularity) -> str:
    """Return the label of the bucket containing ``value``."""

    return bucket_label(bucket_start(bucket_key(value, granularity), granularity), granularity)


def group_by_period(
    records: Iterable[Expense], granularity: Granularity
) -> dict[str, list[Expense]]:
    """Partition ``records`` into buckets keyed by :func:`bucket_key`.

    Every record lands in exactly one bucket. Records keep their original
    relative order inside a bucket. Buckets appear in order of first
    occurrence; callers that need chronological order sort by key.
    """

    granularity = Granularity(granularity)
    groups: dict[str, list[Expense]] = {}
    for record in records:
        groups.setdefault(bucket_key(record.date, granularity), []).append(record)
    _logger.debug("grouped records into %d %s buckets", len(groups), granularity.value)
    return groups


def is_in_range(
    value: datetime | date,
    start: datetime | date | None,
    end: datetime | date | None,
) -> bool:
    """Return whether ``value`` falls within ``[start, end]`` by calendar day.

    ``start`` is clamped to the start of its day and ``end`` to the end of its
    day, so a timestamp late on the end date is still included. ``None`` leaves
    that side unbounded.
    """

    d = to_local_date(value)
    if start is not None and d < to_local_date(start):
        return False
    if end is not None and d > to_local_date(end):
        return False
    return True


# ---- Date range presets ------------------------------------------------------


@dataclass(frozen=True, slots=True)
class DateRangePreset:
    label: str
    start: date
    end: date


def date_range_presets(today: date | None = None) -> list[DateRangePreset]:
    """Return the standard quick-pick ranges relative to ``today``.

    Ranges are inclusive calendar days, suitable for :func:`is_in_range`.
    """

    today = today or date.today()
    this_month = today.replace(day=1)
    last_month_end = this_month - timedelta(days=1)
    next_month = (this_month + timedelta(days=32)).replace(day=1)
    return [
        DateRangePreset("Today", today, today),
        DateRangePreset("Last 7 days", today - timedelta(days=6), today),
        DateRangePreset("Last 30 days", today - timedelta(days=29), today),
        DateRangePreset("This month", this_month, next_month - timedelta(days=1)),
        DateRangePreset("Last month", last_month_end.replace(day=1), last_month_end),
    ]


__all__ = [
    "DateRangePreset",
    "Granularity",
    "bucket_key",
    "bucket_label",
    "bucket_start",
    "date_range_presets",
    "format_date_by_granularity",
    "group_by_period",
    "is_in_range",
    "month_start",
    "to_local_date",
    "week_start",
]
