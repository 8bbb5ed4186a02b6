"""Numeric primitives shared by every aggregation.

Empty inputs never raise: ``total``/``average``/``minimum``/``maximum`` all
return ``0.0`` for an empty sequence, and percentages against a zero total are
``0.0``. Callers treat "no data" as a zero baseline.

Rounding is half away from zero on the decimal representation of the value
(``2.675`` rounds to ``2.68``), which is what users expect from money, rather
than Python's binary round-half-even.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

MONEY_DECIMALS: int = 2
PERCENT_DECIMALS: int = 1


def total(values: Iterable[float]) -> float:
    """Sum ``values`` without accumulating float error (``0.0`` when empty)."""

    return math.fsum(values)


def average(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return math.fsum(values) / len(values)


def minimum(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return min(values)


def maximum(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return max(values)


def round_to_decimals(value: float, decimals: int = MONEY_DECIMALS) -> float:
    """Round ``value`` half away from zero to ``decimals`` places."""

    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded) + 0.0  # normalizes -0.0


def calculate_percentage(value: float, total: float) -> float:
    """Return ``value`` as a percentage of ``total`` to one decimal (0 when total is 0)."""

    if total == 0:
        return 0.0
    return round_to_decimals((value / total) * 100, PERCENT_DECIMALS)


def calculate_percentages(values: Sequence[float]) -> list[float]:
    """Return each value's share of the sum, in percent, summing to exactly 100.

    Shares are apportioned in tenths of a percent with the largest-remainder
    method: every value first gets the floor of its exact share, then the
    leftover tenths go to the largest fractional parts (earlier positions win
    ties). Each result is therefore within 0.1 of the exact share. When the
    values sum to 0 (or there are none) every share is 0.
    """

    exact = [Decimal(repr(v)) for v in values]
    grand = sum(exact, Decimal(0))
    if grand == 0:
        return [0.0 for _ in values]

    scale = Decimal(10) ** (PERCENT_DECIMALS + 2)
    shares = [v * scale / grand for v in exact]
    units = [int(s.to_integral_value(rounding=ROUND_FLOOR)) for s in shares]
    leftover = int(scale) - sum(units)
    by_remainder = sorted(
        range(len(shares)), key=lambda i: (-(shares[i] - units[i]), i)
    )
    for i in by_remainder[: max(0, leftover)]:
        units[i] += 1

    divisor = 10**PERCENT_DECIMALS
    return [u / divisor for u in units]


# ---- Display helpers ---------------------------------------------------------


def format_number(amount: float, decimals: int = MONEY_DECIMALS) -> str:
    """Format with thousands separators, e.g. ``1234.5`` -> ``"1,234.50"``."""

    return f"{round_to_decimals(amount, decimals):,.{decimals}f}"


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a money amount, e.g. ``-1234.5`` -> ``"-$1,234.50"``."""

    sign = "-" if round_to_decimals(amount) < 0 else ""
    return f"{sign}{symbol}{format_number(abs(amount))}"


def format_percentage(value: float, decimals: int = PERCENT_DECIMALS) -> str:
    return f"{round_to_decimals(value, decimals):.{decimals}f}%"


__all__ = [
    "average",
    "calculate_percentage",
    "calculate_percentages",
    "format_currency",
    "format_number",
    "format_percentage",
    "maximum",
    "minimum",
    "round_to_decimals",
    "total",
]
