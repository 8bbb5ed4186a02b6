import pytest

from expense_analytics.numeric import (
    average,
    calculate_percentage,
    calculate_percentages,
    format_currency,
    format_number,
    format_percentage,
    maximum,
    minimum,
    round_to_decimals,
    total,
)


def test_empty_inputs_are_zero_baseline():
    assert total([]) == 0.0
    assert average([]) == 0.0
    assert minimum([]) == 0.0
    assert maximum([]) == 0.0


def test_basic_aggregates():
    values = [10.0, 30.0, 60.0]
    assert total(values) == 100.0
    assert average(values) == pytest.approx(33.333333, rel=1e-6)
    assert minimum(values) == 10.0
    assert maximum(values) == 60.0


def test_total_does_not_accumulate_float_error():
    assert total([0.1] * 10) == 1.0


@pytest.mark.parametrize(
    ("value", "decimals", "expected"),
    [
        (2.675, 2, 2.68),  # binary round() would give 2.67
        (1.005, 2, 1.01),
        (-2.5, 0, -3.0),
        (2.5, 0, 3.0),
        (0.05, 1, 0.1),
        (33.333333, 2, 33.33),
        (12.0, 2, 12.0),
    ],
)
def test_round_to_decimals_half_away_from_zero(value, decimals, expected):
    assert round_to_decimals(value, decimals) == expected


def test_round_to_decimals_never_returns_negative_zero():
    result = round_to_decimals(-0.001, 2)
    assert result == 0.0
    assert str(result) == "0.0"


def test_calculate_percentage():
    assert calculate_percentage(40, 100) == 40.0
    assert calculate_percentage(1, 3) == 33.3
    assert calculate_percentage(2, 3) == 66.7
    assert calculate_percentage(5, 0) == 0.0


def test_calculate_percentages_sum_to_exactly_100():
    shares = calculate_percentages([1, 1, 1])
    assert shares == [33.4, 33.3, 33.3]
    assert sum(shares) == pytest.approx(100.0, abs=1e-9)


def test_calculate_percentages_stay_within_a_tenth_of_exact_share():
    values = [0.07, 0.07, 0.07, 0.07, 0.07, 0.07, 0.07, 0.07, 0.07, 99.37]
    shares = calculate_percentages(values)
    grand = sum(values)
    for v, s in zip(values, shares, strict=True):
        assert abs(s - v / grand * 100) <= 0.1 + 1e-9
    assert sum(shares) == pytest.approx(100.0, abs=1e-9)


def test_calculate_percentages_exact_split_matches_calculate_percentage():
    assert calculate_percentages([40.0, 60.0]) == [40.0, 60.0]
    assert calculate_percentages([25.0, 25.0, 50.0]) == [
        calculate_percentage(25.0, 100.0),
        calculate_percentage(25.0, 100.0),
        calculate_percentage(50.0, 100.0),
    ]


def test_calculate_percentages_zero_total():
    assert calculate_percentages([]) == []
    assert calculate_percentages([0.0, 0.0]) == [0.0, 0.0]


def test_display_formatting():
    assert format_number(1234.5) == "1,234.50"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_currency(-1.0) == "-$1.00"
    assert format_currency(3, symbol="€") == "€3.00"
    assert format_percentage(12.345) == "12.3%"
    assert format_percentage(40) == "40.0%"
