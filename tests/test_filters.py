from datetime import date

import pytest

from expense_analytics import Category, PaymentMethod
from expense_analytics.filters import (
    ExpenseFilter,
    filter_by_amount_range,
    filter_by_categories,
    filter_by_date_range,
    filter_by_payment_methods,
    filter_expenses,
    search_expenses,
    sort_expenses,
)


@pytest.fixture
def records(make_expense):
    return [
        make_expense(
            amount=12.5,
            date="2025-10-31T23:45:00",
            category=Category.FOOD_DINING,
            merchant="Corner Bistro",
            description="Late dinner",
        ),
        make_expense(
            amount=60.0,
            date="2025-11-01T08:00:00",
            category=Category.TRANSPORTATION,
            payment_method=PaymentMethod.DEBIT_CARD,
            merchant="City Fuel",
            description="Gas refill",
        ),
        make_expense(
            amount=5.0,
            date="2025-11-03T12:00:00",
            category=Category.FOOD_DINING,
            payment_method=PaymentMethod.CASH,
            merchant="bistro express",
            description="Coffee",
        ),
        make_expense(
            amount=250.0,
            date="2025-11-20T18:30:00",
            category=Category.SHOPPING,
            merchant="Gadget Hub",
            description="Headphones",
        ),
    ]


def _ids(result):
    return [r.id for r in result]


def test_filter_by_date_range_is_inclusive_of_whole_days(records):
    result = filter_by_date_range(records, date(2025, 10, 31), date(2025, 11, 3))
    assert _ids(result) == ["e1", "e2", "e3"]
    assert _ids(filter_by_date_range(records, None, None)) == _ids(records)


def test_filter_by_categories(records):
    result = filter_by_categories(records, [Category.FOOD_DINING, Category.SHOPPING])
    assert _ids(result) == ["e1", "e3", "e4"]
    assert filter_by_categories(records, []) == records


def test_filter_by_payment_methods(records):
    assert _ids(filter_by_payment_methods(records, [PaymentMethod.CASH])) == ["e3"]
    assert filter_by_payment_methods(records, ()) == records


def test_filter_by_amount_range_inclusive_bounds(records):
    assert _ids(filter_by_amount_range(records, 12.5, 60.0)) == ["e1", "e2"]
    assert _ids(filter_by_amount_range(records, None, 12.5)) == ["e1", "e3"]
    assert _ids(filter_by_amount_range(records, 100, None)) == ["e4"]


def test_search_is_case_insensitive_over_description_and_merchant(records):
    assert _ids(search_expenses(records, "BISTRO")) == ["e1", "e3"]
    assert _ids(search_expenses(records, "refill")) == ["e2"]
    assert search_expenses(records, "   ") == records
    assert search_expenses(records, "nothing matches") == []


def test_filter_expenses_combines_all_criteria(records):
    criteria = ExpenseFilter(
        start=date(2025, 11, 1),
        categories=(Category.FOOD_DINING, Category.TRANSPORTATION),
        max_amount=100.0,
        search_query="bistro",
    )

    assert _ids(filter_expenses(records, criteria)) == ["e3"]
    assert criteria.active_count() == 4
    assert not criteria.is_empty()


def test_empty_filter_matches_everything(records):
    criteria = ExpenseFilter()
    assert criteria.is_empty()
    assert filter_expenses(records, criteria) == records


def test_filters_return_new_lists(records):
    snapshot = list(records)
    result = filter_expenses(records, ExpenseFilter())
    assert result is not records
    assert records == snapshot


def test_sort_expenses_defaults_to_newest_first(records):
    assert _ids(sort_expenses(records)) == ["e4", "e3", "e2", "e1"]
    assert _ids(sort_expenses(records, "date", "asc")) == ["e1", "e2", "e3", "e4"]


def test_sort_expenses_by_amount_category_and_merchant(records):
    assert _ids(sort_expenses(records, "amount", "desc")) == ["e4", "e2", "e1", "e3"]
    # FOOD_DINING before TRANSPORTATION before SHOPPING; ties keep input order.
    assert _ids(sort_expenses(records, "category", "asc")) == ["e1", "e3", "e2", "e4"]
    assert _ids(sort_expenses(records, "merchant", "asc")) == ["e3", "e2", "e1", "e4"]


def test_sort_expenses_descending_is_stable_for_ties(make_expense):
    a = make_expense(amount=10)
    b = make_expense(amount=10)
    assert sort_expenses([a, b], "amount", "desc") == [a, b]


def test_sort_expenses_rejects_unknown_arguments(records):
    with pytest.raises(ValueError):
        sort_expenses(records, "colour")
    with pytest.raises(ValueError):
        sort_expenses(records, "amount", "sideways")
