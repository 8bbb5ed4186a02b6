import json
from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from expense_analytics import Category, PaymentMethod
from expense_analytics.loading import load_expenses, parse_expenses


def _raw(**overrides):
    record = {
        "id": "abc-1",
        "amount": 42.5,
        "date": "2025-11-10T14:30:00",
        "category": "FOOD_DINING",
        "paymentMethod": "CREDIT_CARD",
        "description": "Lunch with team",
        "merchant": "Noodle Bar",
        "createdAt": "2025-11-10T14:31:00",
        "updatedAt": "2025-11-10T14:31:00",
    }
    record.update(overrides)
    return record


def _dump(*records):
    return json.dumps(list(records))


def test_parse_expenses_accepts_camel_case_export():
    (expense,) = parse_expenses(_dump(_raw()))

    assert expense.id == "abc-1"
    assert expense.amount == 42.5
    assert expense.date == datetime(2025, 11, 10, 14, 30)
    assert expense.category is Category.FOOD_DINING
    assert expense.payment_method is PaymentMethod.CREDIT_CARD
    assert expense.created_at == datetime(2025, 11, 10, 14, 31)


def test_parse_expenses_ignores_unknown_keys_and_defaults_optional_text():
    record = _raw(extra="ignored")
    del record["merchant"], record["description"], record["createdAt"], record["updatedAt"]

    (expense,) = parse_expenses(_dump(record))

    assert expense.merchant == ""
    assert expense.description == ""
    assert expense.created_at is None


def test_parse_expenses_date_only_value_is_midnight():
    (expense,) = parse_expenses(_dump(_raw(date="2025-11-10")))
    assert expense.date == datetime(2025, 11, 10, 0, 0)


def test_parse_expenses_empty_array():
    assert parse_expenses("[]") == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"amount": 0},
        {"amount": -5},
        {"amount": 1_000_000},
        {"amount": 1.234},
        {"category": "GROCERIES"},
        {"paymentMethod": "CHEQUE"},
        {"id": "  "},
        {"merchant": "x" * 101},
        {"description": "y" * 201},
    ],
)
def test_parse_expenses_rejects_invalid_records(overrides):
    with pytest.raises(ValidationError):
        parse_expenses(_dump(_raw(**overrides)))


def test_parse_expenses_rejects_future_dates():
    tomorrow = (datetime.now() + timedelta(days=1)).isoformat()
    with pytest.raises(ValidationError):
        parse_expenses(_dump(_raw(date=tomorrow)))


def test_parse_expenses_rejects_malformed_json():
    with pytest.raises(ValueError):
        parse_expenses("[{not json")


def test_load_expenses_reads_file(tmp_path):
    path = tmp_path / "expenses.json"
    path.write_text(_dump(_raw(), _raw(id="abc-2", amount=7)), encoding="utf-8")

    records = load_expenses(path)

    assert [r.id for r in records] == ["abc-1", "abc-2"]
    assert records[1].amount == 7.0


def test_load_expenses_names_the_file_on_invalid_content(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text(_dump(_raw(amount=-1)), encoding="utf-8")

    with pytest.raises(ValueError, match="broken.json"):
        load_expenses(path)


def test_load_expenses_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_expenses(tmp_path / "nope.json")
