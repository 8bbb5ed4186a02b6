"""Closed vocabulary for expense records: categories and payment methods.

Both enumerations are fixed sets. Their member declaration order is part of the
public contract: breakdowns are emitted in this order, and "most used" ties are
resolved in favor of the member declared first.

Display metadata (label, icon, color) lives in explicit lookup tables keyed by
enum member rather than being derived at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
    FOOD_DINING = "FOOD_DINING"
    TRANSPORTATION = "TRANSPORTATION"
    ENTERTAINMENT = "ENTERTAINMENT"
    BILLS_UTILITIES = "BILLS_UTILITIES"
    SHOPPING = "SHOPPING"
    HEALTHCARE = "HEALTHCARE"
    EDUCATION = "EDUCATION"
    TRAVEL = "TRAVEL"
    PERSONAL_CARE = "PERSONAL_CARE"
    OTHER = "OTHER"


class PaymentMethod(StrEnum):
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    DIGITAL_WALLET = "DIGITAL_WALLET"
    BANK_TRANSFER = "BANK_TRANSFER"
    OTHER = "OTHER"


@dataclass(frozen=True, slots=True)
class VocabularyInfo:
    """Display metadata for one vocabulary member."""

    label: str
    icon: str
    color: str


# Category colors meet a 4.5:1 contrast ratio for text on white.
CATEGORY_INFO: dict[Category, VocabularyInfo] = {
    Category.FOOD_DINING: VocabularyInfo("Food & Dining", "🍔", "#DC2626"),
    Category.TRANSPORTATION: VocabularyInfo("Transportation", "🚗", "#2563EB"),
    Category.ENTERTAINMENT: VocabularyInfo("Entertainment", "🎬", "#CA8A04"),
    Category.BILLS_UTILITIES: VocabularyInfo("Bills & Utilities", "💡", "#16A34A"),
    Category.SHOPPING: VocabularyInfo("Shopping", "🛍️", "#9333EA"),
    Category.HEALTHCARE: VocabularyInfo("Healthcare", "🏥", "#EA580C"),
    Category.EDUCATION: VocabularyInfo("Education", "📚", "#DB2777"),
    Category.TRAVEL: VocabularyInfo("Travel", "✈️", "#0891B2"),
    Category.PERSONAL_CARE: VocabularyInfo("Personal Care", "💅", "#7C3AED"),
    Category.OTHER: VocabularyInfo("Other", "📦", "#64748B"),
}

PAYMENT_METHOD_INFO: dict[PaymentMethod, VocabularyInfo] = {
    PaymentMethod.CASH: VocabularyInfo("Cash", "💵", "#15803D"),
    PaymentMethod.CREDIT_CARD: VocabularyInfo("Credit Card", "💳", "#1D4ED8"),
    PaymentMethod.DEBIT_CARD: VocabularyInfo("Debit Card", "💳", "#0E7490"),
    PaymentMethod.DIGITAL_WALLET: VocabularyInfo("Digital Wallet", "📱", "#7E22CE"),
    PaymentMethod.BANK_TRANSFER: VocabularyInfo("Bank Transfer", "🏦", "#B45309"),
    PaymentMethod.OTHER: VocabularyInfo("Other", "💰", "#64748B"),
}


def get_all_categories() -> list[Category]:
    """Return every category in declaration order."""

    return list(Category)


def get_category_label(category: Category) -> str:
    return CATEGORY_INFO[category].label


def get_category_icon(category: Category) -> str:
    return CATEGORY_INFO[category].icon


def get_category_color(category: Category) -> str:
    return CATEGORY_INFO[category].color


def get_all_payment_methods() -> list[PaymentMethod]:
    """Return every payment method in declaration order."""

    return list(PaymentMethod)


def get_payment_method_label(payment_method: PaymentMethod) -> str:
    return PAYMENT_METHOD_INFO[payment_method].label


def get_payment_method_icon(payment_method: PaymentMethod) -> str:
    return PAYMENT_METHOD_INFO[payment_method].icon


def get_payment_method_color(payment_method: PaymentMethod) -> str:
    return PAYMENT_METHOD_INFO[payment_method].color


__all__ = [
    "CATEGORY_INFO",
    "PAYMENT_METHOD_INFO",
    "Category",
    "PaymentMethod",
    "VocabularyInfo",
    "get_all_categories",
    "get_all_payment_methods",
    "get_category_color",
    "get_category_icon",
    "get_category_label",
    "get_payment_method_color",
    "get_payment_method_icon",
    "get_payment_method_label",
]
