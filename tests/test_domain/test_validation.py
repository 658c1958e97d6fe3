"""
Tests for amount validation utilities
"""
from decimal import Decimal

import pytest

from tanker.utils.validation import (
    validate_decimal_amount, validate_and_normalize_amount,
)


@pytest.mark.parametrize("value, expected", [
    ("3000", Decimal("3000")),
    ("1,000", Decimal("1000")),
    (" 3 000.5 ", Decimal("3000.5")),
    ("9" * 18, Decimal("9" * 18)),
    ("000" + "9" * 18, Decimal("9" * 18)),
])
def test_valid_amounts(value, expected):
    assert validate_and_normalize_amount(value) == expected


@pytest.mark.parametrize("value, message", [
    ("abc", "Некорректная сумма"),
    ("+5", "Некорректная сумма"),
    ("5.", "Некорректная сумма"),
    ("1e3", "Некорректная сумма"),
    ("-5", "Сумма не может быть отрицательной"),
    ("1.234", "Максимум 2 знака после запятой"),
    ("1" + "0" * 18, "Слишком большая сумма"),
    ("9" * 30, "Слишком большая сумма"),
])
def test_invalid_amounts(value, message):
    assert validate_decimal_amount(value) == (False, message)


def test_negative_allowed_when_requested():
    assert validate_and_normalize_amount("-1,500.25", allow_negative=True) == Decimal("-1500.25")


def test_negative_still_capped():
    with pytest.raises(ValueError, match="Слишком большая сумма"):
        validate_and_normalize_amount("-" + "9" * 19, allow_negative=True)


def test_double_sign_rejected():
    assert validate_decimal_amount("--5", allow_negative=True) == (False, "Некорректная сумма")
