"""Tests for the cashflow normalizer"""
import logging
from datetime import date
from decimal import Decimal

import pytest

from tanker.domain.cashflow import (
    CashflowItem, normalize, daily_value, signed_amount, is_recurring,
    VALID_FREQUENCIES,
)


class TestNormalize:
    def test_monthly_expense(self):
        assert normalize(3000, "monthly", "expense") == Decimal("-100")

    def test_daily_income(self):
        assert normalize(500, "daily", "income") == Decimal("500")

    def test_weekly(self):
        assert normalize(700, "weekly", "income") == Decimal("100")

    def test_yearly(self):
        assert normalize(36500, "yearly", "expense") == Decimal("-100")

    def test_monthly_uses_fixed_30_day_divisor(self):
        assert normalize(Decimal("3100"), "monthly", "income") == Decimal("3100") / 30

    @pytest.mark.parametrize("type_", ["income", "expense"])
    def test_one_time_is_always_zero(self, type_):
        assert normalize(50000, "one_time", type_) == 0

    @pytest.mark.parametrize("frequency", VALID_FREQUENCIES)
    @pytest.mark.parametrize("type_", ["income", "expense"])
    def test_zero_amount_contributes_zero(self, frequency, type_):
        assert normalize(0, frequency, type_) == 0

    @pytest.mark.parametrize("frequency", ["daily", "weekly", "monthly", "yearly"])
    def test_sign_follows_type(self, frequency):
        assert normalize(1000, frequency, "expense") < 0
        assert normalize(1000, frequency, "income") > 0

    def test_unknown_frequency_falls_back_to_zero_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tanker.domain.cashflow"):
            assert normalize(1000, "fortnightly", "expense") == 0
        assert "fortnightly" in caplog.text


class TestHelpers:
    def test_signed_amount(self):
        assert signed_amount(1200, "expense") == Decimal("-1200")
        assert signed_amount(1200, "income") == Decimal("1200")

    def test_is_recurring(self):
        assert not is_recurring("one_time")
        assert is_recurring("weekly")

    def test_daily_value_reads_item_attributes(self):
        item = CashflowItem(
            name="家賃", amount=Decimal("90000"), type="expense",
            frequency="monthly", date=date(2026, 10, 1),
        )
        assert daily_value(item) == Decimal("-3000")
