"""Tests for the month-to-date P&L and expense breakdown"""
from datetime import date
from decimal import Decimal

import pytest

from tanker.domain.cashflow import CashflowItem
from tanker.domain.statement import (
    profit_and_loss, expense_breakdown, monthly_fixed_amount, tag_label,
)

TODAY = date(2026, 10, 17)
_D = Decimal


def _item(name, amount, type_, frequency, day, tag=None):
    return CashflowItem(
        name=name, amount=_D(amount), type=type_, frequency=frequency,
        date=day, tag=tag,
    )


@pytest.fixture
def month_items():
    return [
        _item("給料", "250000", "income", "monthly", date(2026, 10, 1)),
        _item("副業", "30000", "income", "one_time", date(2026, 10, 5)),
        _item("家賃", "90000", "expense", "monthly", date(2026, 10, 1)),
        _item("ジム", "700", "expense", "weekly", date(2026, 10, 2)),
        _item("昼食", "800", "expense", "daily", date(2026, 10, 3)),
        _item("サブスク", "36500", "expense", "yearly", date(2026, 10, 4)),
        _item("スーパー", "4500", "expense", "one_time", date(2026, 10, 6), tag="food"),
        _item("電車", "1000", "expense", "one_time", date(2026, 10, 7), tag="transport"),
        _item("雑貨", "2000", "expense", "one_time", date(2026, 10, 8)),
        _item("飲み会", "6000", "expense", "one_time", date(2026, 10, 9), tag="social"),
        # outside the month-to-date range
        _item("先月", "9999", "expense", "one_time", date(2026, 9, 30), tag="food"),
        _item("予定", "8888", "expense", "one_time", date(2026, 10, 20), tag="food"),
    ]


class TestProfitAndLoss:
    def test_totals(self, month_items):
        pl = profit_and_loss(month_items, TODAY)

        assert pl.month_start == date(2026, 10, 1)
        assert pl.days_in_month == 31
        assert pl.income == _D("280000")
        # 90000 + 100*31 + 800*31 + 100*31
        assert pl.fixed_expenses == _D("121000")
        assert pl.running_costs == _D("126500")
        assert pl.discretionary == _D("8000")
        assert pl.total_expenses == _D("134500")
        assert pl.profit == _D("145500")

    def test_tag_breakdown(self, month_items):
        pl = profit_and_loss(month_items, TODAY)
        assert pl.running_cost_by_tag == {"food": _D("4500"), "transport": _D("1000")}
        assert pl.discretionary_by_tag == {"other": _D("2000"), "social": _D("6000")}

    def test_empty_month(self):
        pl = profit_and_loss([], TODAY)
        assert pl.income == 0
        assert pl.total_expenses == 0
        assert pl.profit == 0

    def test_february_proration(self):
        item = _item("昼食", "1000", "expense", "daily", date(2026, 2, 1))
        pl = profit_and_loss([item], date(2026, 2, 10))
        assert pl.days_in_month == 28
        assert pl.fixed_expenses == _D("28000")


def test_monthly_fixed_amount_keeps_monthly_bills_whole():
    item = _item("家賃", "90000", "expense", "monthly", date(2026, 10, 1))
    assert monthly_fixed_amount(item, 31) == _D("90000")


def test_tag_label_falls_back_to_other_and_raw_tag():
    assert tag_label(None) == tag_label("other")
    assert tag_label("pets") == "pets"


def test_expense_breakdown_sorted_by_daily_amount(month_items):
    rows = expense_breakdown(month_items)
    names = [name for name, _ in rows]
    assert names[:2] == ["家賃", "昼食"]
    assert rows[0][1] == _D("3000")
    # one-time and income entries never appear
    assert "スーパー" not in names
    assert "給料" not in names
