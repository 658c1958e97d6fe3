"""
Month-to-date profit & loss statement and the expense breakdown.

P&L rules:
  - income: raw income amounts of the month (all frequencies)
  - fixed expenses: recurring expenses prorated to the calendar month
      monthly           -> amount (one charge per month)
      daily/weekly/yearly -> |daily value| * days in month
  - one-time expenses split by tag into running costs and discretionary
    spending; a missing tag counts as "other"
"""
import calendar
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable

from tanker.domain.cashflow import (
    TYPE_INCOME, TYPE_EXPENSE, FREQ_MONTHLY, daily_value, is_recurring,
)

TAG_OTHER = "other"

# Necessary living costs; everything else is discretionary
RUNNING_COST_TAGS = ("food", "daily", "transport", "housing", "medical", "education")

TAG_LABELS = {
    "food": "🍱 食費",
    "daily": "🧻 日用品",
    "transport": "🚃 交通費",
    "housing": "🏠 住居・通信",
    "social": "🍻 交際費",
    "fun": "🎮 趣味・娯楽",
    "medical": "🏥 医療費",
    "education": "🎓 教育",
    "other": "❓ その他",
}

_ZERO = Decimal("0")


@dataclass(frozen=True)
class ProfitLoss:
    month_start: date
    days_in_month: int
    income: Decimal
    fixed_expenses: Decimal
    running_costs: Decimal
    discretionary: Decimal
    total_expenses: Decimal
    profit: Decimal
    running_cost_by_tag: dict[str, Decimal] = field(default_factory=dict)
    discretionary_by_tag: dict[str, Decimal] = field(default_factory=dict)


def tag_label(tag: str | None) -> str:
    tag = tag or TAG_OTHER
    return TAG_LABELS.get(tag, tag)


def monthly_fixed_amount(item, days_in_month: int) -> Decimal:
    """Share of a recurring expense that falls into one calendar month."""
    if item.frequency == FREQ_MONTHLY:
        return Decimal(item.amount)
    return abs(daily_value(item)) * days_in_month


def profit_and_loss(transactions: Iterable, today: date) -> ProfitLoss:
    month_start = today.replace(day=1)
    days_in_month = calendar.monthrange(today.year, today.month)[1]

    month = [t for t in transactions if month_start <= t.date <= today]

    income = sum((Decimal(t.amount) for t in month if t.type == TYPE_INCOME), _ZERO)

    fixed = _ZERO
    running_by_tag: dict[str, Decimal] = {}
    discretionary_by_tag: dict[str, Decimal] = {}

    for t in month:
        if t.type != TYPE_EXPENSE:
            continue
        if is_recurring(t.frequency):
            fixed += monthly_fixed_amount(t, days_in_month)
            continue
        tag = t.tag or TAG_OTHER
        bucket = running_by_tag if tag in RUNNING_COST_TAGS else discretionary_by_tag
        bucket[tag] = bucket.get(tag, _ZERO) + Decimal(t.amount)

    running_costs = fixed + sum(running_by_tag.values(), _ZERO)
    discretionary = sum(discretionary_by_tag.values(), _ZERO)
    total_expenses = running_costs + discretionary

    return ProfitLoss(
        month_start=month_start,
        days_in_month=days_in_month,
        income=income,
        fixed_expenses=fixed,
        running_costs=running_costs,
        discretionary=discretionary,
        total_expenses=total_expenses,
        profit=income - total_expenses,
        running_cost_by_tag=running_by_tag,
        discretionary_by_tag=discretionary_by_tag,
    )


def expense_breakdown(transactions: Iterable) -> list[tuple[str, Decimal]]:
    """(name, per-day expense) for recurring expenses, largest first."""
    rows = []
    for t in transactions:
        if t.type != TYPE_EXPENSE:
            continue
        value = abs(daily_value(t))
        if value == 0:
            continue
        rows.append((t.name, value))
    rows.sort(key=lambda r: r[1], reverse=True)
    return rows
