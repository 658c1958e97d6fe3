"""
Trend builders for the trailing window (30 days by default).

build_asset_trend:
  1. Transactions dated before the first window day seed the running total
     (initial_asset + signed raw amounts).
  2. Every window day adds the daily fixed cost (sum of daily values of
     all recurring transactions), then the one-time entries of that day.
  3. One point per day, ascending, the last one is `today`.

build_daily_bars:
  Raw (non-amortized) income/expense per window day, for bar charts.
  A day with at least one one_time entry is flagged.
"""
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable

from tanker.domain.cashflow import (
    TYPE_INCOME, daily_value, is_recurring, signed_amount,
)

DEFAULT_WINDOW_DAYS = 30

_ZERO = Decimal("0")


@dataclass(frozen=True)
class TrendPoint:
    date: date
    value: Decimal


@dataclass(frozen=True)
class DailyBar:
    date: date
    income: Decimal
    expense: Decimal
    has_one_time: bool

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


def window_days(today: date, days: int = DEFAULT_WINDOW_DAYS) -> list[date]:
    """Calendar days of the trailing window, ascending, ending on today."""
    if days < 1:
        raise ValueError("Окно должно содержать хотя бы один день")
    start = today - timedelta(days=days - 1)
    return [start + timedelta(days=i) for i in range(days)]


def daily_fixed_cost(transactions: Iterable) -> Decimal:
    """Net daily drain (negative) or gain (positive) of recurring entries."""
    return sum((daily_value(t) for t in transactions if is_recurring(t.frequency)), _ZERO)


def build_asset_trend(
    transactions: Iterable,
    initial_asset,
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[TrendPoint]:
    transactions = list(transactions)
    calendar = window_days(today, days)
    first_day = calendar[0]

    running = Decimal(initial_asset)
    for t in transactions:
        if t.date < first_day:
            running += signed_amount(t.amount, t.type)

    fixed = daily_fixed_cost(transactions)

    one_time_by_day: dict[date, Decimal] = defaultdict(lambda: _ZERO)
    for t in transactions:
        if is_recurring(t.frequency):
            continue
        if first_day <= t.date <= today:
            one_time_by_day[t.date] += signed_amount(t.amount, t.type)

    points = []
    for day in calendar:
        running += fixed
        running += one_time_by_day.get(day, _ZERO)
        points.append(TrendPoint(date=day, value=running))
    return points


def build_daily_bars(
    transactions: Iterable,
    today: date,
    days: int = DEFAULT_WINDOW_DAYS,
) -> list[DailyBar]:
    calendar = window_days(today, days)
    first_day = calendar[0]

    income: dict[date, Decimal] = defaultdict(lambda: _ZERO)
    expense: dict[date, Decimal] = defaultdict(lambda: _ZERO)
    flagged: set[date] = set()

    for t in transactions:
        if not (first_day <= t.date <= today):
            continue
        if t.type == TYPE_INCOME:
            income[t.date] += Decimal(t.amount)
        else:
            expense[t.date] += Decimal(t.amount)
        if not is_recurring(t.frequency):
            flagged.add(t.date)

    return [
        DailyBar(
            date=day,
            income=income.get(day, _ZERO),
            expense=expense.get(day, _ZERO),
            has_one_time=day in flagged,
        )
        for day in calendar
    ]
