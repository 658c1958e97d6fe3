"""
Period aggregator - recurring income/expense totals for a view period.

One-time entries are excluded: they are not representative of a steady-state rate.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from tanker.domain.cashflow import TYPE_INCOME, TYPE_EXPENSE, daily_value, is_recurring

VIEW_DAILY = "daily"
VIEW_WEEKLY = "weekly"
VIEW_MONTHLY = "monthly"
VIEW_YEARLY = "yearly"

VIEW_MULTIPLIERS = {
    VIEW_DAILY: 1,
    VIEW_WEEKLY: 7,
    VIEW_MONTHLY: 30,
    VIEW_YEARLY: 365,
}

_ZERO = Decimal("0")


@dataclass(frozen=True)
class PeriodTotals:
    income_total: Decimal
    expense_total: Decimal
    net_balance: Decimal


def aggregate(transactions: Iterable, view_mode: str) -> PeriodTotals:
    """
    Args:
        transactions: transaction-like objects (amount, type, frequency)
        view_mode: daily / weekly / monthly / yearly

    Returns:
        PeriodTotals; income_total and expense_total are non-negative,
        net_balance = income_total - expense_total

    Raises:
        ValueError: unknown view_mode
    """
    multiplier = VIEW_MULTIPLIERS.get(view_mode)
    if multiplier is None:
        raise ValueError(f"Неверный период: {view_mode}")

    income = _ZERO
    expense = _ZERO
    for item in transactions:
        if not is_recurring(item.frequency):
            continue
        value = daily_value(item)
        if item.type == TYPE_INCOME:
            income += value
        elif item.type == TYPE_EXPENSE:
            expense += -value

    income_total = income * multiplier
    expense_total = expense * multiplier
    return PeriodTotals(
        income_total=income_total,
        expense_total=expense_total,
        net_balance=income_total - expense_total,
    )
