"""
Balance sheet and progress toward the savings goal ("tank" fill level).
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from tanker.domain.cashflow import signed_amount

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


@dataclass(frozen=True)
class GoalProgress:
    current_asset: Decimal
    target_asset: Decimal
    percentage: Decimal
    fill_level: Decimal
    remaining: Decimal
    is_negative: bool


def current_asset(transactions: Iterable, initial_asset, today: date) -> Decimal:
    """initial_asset + signed amounts of every entry dated on or before today."""
    total = Decimal(initial_asset)
    for t in transactions:
        if t.date <= today:
            total += signed_amount(t.amount, t.type)
    return total


def goal_progress(current, target) -> GoalProgress:
    """
    percentage = current / target * 100 (0 when target <= 0),
    fill_level = percentage clamped to [0, 100].
    """
    current = Decimal(current)
    target = Decimal(target)

    if target > 0:
        percentage = current / target * _HUNDRED
    else:
        percentage = _ZERO

    fill_level = min(_HUNDRED, max(_ZERO, percentage))

    return GoalProgress(
        current_asset=current,
        target_asset=target,
        percentage=percentage,
        fill_level=fill_level,
        remaining=target - current,
        is_negative=current < 0,
    )
