"""
Money formatting and rounding for API output.

Usage:
    from tanker.utils.money import format_money, round_money

    format_money(15000)          -> "15,000円"
    format_money(1200.5, "USD")  -> "1,201USD"
    round_money(Decimal("99.5")) -> Decimal("100")
"""
from decimal import Decimal, ROUND_HALF_UP


def round_money(amount) -> Decimal:
    """Round to whole currency units (half up)."""
    return Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def money_str(amount) -> str:
    """Whole-unit amount as a string for JSON responses."""
    return str(round_money(amount))


def format_money(amount, unit: str = "円") -> str:
    """
    Отформатировать сумму с разделителями тысяч и единицей валюты.
    """
    if isinstance(amount, str):
        amount = Decimal(amount)
    formatted = f"{round_money(amount):,}"
    return f"{formatted}{unit}"
