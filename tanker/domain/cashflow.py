"""
Cashflow normalizer - converts a transaction into its signed daily-equivalent value.

Frequencies:
  one_time - affects assets only on its own date (daily value is always 0)
  daily    - amount
  weekly   - amount / 7
  monthly  - amount / 30  (fixed divisor, not calendar days)
  yearly   - amount / 365

Expenses are negated, income stays positive.
"""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

logger = logging.getLogger(__name__)

TYPE_INCOME = "income"
TYPE_EXPENSE = "expense"
VALID_TYPES = (TYPE_INCOME, TYPE_EXPENSE)

FREQ_ONE_TIME = "one_time"
FREQ_DAILY = "daily"
FREQ_WEEKLY = "weekly"
FREQ_MONTHLY = "monthly"
FREQ_YEARLY = "yearly"
VALID_FREQUENCIES = (FREQ_ONE_TIME, FREQ_DAILY, FREQ_WEEKLY, FREQ_MONTHLY, FREQ_YEARLY)

# Days covered by one occurrence of a recurring entry
FREQUENCY_DAYS = {
    FREQ_DAILY: 1,
    FREQ_WEEKLY: 7,
    FREQ_MONTHLY: 30,
    FREQ_YEARLY: 365,
}

CATEGORY_CONSUMPTION = "consumption"
CATEGORY_WASTE = "waste"
CATEGORY_INVESTMENT = "investment"
VALID_CATEGORIES = (CATEGORY_CONSUMPTION, CATEGORY_WASTE, CATEGORY_INVESTMENT)

VALID_PAYMENT_METHODS = ("credit", "pay", "cash", "bank")

_ZERO = Decimal("0")


@dataclass(frozen=True)
class CashflowItem:
    """
    Read-side view of a stored transaction.

    ORM rows expose the same attributes, so every calculation in
    tanker.domain accepts either.
    """
    name: str
    amount: Decimal
    type: str
    frequency: str
    date: date
    tag: str | None = None
    category: str | None = None
    id: int | None = None


def is_recurring(frequency: str) -> bool:
    return frequency != FREQ_ONE_TIME


def signed_amount(amount, type_: str) -> Decimal:
    """Raw amount with the sign derived from the transaction type."""
    value = Decimal(amount)
    return -value if type_ == TYPE_EXPENSE else value


def normalize(amount, frequency: str, type_: str) -> Decimal:
    """
    Signed daily-equivalent value of a transaction.

    Unknown frequencies contribute nothing; they can only come from legacy
    rows because the write path validates the frequency.
    """
    if frequency == FREQ_ONE_TIME:
        return _ZERO

    days = FREQUENCY_DAYS.get(frequency)
    if days is None:
        logger.warning("Unknown frequency %r, treating as zero contribution", frequency)
        return _ZERO

    daily = Decimal(amount) / days
    return -daily if type_ == TYPE_EXPENSE else daily


def daily_value(item) -> Decimal:
    """normalize() applied to a transaction-like object."""
    return normalize(item.amount, item.frequency, item.type)
