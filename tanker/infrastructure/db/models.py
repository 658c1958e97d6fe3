"""
SQLAlchemy ORM models
"""
from decimal import Decimal
from datetime import date as date_type
from sqlalchemy import String, DateTime, Integer, Text, TIMESTAMP, Date, func, Numeric, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tanker.infrastructure.db.session import Base


class User(Base):
    """
    Registered user (one ledger per user)
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[DateTime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    last_seen_at: Mapped[DateTime | None] = mapped_column(
        TIMESTAMP(timezone=True), nullable=True
    )


class TransactionModel(Base):
    """
    Income/expense entry, one-time or recurring.

    amount хранится всегда >= 0, знак определяется полем type.
    date - календарный день, к которому привязана операция.
    """
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=2),
        nullable=False,
        server_default="0"
    )
    type: Mapped[str] = mapped_column(String(16), nullable=False)  # income, expense
    frequency: Mapped[str] = mapped_column(
        String(16), nullable=False, server_default="one_time"
    )  # one_time, daily, weekly, monthly, yearly
    category: Mapped[str | None] = mapped_column(String(32), nullable=True)  # consumption, waste, investment
    tag: Mapped[str | None] = mapped_column(String(64), nullable=True)
    payment_method: Mapped[str | None] = mapped_column(String(16), nullable=True)  # credit, pay, cash, bank
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    date: Mapped[date_type] = mapped_column(Date, nullable=False)

    created_at: Mapped[DateTime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[DateTime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    __table_args__ = (
        Index("ix_transactions_user_date", "user_id", "date"),
        CheckConstraint("amount >= 0", name="ck_transactions_amount_non_negative"),
    )


class UserSettingsModel(Base):
    """
    Per-user settings row (upserted, no history)
    """
    __tablename__ = "user_settings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, unique=True, index=True)

    initial_asset: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=2), nullable=False, server_default="0"
    )
    target_asset: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=2), nullable=False, server_default="1000000"
    )
    daily_budget_goal: Mapped[Decimal] = mapped_column(
        Numeric(precision=20, scale=2), nullable=False, server_default="3000"
    )
    currency_unit: Mapped[str] = mapped_column(String(16), nullable=False, server_default="円")

    updated_at: Mapped[DateTime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )
