"""
Analytics read layer.

Pure read: loads the user's transactions and settings once, then hands the
in-memory list to the calculation functions in tanker.domain.
Nothing is cached; every call recomputes from scratch.
"""
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from tanker.application.settings import get_user_settings, UserSettingsView
from tanker.config import get_settings
from tanker.domain.aggregation import aggregate, PeriodTotals
from tanker.domain.balance import current_asset, goal_progress, GoalProgress
from tanker.domain.cashflow import CashflowItem
from tanker.domain.statement import profit_and_loss, expense_breakdown, ProfitLoss
from tanker.domain.trend import build_asset_trend, build_daily_bars, TrendPoint, DailyBar
from tanker.infrastructure.db.models import TransactionModel


def to_item(row: TransactionModel) -> CashflowItem:
    return CashflowItem(
        id=row.id,
        name=row.name,
        amount=row.amount,
        type=row.type,
        frequency=row.frequency,
        date=row.date,
        tag=row.tag,
        category=row.category,
    )


class AnalyticsService:
    def __init__(self, db: Session):
        self.db = db

    def load_items(self, user_id: int) -> list[CashflowItem]:
        rows = self.db.query(TransactionModel).filter(
            TransactionModel.user_id == user_id
        ).all()
        return [to_item(r) for r in rows]

    def summary(self, user_id: int, view_mode: str, today: date) -> dict:
        """
        Returns:
            totals:   PeriodTotals for view_mode (recurring entries only)
            progress: GoalProgress (current asset vs target)
            settings: UserSettingsView
        """
        items = self.load_items(user_id)
        settings = get_user_settings(self.db, user_id)

        totals: PeriodTotals = aggregate(items, view_mode)
        current = current_asset(items, settings.initial_asset, today)
        progress: GoalProgress = goal_progress(current, settings.target_asset)

        return {
            "totals": totals,
            "progress": progress,
            "settings": settings,
            "transaction_count": len(items),
        }

    def asset_trend(self, user_id: int, today: date, days: int | None = None) -> list[TrendPoint]:
        items = self.load_items(user_id)
        settings: UserSettingsView = get_user_settings(self.db, user_id)
        return build_asset_trend(
            items,
            settings.initial_asset,
            today,
            days or get_settings().TREND_WINDOW_DAYS,
        )

    def daily_bars(self, user_id: int, today: date, days: int | None = None) -> list[DailyBar]:
        items = self.load_items(user_id)
        return build_daily_bars(items, today, days or get_settings().TREND_WINDOW_DAYS)

    def statement(self, user_id: int, today: date) -> ProfitLoss:
        return profit_and_loss(self.load_items(user_id), today)

    def breakdown(self, user_id: int) -> list[tuple[str, Decimal]]:
        return expense_breakdown(self.load_items(user_id))
