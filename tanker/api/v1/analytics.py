"""
Analytics API endpoints - numbers for the charts and the tank.

All amounts are rounded to whole currency units.
"""
from datetime import date as date_type
from typing import Literal

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from tanker.api.deps import get_db, get_current_user
from tanker.application.analytics import AnalyticsService
from tanker.domain.statement import tag_label
from tanker.infrastructure.db.models import User
from tanker.utils.dates import local_today
from tanker.utils.money import money_str, format_money


router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])

ViewMode = Literal["daily", "weekly", "monthly", "yearly"]


# === Response models ===

class PeriodTotalsResponse(BaseModel):
    view_mode: str
    income_total: str
    expense_total: str
    net_balance: str


class GoalProgressResponse(BaseModel):
    current_asset: str
    current_asset_label: str
    target_asset: str
    percentage: float
    fill_level: float
    remaining: str
    is_negative: bool


class SummaryResponse(BaseModel):
    today: date_type
    currency_unit: str
    totals: PeriodTotalsResponse
    progress: GoalProgressResponse
    transaction_count: int


class TrendPointResponse(BaseModel):
    date: date_type
    value: str


class DailyBarResponse(BaseModel):
    date: date_type
    income: str
    expense: str
    balance: str
    has_one_time: bool


class TagAmount(BaseModel):
    tag: str
    label: str
    amount: str


class StatementResponse(BaseModel):
    month_start: date_type
    days_in_month: int
    income: str
    fixed_expenses: str
    running_costs: str
    discretionary: str
    total_expenses: str
    profit: str
    running_cost_by_tag: list[TagAmount]
    discretionary_by_tag: list[TagAmount]


class BreakdownItem(BaseModel):
    name: str
    daily_amount: str


def _tag_rows(by_tag: dict) -> list[TagAmount]:
    return [
        TagAmount(tag=tag, label=tag_label(tag), amount=money_str(amount))
        for tag, amount in sorted(by_tag.items(), key=lambda kv: kv[1], reverse=True)
    ]


# === Endpoints ===

@router.get("/summary", response_model=SummaryResponse)
def summary(
    view_mode: ViewMode = "monthly",
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Итоги периода + прогресс к цели"""
    today = local_today()
    data = AnalyticsService(db).summary(user.id, view_mode, today)
    totals = data["totals"]
    progress = data["progress"]
    unit = data["settings"].currency_unit

    return SummaryResponse(
        today=today,
        currency_unit=unit,
        totals=PeriodTotalsResponse(
            view_mode=view_mode,
            income_total=money_str(totals.income_total),
            expense_total=money_str(totals.expense_total),
            net_balance=money_str(totals.net_balance),
        ),
        progress=GoalProgressResponse(
            current_asset=money_str(progress.current_asset),
            current_asset_label=format_money(progress.current_asset, unit),
            target_asset=money_str(progress.target_asset),
            percentage=round(float(progress.percentage), 2),
            fill_level=round(float(progress.fill_level), 2),
            remaining=money_str(progress.remaining),
            is_negative=progress.is_negative,
        ),
        transaction_count=data["transaction_count"],
    )


@router.get("/trend", response_model=list[TrendPointResponse])
def asset_trend(
    days: int | None = Query(default=None, ge=1, le=366),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Накопленный капитал по дням (линейный график)"""
    points = AnalyticsService(db).asset_trend(user.id, local_today(), days)
    return [TrendPointResponse(date=p.date, value=money_str(p.value)) for p in points]


@router.get("/daily", response_model=list[DailyBarResponse])
def daily_bars(
    days: int | None = Query(default=None, ge=1, le=366),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Доходы/расходы по дням (столбчатый график)"""
    bars = AnalyticsService(db).daily_bars(user.id, local_today(), days)
    return [
        DailyBarResponse(
            date=b.date,
            income=money_str(b.income),
            expense=money_str(b.expense),
            balance=money_str(b.balance),
            has_one_time=b.has_one_time,
        )
        for b in bars
    ]


@router.get("/statement", response_model=StatementResponse)
def statement(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Отчёт о прибылях и убытках за текущий месяц"""
    pl = AnalyticsService(db).statement(user.id, local_today())
    return StatementResponse(
        month_start=pl.month_start,
        days_in_month=pl.days_in_month,
        income=money_str(pl.income),
        fixed_expenses=money_str(pl.fixed_expenses),
        running_costs=money_str(pl.running_costs),
        discretionary=money_str(pl.discretionary),
        total_expenses=money_str(pl.total_expenses),
        profit=money_str(pl.profit),
        running_cost_by_tag=_tag_rows(pl.running_cost_by_tag),
        discretionary_by_tag=_tag_rows(pl.discretionary_by_tag),
    )


@router.get("/breakdown", response_model=list[BreakdownItem])
def breakdown(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Структура расходов в день (круговая диаграмма)"""
    rows = AnalyticsService(db).breakdown(user.id)
    return [BreakdownItem(name=name, daily_amount=money_str(value)) for name, value in rows]
