"""
User settings API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from tanker.api.deps import get_db, get_current_user
from tanker.application.settings import (
    get_user_settings, UpsertUserSettingsUseCase, SettingsValidationError, UserSettingsView,
)
from tanker.infrastructure.db.models import User


router = APIRouter(prefix="/api/v1/settings", tags=["settings"])


class SettingsRequest(BaseModel):
    initial_asset: str = "0"
    target_asset: str = "1000000"
    daily_budget_goal: str = "3000"
    currency_unit: str = "円"


class SettingsResponse(BaseModel):
    initial_asset: str
    target_asset: str
    daily_budget_goal: str
    currency_unit: str
    is_default: bool


def _to_response(view: UserSettingsView) -> SettingsResponse:
    return SettingsResponse(
        initial_asset=str(view.initial_asset),
        target_asset=str(view.target_asset),
        daily_budget_goal=str(view.daily_budget_goal),
        currency_unit=view.currency_unit,
        is_default=view.is_default,
    )


@router.get("/", response_model=SettingsResponse)
def read_settings(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Настройки (или значения по умолчанию, если ещё не сохранены)"""
    return _to_response(get_user_settings(db, user.id))


@router.put("/", response_model=SettingsResponse)
def save_settings(
    req: SettingsRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Сохранить настройки (upsert по user_id)"""
    try:
        view = UpsertUserSettingsUseCase(db).execute(user_id=user.id, **req.model_dump())
    except SettingsValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _to_response(view)
