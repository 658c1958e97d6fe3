"""
User settings use cases - чтение и upsert настроек пользователя.

Одна строка на пользователя; при сохранении старое значение перезаписывается.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from tanker.config import get_settings
from tanker.infrastructure.db.models import UserSettingsModel
from tanker.utils.validation import validate_and_normalize_amount

logger = logging.getLogger(__name__)


class SettingsValidationError(ValueError):
    pass


@dataclass(frozen=True)
class UserSettingsView:
    initial_asset: Decimal
    target_asset: Decimal
    daily_budget_goal: Decimal
    currency_unit: str
    is_default: bool = False


def get_user_settings(db: Session, user_id: int) -> UserSettingsView:
    """Настройки пользователя или значения по умолчанию, если строки нет"""
    row = db.query(UserSettingsModel).filter(
        UserSettingsModel.user_id == user_id
    ).first()

    if row is None:
        config = get_settings()
        return UserSettingsView(
            initial_asset=Decimal("0"),
            target_asset=config.DEFAULT_TARGET_ASSET,
            daily_budget_goal=config.DEFAULT_DAILY_BUDGET_GOAL,
            currency_unit=config.DEFAULT_CURRENCY_UNIT,
            is_default=True,
        )

    return UserSettingsView(
        initial_asset=Decimal(row.initial_asset),
        target_asset=Decimal(row.target_asset),
        daily_budget_goal=Decimal(row.daily_budget_goal),
        currency_unit=row.currency_unit,
    )


class UpsertUserSettingsUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(
        self,
        user_id: int,
        initial_asset,
        target_asset,
        daily_budget_goal,
        currency_unit: str,
    ) -> UserSettingsView:
        """
        Создать или перезаписать настройки

        initial_asset может быть отрицательным (стартовый долг),
        target_asset и daily_budget_goal - нет.
        """
        try:
            initial = validate_and_normalize_amount(initial_asset, allow_negative=True)
            target = validate_and_normalize_amount(target_asset)
            daily_goal = validate_and_normalize_amount(daily_budget_goal)
        except ValueError as e:
            raise SettingsValidationError(str(e)) from e

        currency_unit = (currency_unit or "").strip()
        if not currency_unit:
            raise SettingsValidationError("Единица валюты не может быть пустой")

        row = self.db.query(UserSettingsModel).filter(
            UserSettingsModel.user_id == user_id
        ).first()
        if row is None:
            row = UserSettingsModel(user_id=user_id)
            self.db.add(row)

        row.initial_asset = initial
        row.target_asset = target
        row.daily_budget_goal = daily_goal
        row.currency_unit = currency_unit

        self.db.commit()
        logger.info("Settings saved for user %d", user_id)

        return get_user_settings(self.db, user_id)
