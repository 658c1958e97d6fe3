"""
Transaction use cases - CRUD записей доходов и расходов.

Изменение - полная перезапись полей (edit-then-resubmit), удаление по id.
Все операции ограничены user_id владельца.
"""
import logging
from datetime import date

from sqlalchemy.orm import Session

from tanker.infrastructure.db.models import TransactionModel
from tanker.domain.cashflow import (
    TYPE_EXPENSE, VALID_TYPES, VALID_FREQUENCIES, VALID_CATEGORIES,
    VALID_PAYMENT_METHODS, FREQ_ONE_TIME,
)
from tanker.utils.dates import local_today
from tanker.utils.validation import validate_and_normalize_amount

logger = logging.getLogger(__name__)


class TransactionValidationError(ValueError):
    """Ошибка валидации транзакции"""
    pass


class TransactionNotFoundError(LookupError):
    pass


def _clean_fields(
    name: str,
    amount,
    type: str,
    frequency: str,
    category: str | None,
    tag: str | None,
    payment_method: str | None,
    description: str | None,
    date_: date | None,
) -> dict:
    name = (name or "").strip()
    if not name:
        raise TransactionValidationError("Название не может быть пустым")

    try:
        amount_value = validate_and_normalize_amount(amount)
    except ValueError as e:
        raise TransactionValidationError(str(e)) from e

    if type not in VALID_TYPES:
        raise TransactionValidationError(
            f"Неверный тип: {type}. Используйте income или expense"
        )

    if frequency not in VALID_FREQUENCIES:
        raise TransactionValidationError(
            f"Неверная периодичность: {frequency}. "
            f"Используйте {', '.join(VALID_FREQUENCIES)}"
        )

    # Категория имеет смысл только для расходов
    if type != TYPE_EXPENSE:
        category = None
    elif category is not None and category not in VALID_CATEGORIES:
        raise TransactionValidationError(f"Неверная категория: {category}")

    if payment_method is not None and payment_method not in VALID_PAYMENT_METHODS:
        raise TransactionValidationError(f"Неверный способ оплаты: {payment_method}")

    return {
        "name": name,
        "amount": amount_value,
        "type": type,
        "frequency": frequency,
        "category": category,
        "tag": (tag or "").strip() or None,
        "payment_method": payment_method,
        "description": (description or "").strip() or None,
        "date": date_ or local_today(),
    }


def get_transaction(db: Session, transaction_id: int, user_id: int) -> TransactionModel:
    tx = db.query(TransactionModel).filter(
        TransactionModel.id == transaction_id,
        TransactionModel.user_id == user_id,
    ).first()
    if not tx:
        raise TransactionNotFoundError(f"Транзакция #{transaction_id} не найдена")
    return tx


def list_transactions(db: Session, user_id: int) -> list[TransactionModel]:
    """Все транзакции пользователя, новые сверху"""
    return db.query(TransactionModel).filter(
        TransactionModel.user_id == user_id
    ).order_by(
        TransactionModel.date.desc(),
        TransactionModel.id.desc(),
    ).all()


class CreateTransactionUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(
        self,
        user_id: int,
        name: str,
        amount,
        type: str,
        frequency: str = FREQ_ONE_TIME,
        category: str | None = None,
        tag: str | None = None,
        payment_method: str | None = None,
        description: str | None = None,
        date: date | None = None,
    ) -> int:
        """
        Создать транзакцию

        Returns:
            id созданной записи
        """
        fields = _clean_fields(
            name, amount, type, frequency, category, tag,
            payment_method, description, date,
        )

        tx = TransactionModel(user_id=user_id, **fields)
        self.db.add(tx)
        self.db.flush()
        self.db.commit()

        logger.info(
            "Transaction %d created for user %d (%s %s, %s)",
            tx.id, user_id, tx.type, tx.amount, tx.frequency,
        )
        return tx.id


class UpdateTransactionUseCase:
    """Полная перезапись транзакции (без частичного patch)"""

    def __init__(self, db: Session):
        self.db = db

    def execute(
        self,
        transaction_id: int,
        user_id: int,
        name: str,
        amount,
        type: str,
        frequency: str = FREQ_ONE_TIME,
        category: str | None = None,
        tag: str | None = None,
        payment_method: str | None = None,
        description: str | None = None,
        date: date | None = None,
    ) -> None:
        tx = get_transaction(self.db, transaction_id, user_id)

        fields = _clean_fields(
            name, amount, type, frequency, category, tag,
            payment_method, description, date or tx.date,
        )
        for key, value in fields.items():
            setattr(tx, key, value)

        self.db.commit()
        logger.info("Transaction %d updated for user %d", transaction_id, user_id)


class DeleteTransactionUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(self, transaction_id: int, user_id: int) -> None:
        tx = get_transaction(self.db, transaction_id, user_id)
        self.db.delete(tx)
        self.db.commit()
        logger.info("Transaction %d deleted for user %d", transaction_id, user_id)
