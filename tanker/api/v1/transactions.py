"""
Transaction API endpoints
"""
from datetime import date as date_type, datetime
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from tanker.api.deps import get_db, get_current_user
from tanker.application.transactions import (
    CreateTransactionUseCase, UpdateTransactionUseCase, DeleteTransactionUseCase,
    TransactionValidationError, TransactionNotFoundError,
    get_transaction, list_transactions as _list_transactions,
)
from tanker.domain.cashflow import FREQ_ONE_TIME, daily_value
from tanker.infrastructure.db.models import User, TransactionModel


router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


# === Request/Response models ===

class TransactionRequest(BaseModel):
    name: str
    amount: str  # Decimal as string
    type: str  # income, expense
    frequency: str = FREQ_ONE_TIME
    category: str | None = None
    tag: str | None = None
    payment_method: str | None = None
    description: str | None = None
    date: date_type | None = None


class TransactionResponse(BaseModel):
    id: int
    name: str
    amount: str
    type: str
    frequency: str
    daily_value: str
    category: str | None = None
    tag: str | None = None
    payment_method: str | None = None
    description: str | None = None
    date: date_type
    created_at: datetime | None = None


def _to_response(tx: TransactionModel) -> TransactionResponse:
    return TransactionResponse(
        id=tx.id,
        name=tx.name,
        amount=str(tx.amount),
        type=tx.type,
        frequency=tx.frequency,
        daily_value=str(round(daily_value(tx), 2)),
        category=tx.category,
        tag=tx.tag,
        payment_method=tx.payment_method,
        description=tx.description,
        date=tx.date,
        created_at=tx.created_at,
    )


# === Endpoints ===

@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Все транзакции пользователя (новые сверху)"""
    return [_to_response(tx) for tx in _list_transactions(db, user.id)]


@router.post("/", response_model=TransactionResponse)
def create_transaction(
    req: TransactionRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Создать доход или расход"""
    try:
        transaction_id = CreateTransactionUseCase(db).execute(
            user_id=user.id, **req.model_dump()
        )
    except TransactionValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(get_transaction(db, transaction_id, user.id))


@router.get("/{transaction_id}", response_model=TransactionResponse)
def read_transaction(
    transaction_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        tx = get_transaction(db, transaction_id, user.id)
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _to_response(tx)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: int,
    req: TransactionRequest,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Перезаписать транзакцию целиком"""
    try:
        UpdateTransactionUseCase(db).execute(
            transaction_id=transaction_id, user_id=user.id, **req.model_dump()
        )
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TransactionValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(get_transaction(db, transaction_id, user.id))


@router.delete("/{transaction_id}")
def delete_transaction(
    transaction_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        DeleteTransactionUseCase(db).execute(transaction_id=transaction_id, user_id=user.id)
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {"status": "deleted"}
