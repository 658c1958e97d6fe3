"""
Authentication routes (register, login, logout)
"""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from tanker.api.deps import get_db, get_current_user
from tanker.application.users import RegisterUserUseCase, LoginUseCase, AuthError
from tanker.infrastructure.db.models import User


router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


# === Request/Response models ===

class CredentialsRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    email: str
    last_seen_at: datetime | None = None


# === Endpoints ===

@router.post("/register", response_model=UserResponse)
def register(
    request: Request,
    req: CredentialsRequest,
    db: Session = Depends(get_db)
):
    """Регистрация и сразу вход"""
    try:
        RegisterUserUseCase(db).execute(email=req.email, password=req.password)
        user = LoginUseCase(db).execute(email=req.email, password=req.password)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))

    request.session["user_id"] = user.id
    return UserResponse(id=user.id, email=user.email, last_seen_at=user.last_seen_at)


@router.post("/login", response_model=UserResponse)
def login(
    request: Request,
    req: CredentialsRequest,
    db: Session = Depends(get_db)
):
    """Вход по email и паролю"""
    try:
        user = LoginUseCase(db).execute(email=req.email, password=req.password)
    except AuthError as e:
        raise HTTPException(status_code=401, detail=str(e))

    request.session["user_id"] = user.id
    return UserResponse(id=user.id, email=user.email, last_seen_at=user.last_seen_at)


@router.post("/logout")
def logout(request: Request):
    """Выход из системы"""
    request.session.clear()
    return {"status": "logged_out"}


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return UserResponse(id=user.id, email=user.email, last_seen_at=user.last_seen_at)
