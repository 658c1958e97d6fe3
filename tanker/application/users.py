"""
User use cases - регистрация и вход по email/паролю.
"""
import logging
import re
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from tanker.auth import hash_password, verify_password, get_user_by_email
from tanker.infrastructure.db.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthError(ValueError):
    """Ошибка регистрации или входа"""
    pass


class RegisterUserUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(self, email: str, password: str) -> int:
        email = (email or "").strip().lower()
        if not re.fullmatch(r"[^@\s]+@[^@\s]+\.[^@\s]+", email):
            raise AuthError("Некорректный email")

        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise AuthError(f"Пароль должен быть не короче {MIN_PASSWORD_LENGTH} символов")

        if get_user_by_email(self.db, email):
            raise AuthError("Пользователь с таким email уже существует")

        user = User(email=email, password_hash=hash_password(password))
        self.db.add(user)
        self.db.flush()
        self.db.commit()

        logger.info("User %d registered", user.id)
        return user.id


class LoginUseCase:
    def __init__(self, db: Session):
        self.db = db

    def execute(self, email: str, password: str) -> User:
        """
        Raises:
            AuthError: неверный email или пароль (одно сообщение для обоих случаев)
        """
        user = get_user_by_email(self.db, (email or "").strip().lower())

        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt for %s", email)
            raise AuthError("Неверный email или пароль")

        user.last_seen_at = datetime.now(timezone.utc)
        self.db.commit()
        return user
