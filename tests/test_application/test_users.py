"""Tests for registration and login use cases"""
import pytest

from tanker.infrastructure.db.models import User
from tanker.application.users import RegisterUserUseCase, LoginUseCase, AuthError
from tanker.auth import verify_password


def test_register_hashes_password(db_session):
    user_id = RegisterUserUseCase(db_session).execute("Owner@Example.com", "secret123")
    user = db_session.get(User, user_id)
    assert user.email == "owner@example.com"
    assert user.password_hash != "secret123"
    assert verify_password("secret123", user.password_hash)


def test_register_duplicate_email(db_session):
    RegisterUserUseCase(db_session).execute("owner@example.com", "secret123")
    with pytest.raises(AuthError, match="уже существует"):
        RegisterUserUseCase(db_session).execute("OWNER@example.com", "another1")


@pytest.mark.parametrize("email, password", [
    ("not-an-email", "secret123"),
    ("owner@example.com", "123"),
])
def test_register_validation(db_session, email, password):
    with pytest.raises(AuthError):
        RegisterUserUseCase(db_session).execute(email, password)


def test_login_sets_last_seen(db_session):
    RegisterUserUseCase(db_session).execute("owner@example.com", "secret123")
    user = LoginUseCase(db_session).execute("owner@example.com", "secret123")
    assert user.last_seen_at is not None


@pytest.mark.parametrize("email, password", [
    ("owner@example.com", "wrong-password"),
    ("nobody@example.com", "secret123"),
])
def test_login_rejects_bad_credentials(db_session, email, password):
    RegisterUserUseCase(db_session).execute("owner@example.com", "secret123")
    with pytest.raises(AuthError, match="Неверный email или пароль"):
        LoginUseCase(db_session).execute(email, password)
