"""
Create a Tanker user (with default settings) for local development.
Run:  python create_test_user.py [email] [password]
"""
import argparse

from tanker.infrastructure.db.session import get_session_factory
from tanker.application.settings import get_user_settings
from tanker.application.users import AuthError, RegisterUserUseCase
from tanker.auth import get_user_by_email

parser = argparse.ArgumentParser(description="Create a Tanker user")
parser.add_argument("email", nargs="?", default="test@example.com")
parser.add_argument("password", nargs="?", default="password123")
args = parser.parse_args()

db = get_session_factory()()

existing = get_user_by_email(db, args.email.strip().lower())
if existing:
    print(f"User already exists: {existing.email} (ID: {existing.id})")
else:
    try:
        user_id = RegisterUserUseCase(db).execute(args.email, args.password)
    except AuthError as e:
        parser.error(str(e))

    settings = get_user_settings(db, user_id)
    print(f"Created user {user_id}:")
    print(f"  Email: {args.email}")
    print(f"  Password: {args.password}")
    print(f"  Target asset: {settings.target_asset}{settings.currency_unit}")

db.close()
