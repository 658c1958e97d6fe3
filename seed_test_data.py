"""
Seed demo data for test@example.com (see create_test_user.py).
Run:  python seed_test_data.py
"""
import sys
from datetime import timedelta

from tanker.infrastructure.db.session import get_session_factory
from tanker.infrastructure.db.models import User, TransactionModel
from tanker.application.settings import UpsertUserSettingsUseCase
from tanker.application.transactions import CreateTransactionUseCase
from tanker.utils.dates import local_today

db = get_session_factory()()

user = db.query(User).filter(User.email == "test@example.com").first()
if not user:
    print("User test@example.com not found, run create_test_user.py first"); sys.exit(1)

if db.query(TransactionModel).filter(TransactionModel.user_id == user.id).count():
    print("Transactions already seeded"); sys.exit(0)

today = local_today()

UpsertUserSettingsUseCase(db).execute(
    user_id=user.id,
    initial_asset="500000",
    target_asset="1000000",
    daily_budget_goal="3000",
    currency_unit="円",
)

create = CreateTransactionUseCase(db)

# Recurring
create.execute(user.id, "給料", "250000", "income", "monthly", date=today - timedelta(days=60))
create.execute(user.id, "家賃", "80000", "expense", "monthly", category="consumption",
               tag="housing", payment_method="bank", date=today - timedelta(days=60))
create.execute(user.id, "スマホ", "3000", "expense", "monthly", category="consumption",
               tag="housing", payment_method="credit", date=today - timedelta(days=45))
create.execute(user.id, "サブスク", "12000", "expense", "yearly", category="waste",
               tag="fun", payment_method="credit", date=today - timedelta(days=40))
create.execute(user.id, "昼食", "800", "expense", "daily", category="consumption",
               tag="food", payment_method="pay", date=today - timedelta(days=35))

# One-time
create.execute(user.id, "スーパー", "4500", "expense", category="consumption", tag="food",
               payment_method="cash", date=today - timedelta(days=12))
create.execute(user.id, "飲み会", "6000", "expense", category="waste", tag="social",
               payment_method="credit", date=today - timedelta(days=8))
create.execute(user.id, "副業", "30000", "income", date=today - timedelta(days=5))
create.execute(user.id, "本", "2200", "expense", category="investment", tag="education",
               payment_method="credit", date=today - timedelta(days=2))

print(f"Seeded demo transactions for user {user.id}")
db.close()
