import asyncio
import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Settings are cached on first import, so the environment goes in first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["SMTP_HOST"] = ""
os.environ["FRONTEND_URL"] = "http://testserver-frontend"

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401
from app.database import AsyncSessionLocal, Base, engine
from app.main import app
from app.models.booking import Booking
from app.models.staff import Staff, StaffRole
from app.models.user import AccountStatus, User, UserRole
from app.security import create_access_token, hash_password
from app.services.notification_service import NotificationResult, get_notifier

DEFAULT_PASSWORD = "password123"


class FakeNotifier:
    """Records every notification; set ``fail`` to simulate a dead mail relay."""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def notify(self, kind, recipient, template_data):
        self.sent.append((kind, recipient, dict(template_data)))
        if self.fail:
            return NotificationResult(ok=False, error="SMTP connection refused")
        return NotificationResult(ok=True)

    def last(self, kind=None):
        matches = [n for n in self.sent if kind is None or n[0] == kind]
        return matches[-1] if matches else None


async def _reset_schema() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(scope="session", autouse=True)
def test_database():
    db_path = Path("test.db")
    if db_path.exists():
        db_path.unlink()
    yield
    asyncio.run(engine.dispose())
    if db_path.exists():
        db_path.unlink()


@pytest.fixture(autouse=True)
def reset_db():
    asyncio.run(_reset_schema())
    yield


@pytest.fixture()
def notifier():
    return FakeNotifier()


@pytest.fixture()
def client(notifier):
    app.dependency_overrides[get_notifier] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Seeding helpers
# =============================================================================

def create_user(
    email: str = "user@example.com",
    *,
    name: str = "Test User",
    password: str = DEFAULT_PASSWORD,
    role: UserRole = UserRole.USER,
    status: AccountStatus = AccountStatus.ACTIVE,
    email_verified: bool = True,
    phone: str = None,
) -> User:
    async def _create():
        async with AsyncSessionLocal() as db:
            user = User(
                name=name,
                email=email.lower(),
                password_hash=hash_password(password),
                role=role,
                status=status,
                email_verified=email_verified,
                phone=phone,
            )
            db.add(user)
            await db.commit()
            return user

    return asyncio.run(_create())


def fetch_user(user_id) -> User:
    async def _fetch():
        async with AsyncSessionLocal() as db:
            return await db.get(User, user_id)

    return asyncio.run(_fetch())


def create_staff(name: str, phone: str, role: StaffRole = StaffRole.CLEANER, active: bool = True) -> Staff:
    async def _create():
        async with AsyncSessionLocal() as db:
            staff = Staff(name=name, phone=phone, role=role, active=active)
            db.add(staff)
            await db.commit()
            return staff

    return asyncio.run(_create())


def count_bookings() -> int:
    async def _count():
        from sqlalchemy import func, select

        async with AsyncSessionLocal() as db:
            return (await db.execute(select(func.count(Booking.id)))).scalar_one()

    return asyncio.run(_count())


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


def booking_payload(**overrides) -> dict:
    payload = {
        "service": "Standard Cleaning",
        "hours": 3,
        "cleaners": 2,
        "materials": "with",
        "date": "2024-03-10",
        "time": "09:00",
        "area": "West Bay",
        "address": {"zone": "61", "building": "12", "street": "Al Corniche St"},
        "client": {"name": "Layla Hassan", "phone": "+97455551234", "email": "Layla@Example.com"},
        "notes": "Please bring a ladder",
        "totalQAR": 350,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def admin():
    return create_user(
        "admin@maids.com",
        name="Admin User",
        role=UserRole.ADMIN,
    )


@pytest.fixture()
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture()
def user():
    return create_user("jane@example.com", name="Jane Smith", phone="+1234567891")


@pytest.fixture()
def user_headers(user):
    return auth_headers(user)
