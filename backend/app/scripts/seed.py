"""
Seed the database with admin accounts, sample users, a starter staff roster
and a handful of bookings.

Run with: python -m app.scripts.seed
Existing users and staff (matched by email or phone) are left untouched;
bookings are only added to an empty bookings table.
"""

import asyncio
import logging
from sqlalchemy import select

from app.database import AsyncSessionLocal, init_db, close_db
from app.logging_config import configure_logging
from app.models.booking import Booking, BookingStatus, Materials, PaymentMethod, PaymentStatus
from app.models.staff import Staff, StaffRole
from app.models.user import AccountStatus, User, UserRole
from app.security import hash_password

logger = logging.getLogger(__name__)

SEED_USERS = [
    # Admins
    {"name": "John Doe", "email": "john.doe@example.com", "password": "aaaaaa",
     "role": UserRole.ADMIN, "status": AccountStatus.ACTIVE, "email_verified": True},
    {"name": "Admin User", "email": "admin@maids.com", "password": "admin123",
     "role": UserRole.ADMIN, "status": AccountStatus.ACTIVE, "email_verified": True},
    # Verified
    {"name": "John Doe", "email": "john@example.com", "password": "password123",
     "phone": "+1234567890", "status": AccountStatus.ACTIVE, "email_verified": True},
    {"name": "Jane Smith", "email": "jane@example.com", "password": "password123",
     "phone": "+1234567891", "status": AccountStatus.ACTIVE, "email_verified": True},
    {"name": "Bob Johnson", "email": "bob@example.com", "password": "password123",
     "phone": "+1234567892", "status": AccountStatus.ACTIVE, "email_verified": True},
    # Pending verification
    {"name": "Alice Williams", "email": "alice@example.com", "password": "password123",
     "phone": "+1234567893", "status": AccountStatus.INACTIVE, "email_verified": False},
    {"name": "Charlie Brown", "email": "charlie@example.com", "password": "password123",
     "phone": "+1234567894", "status": AccountStatus.INACTIVE, "email_verified": False},
    {"name": "Diana Prince", "email": "diana@example.com", "password": "password123",
     "phone": "+1234567895", "status": AccountStatus.INACTIVE, "email_verified": False},
    # Suspended
    {"name": "Eve Adams", "email": "eve@example.com", "password": "password123",
     "phone": "+1234567896", "status": AccountStatus.SUSPENDED, "email_verified": True},
]

SEED_STAFF = [
    {"name": "Maria Santos", "phone": "+97450000001", "role": StaffRole.CLEANER},
    {"name": "Grace Okafor", "phone": "+97450000002", "role": StaffRole.CLEANER},
    {"name": "Rina Das", "phone": "+97450000003", "role": StaffRole.SUPERVISOR},
    {"name": "Samuel Mensah", "phone": "+97450000004", "role": StaffRole.DRIVER},
]

SEED_BOOKINGS = [
    {"service": "Standard Cleaning", "hours": 3, "cleaners": 2, "materials": Materials.WITH,
     "date": "2024-03-10", "time": "09:00", "area": "West Bay",
     "client_name": "Layla Hassan", "client_phone": "+97455551234", "client_email": "layla@example.com",
     "total_qar": 350, "status": BookingStatus.COMPLETED,
     "payment_status": PaymentStatus.PAID, "payment_method": PaymentMethod.CARD},
    {"service": "Deep Cleaning", "hours": 5, "cleaners": 3, "materials": Materials.WITH,
     "date": "2024-04-02", "time": "13:00", "area": "West Bay",
     "client_name": "Layla Hassan", "client_phone": "+97455551234",
     "total_qar": 780, "status": BookingStatus.CONFIRMED},
    {"service": "Standard Cleaning", "hours": 2, "cleaners": 1, "materials": Materials.WITHOUT,
     "date": "2024-04-05", "time": "10:30", "area": "Al Sadd",
     "client_name": "Omar Ali", "client_phone": "+97466660000",
     "total_qar": 120, "status": BookingStatus.PENDING},
]


async def seed_users(db) -> int:
    created = 0
    for data in SEED_USERS:
        result = await db.execute(select(User.id).where(User.email == data["email"]))
        if result.scalar_one_or_none():
            logger.info("User already exists: %s", data["email"])
            continue

        fields = dict(data)
        password = fields.pop("password")
        fields.setdefault("role", UserRole.USER)
        db.add(User(**fields, password_hash=hash_password(password)))
        created += 1
        logger.info("User created: %s (%s)", data["email"], data["status"].value)

    await db.commit()
    return created


async def seed_staff(db) -> int:
    created = 0
    for data in SEED_STAFF:
        result = await db.execute(select(Staff.id).where(Staff.phone == data["phone"]))
        if result.scalar_one_or_none():
            continue
        db.add(Staff(**data, active=True))
        created += 1

    await db.commit()
    logger.info("Staff created: %d", created)
    return created


async def seed_bookings(db) -> int:
    if (await db.execute(select(Booking.id).limit(1))).first():
        logger.info("Bookings already present, skipping")
        return 0

    for data in SEED_BOOKINGS:
        db.add(Booking(**data, assigned_staff_ids=[]))
    await db.commit()
    logger.info("Bookings created: %d", len(SEED_BOOKINGS))
    return len(SEED_BOOKINGS)


async def run_seed():
    """Create tables if needed, then insert any missing seed rows."""
    await init_db()
    try:
        async with AsyncSessionLocal() as db:
            users = await seed_users(db)
            staff = await seed_staff(db)
            bookings = await seed_bookings(db)
    finally:
        await close_db()
    return users, staff, bookings


# Entry point for running as standalone script
if __name__ == "__main__":
    configure_logging()
    users, staff, bookings = asyncio.run(run_seed())
    logger.info("Seeding completed: %d users, %d staff, %d bookings", users, staff, bookings)
