"""SQLAlchemy models."""

from app.models.user import User, UserRole, AccountStatus
from app.models.booking import Booking, BookingStatus, PaymentStatus, PaymentMethod, Materials
from app.models.staff import Staff, StaffRole

__all__ = [
    "User",
    "UserRole",
    "AccountStatus",
    "Booking",
    "BookingStatus",
    "PaymentStatus",
    "PaymentMethod",
    "Materials",
    "Staff",
    "StaffRole",
]
