"""Business logic services."""

from app.services.auth_service import AuthService
from app.services.user_service import UserService
from app.services.booking_service import BookingService
from app.services.staff_service import StaffService
from app.services.client_service import ClientService
from app.services.notification_service import EmailNotifier

__all__ = [
    "AuthService",
    "UserService",
    "BookingService",
    "StaffService",
    "ClientService",
    "EmailNotifier",
]
