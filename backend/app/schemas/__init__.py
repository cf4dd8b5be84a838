"""Pydantic schemas for API request/response validation."""

from app.schemas.common import ApiResponse, ErrorResponse, CamelModel
from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    EmailRequest,
    ResetPasswordRequest,
    UserEnvelope,
    AuthSession,
)
from app.schemas.user import (
    UserResponse,
    UserBrief,
    UserProfileUpdate,
    SuspendRequest,
)
from app.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingResponse,
    BookingStatusUpdate,
    PaymentUpdate,
    StaffAssignment,
)
from app.schemas.staff import (
    StaffCreate,
    StaffUpdate,
    StaffActiveUpdate,
    StaffResponse,
)
from app.schemas.client import ClientSummaryResponse

__all__ = [
    # Envelope
    "ApiResponse",
    "ErrorResponse",
    "CamelModel",
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "EmailRequest",
    "ResetPasswordRequest",
    "UserEnvelope",
    "AuthSession",
    # User
    "UserResponse",
    "UserBrief",
    "UserProfileUpdate",
    "SuspendRequest",
    # Booking
    "BookingCreate",
    "BookingUpdate",
    "BookingResponse",
    "BookingStatusUpdate",
    "PaymentUpdate",
    "StaffAssignment",
    # Staff
    "StaffCreate",
    "StaffUpdate",
    "StaffActiveUpdate",
    "StaffResponse",
    # Client
    "ClientSummaryResponse",
]
