"""Authentication request/response schemas."""

from typing import Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel
from app.schemas.user import UserResponse


class RegisterRequest(CamelModel):
    """Self-registration. ``role`` is accepted only so it can be rejected."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    phone: Optional[str] = Field(None, max_length=30)
    role: Optional[str] = None


class LoginRequest(CamelModel):
    """Email/password login request."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class EmailRequest(CamelModel):
    """Body of resend-verification and forgot-password."""

    email: EmailStr


class ResetPasswordRequest(CamelModel):
    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6, max_length=128)


class UserEnvelope(CamelModel):
    user: UserResponse


class AuthSession(CamelModel):
    """User plus a freshly issued bearer token."""

    user: UserResponse
    token: str
