"""User-related schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import EmailStr, Field

from app.models.user import UserRole
from app.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Public view of a user; the password hash is never included."""

    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    role: UserRole
    is_verified: bool
    is_active: bool
    is_suspended: bool
    is_deleted: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None


class UserBrief(CamelModel):
    """Owner of a booking, as embedded in booking responses."""

    id: UUID
    name: str
    email: str


class UserProfileUpdate(CamelModel):
    """Self-service profile update. Lifecycle flags are not accepted here."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=30)


class SuspendRequest(CamelModel):
    reason: Optional[str] = Field(None, max_length=500)
