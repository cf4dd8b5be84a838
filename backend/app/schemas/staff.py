"""Staff-related schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from app.models.staff import StaffRole
from app.schemas.common import CamelModel


class StaffCreate(CamelModel):
    """Add a staff member."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=30)
    role: StaffRole


class StaffUpdate(CamelModel):
    """Edit a staff member."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    role: Optional[StaffRole] = None
    active: Optional[bool] = None


class StaffActiveUpdate(CamelModel):
    active: bool


class StaffResponse(CamelModel):
    id: UUID
    name: str
    phone: str
    role: StaffRole
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
