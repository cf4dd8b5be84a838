"""Booking-related Pydantic schemas."""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import EmailStr, Field, field_validator

from app.models.booking import BookingStatus, PaymentStatus, PaymentMethod, Materials
from app.schemas.common import CamelModel
from app.schemas.user import UserBrief

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def strip_text(value):
    return value.strip() if isinstance(value, str) else value


class BookingAddress(CamelModel):
    """Free-form address parts."""

    zone: Optional[str] = Field(None, max_length=100)
    building: Optional[str] = Field(None, max_length=100)
    street: Optional[str] = Field(None, max_length=255)

    @field_validator("zone", "building", "street", mode="before")
    @classmethod
    def strip_parts(cls, v):
        return strip_text(v)


class BookingClient(CamelModel):
    """Client contact snapshot taken when the booking is made."""

    name: str = Field(..., min_length=1, max_length=255)
    phone: str = Field(..., min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    @field_validator("name", "phone", mode="before")
    @classmethod
    def strip_contact(cls, v):
        return strip_text(v)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v


class BookingCreate(CamelModel):
    """Schema for creating a booking (public)."""

    service: str = Field(..., min_length=1, max_length=100)
    hours: int = Field(..., ge=1)
    cleaners: int = Field(..., ge=1)
    materials: Materials
    date: str = Field(..., pattern=DATE_PATTERN)
    time: str = Field(..., min_length=1, max_length=10)
    area: str = Field(..., min_length=1, max_length=100)
    address: Optional[BookingAddress] = None
    client: BookingClient
    notes: Optional[str] = None
    total_qar: float = Field(..., ge=0, alias="totalQAR")

    @field_validator("service", "area", "notes", mode="before")
    @classmethod
    def strip_details(cls, v):
        return strip_text(v)


class BookingUpdate(CamelModel):
    """Schema for editing booking details (admin).

    Status, payment and staff have their own endpoints.
    """

    service: Optional[str] = Field(None, min_length=1, max_length=100)
    hours: Optional[int] = Field(None, ge=1)
    cleaners: Optional[int] = Field(None, ge=1)
    materials: Optional[Materials] = None
    date: Optional[str] = Field(None, pattern=DATE_PATTERN)
    time: Optional[str] = Field(None, min_length=1, max_length=10)
    area: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[BookingAddress] = None
    client: Optional[BookingClient] = None
    notes: Optional[str] = None
    total_qar: Optional[float] = Field(None, ge=0, alias="totalQAR")

    @field_validator("service", "area", "notes", mode="before")
    @classmethod
    def strip_details(cls, v):
        return strip_text(v)

    # Omitting these leaves them unchanged; null would blank a required column
    @field_validator(
        "service", "hours", "cleaners", "materials", "date", "time", "area", "client", "total_qar",
        mode="before",
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v


class BookingStatusUpdate(CamelModel):
    status: BookingStatus


class PaymentUpdate(CamelModel):
    status: PaymentStatus
    method: Optional[PaymentMethod] = None
    invoice_id: Optional[str] = Field(None, max_length=100)


class StaffAssignment(CamelModel):
    staff_ids: List[str]


class BookingPayment(CamelModel):
    status: PaymentStatus
    method: Optional[PaymentMethod] = None
    invoice_id: Optional[str] = None


class BookingResponse(CamelModel):
    """Full booking response."""

    id: UUID
    service: str
    hours: int
    cleaners: int
    materials: Materials
    date: str
    time: str
    area: str
    address: BookingAddress
    client: BookingClient
    notes: Optional[str] = None
    total_qar: float = Field(..., alias="totalQAR")
    status: BookingStatus
    payment: BookingPayment
    assigned_staff_ids: List[str] = []
    user_id: Optional[UUID] = None
    user: Optional[UserBrief] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
