"""Booking service - handles booking-related business logic."""

import logging
from typing import Optional, List
from uuid import UUID
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError, ValidationError
from app.models.booking import Booking, BookingStatus, PaymentStatus
from app.models.user import User
from app.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingStatusUpdate,
    PaymentUpdate,
)

logger = logging.getLogger(__name__)

# Query-string value meaning "no filter"
ALL = "all"


def _flatten(data: dict) -> dict:
    """Map nested address/client input onto the booking's columns."""
    flat = dict(data)
    address = flat.pop("address", None)
    if address is not None:
        flat["address_zone"] = address.get("zone")
        flat["address_building"] = address.get("building")
        flat["address_street"] = address.get("street")
    client = flat.pop("client", None)
    if client is not None:
        flat["client_name"] = client["name"]
        flat["client_phone"] = client["phone"]
        flat["client_email"] = client.get("email")
    return flat


class BookingService:
    """Service for booking operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, booking_id: UUID) -> Booking:
        """Get booking by ID or raise NotFoundError."""
        result = await self.db.execute(
            select(Booking).where(Booking.id == booking_id)
        )
        booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    async def list_bookings(
        self,
        status: Optional[str] = None,
        payment: Optional[str] = None,
        search: Optional[str] = None,
    ) -> List[Booking]:
        """List bookings, newest first."""
        query = select(Booking)

        # Apply filters
        try:
            if status and status != ALL:
                query = query.where(Booking.status == BookingStatus(status))
            if payment and payment != ALL:
                query = query.where(Booking.payment_status == PaymentStatus(payment))
        except ValueError as e:
            raise ValidationError(f"Invalid filter: {e}")
        if search:
            pattern = f"%{search.strip()}%"
            query = query.where(
                or_(
                    Booking.client_name.ilike(pattern),
                    Booking.client_phone.ilike(pattern),
                    Booking.client_email.ilike(pattern),
                    Booking.service.ilike(pattern),
                    Booking.area.ilike(pattern),
                    Booking.payment_invoice_id.ilike(pattern),
                )
            )

        query = query.order_by(Booking.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars())

    async def list_all(self) -> List[Booking]:
        """Every booking in insertion order, for reporting."""
        result = await self.db.execute(select(Booking).order_by(Booking.created_at))
        return list(result.scalars())

    async def create(self, data: BookingCreate, user: Optional[User] = None) -> Booking:
        """Create a new booking. ``user`` is set when the booker is logged in."""
        fields = _flatten(data.model_dump())
        if "address_zone" not in fields:
            fields.update(address_zone=None, address_building=None, address_street=None)

        booking = Booking(
            **fields,
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.UNPAID,
            assigned_staff_ids=[],
            user=user,
        )
        self.db.add(booking)
        await self.db.commit()
        logger.info("Booking %s created for %s", booking.id, booking.client_phone)
        return booking

    async def update(self, booking_id: UUID, data: BookingUpdate) -> Booking:
        """Edit booking details."""
        booking = await self.get_by_id(booking_id)

        update_data = _flatten(data.model_dump(exclude_unset=True))
        for field, value in update_data.items():
            setattr(booking, field, value)

        await self.db.commit()
        return booking

    async def update_status(self, booking_id: UUID, data: BookingStatusUpdate) -> Booking:
        booking = await self.get_by_id(booking_id)
        previous = booking.status
        booking.status = data.status
        await self.db.commit()
        logger.info("Booking %s status %s -> %s", booking.id, previous.value, data.status.value)
        return booking

    async def update_payment(self, booking_id: UUID, data: PaymentUpdate) -> Booking:
        """Set payment status; method and invoice id are only changed when given."""
        booking = await self.get_by_id(booking_id)
        booking.payment_status = data.status
        if data.method:
            booking.payment_method = data.method
        if data.invoice_id:
            booking.payment_invoice_id = data.invoice_id
        await self.db.commit()
        return booking

    async def assign_staff(self, booking_id: UUID, staff_ids: List[str]) -> Booking:
        """Replace the assigned crew, keeping the given order."""
        booking = await self.get_by_id(booking_id)
        booking.assigned_staff_ids = list(staff_ids)
        await self.db.commit()
        return booking

    async def delete(self, booking_id: UUID) -> None:
        booking = await self.get_by_id(booking_id)
        await self.db.delete(booking)
        await self.db.commit()
        logger.info("Booking %s deleted", booking_id)
