"""Client service - per-client rollups derived from bookings.

Clients are not stored. Every call rescans the full booking set, so cost
grows linearly with booking volume.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking
from app.services.booking_service import BookingService


@dataclass
class ClientSummary:
    key: str
    name: str
    phone: str
    email: Optional[str] = None
    area: Optional[str] = None
    total_bookings: int = 0
    lifetime_value: float = 0.0
    last_booking_at: Optional[str] = None
    last_service: Optional[str] = None
    statuses: Dict[str, int] = field(default_factory=dict)


def summarize_clients(bookings: Iterable[Booking]) -> List[ClientSummary]:
    """
    Group bookings by (phone, name) and rank groups by lifetime value.

    The same phone under two names yields two clients. The latest booking is
    found by comparing ``date`` strings, which sort correctly as YYYY-MM-DD;
    on equal dates the first one seen stays latest. Email is the first
    non-empty one seen for the group. Ties in lifetime value keep the order
    in which clients were first encountered.
    """
    groups: Dict[str, ClientSummary] = {}

    for booking in bookings:
        if not booking.client_phone:
            continue

        key = f"{booking.client_phone}::{booking.client_name}"
        summary = groups.get(key)
        if summary is None:
            summary = ClientSummary(
                key=key,
                name=booking.client_name,
                phone=booking.client_phone,
                email=booking.client_email,
                area=booking.area,
            )
            groups[key] = summary

        status = booking.status.value if hasattr(booking.status, "value") else str(booking.status)
        summary.total_bookings += 1
        summary.lifetime_value += booking.total_qar or 0
        summary.statuses[status] = summary.statuses.get(status, 0) + 1

        if summary.last_booking_at is None or booking.date > summary.last_booking_at:
            summary.last_booking_at = booking.date
            summary.last_service = booking.service
            summary.area = booking.area

        if not summary.email and booking.client_email:
            summary.email = booking.client_email

    # sorted() is stable, including with reverse=True
    return sorted(groups.values(), key=lambda s: s.lifetime_value, reverse=True)


class ClientService:
    """Service for client reporting."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_summaries(self) -> List[ClientSummary]:
        bookings = await BookingService(self.db).list_all()
        return summarize_clients(bookings)
