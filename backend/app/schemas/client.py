"""Client summary schema."""

from typing import Dict, Optional

from app.schemas.common import CamelModel


class ClientSummaryResponse(CamelModel):
    """Per-client rollup derived from bookings."""

    key: str
    name: str
    phone: str
    email: Optional[str] = None
    area: Optional[str] = None
    total_bookings: int
    lifetime_value: float
    last_booking_at: Optional[str] = None
    last_service: Optional[str] = None
    statuses: Dict[str, int] = {}
