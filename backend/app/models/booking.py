"""Booking model - the core entity of the system."""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import Column, String, Integer, Float, DateTime, ForeignKey, Text, Index, Enum, JSON, Uuid
from sqlalchemy.orm import relationship
from app.database import Base


class BookingStatus(str, PyEnum):
    """Booking status enumeration."""
    PENDING = "pending"          # Created, awaiting confirmation
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"  # Crew on site
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, PyEnum):
    UNPAID = "unpaid"
    PAID = "paid"
    REFUNDED = "refunded"


class PaymentMethod(str, PyEnum):
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"


class Materials(str, PyEnum):
    """Whether the crew brings cleaning materials."""
    WITH = "with"
    WITHOUT = "without"


class Booking(Base):
    """Booking entity - a scheduled home-cleaning visit."""

    __tablename__ = "bookings"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # Set only when the booker was logged in
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"))

    # Service details
    service = Column(String(100), nullable=False)
    hours = Column(Integer, nullable=False)
    cleaners = Column(Integer, nullable=False)
    materials = Column(Enum(Materials), nullable=False)

    # Scheduling
    date = Column(String(10), nullable=False)  # YYYY-MM-DD
    time = Column(String(10), nullable=False)  # HH:mm
    area = Column(String(100), nullable=False)

    # Address parts
    address_zone = Column(String(100))
    address_building = Column(String(100))
    address_street = Column(String(255))

    # Client snapshot, captured at booking time
    client_name = Column(String(255), nullable=False)
    client_phone = Column(String(30), nullable=False)
    client_email = Column(String(255))

    notes = Column(Text)
    total_qar = Column(Float, nullable=False)
    status = Column(Enum(BookingStatus), default=BookingStatus.PENDING, nullable=False)

    # Payment
    payment_status = Column(Enum(PaymentStatus), default=PaymentStatus.UNPAID, nullable=False)
    payment_method = Column(Enum(PaymentMethod))
    payment_invoice_id = Column(String(100))

    # Staff ids in assignment order
    assigned_staff_ids = Column(JSON, default=list, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    user = relationship("User", lazy="selectin")

    __table_args__ = (
        Index("ix_bookings_status_created", "status", "created_at"),
        Index("ix_bookings_client_phone", "client_phone"),
        Index("ix_bookings_date", "date"),
    )

    # Nested views used by the response schemas

    @property
    def client(self) -> dict:
        return {"name": self.client_name, "phone": self.client_phone, "email": self.client_email}

    @property
    def address(self) -> dict:
        return {
            "zone": self.address_zone,
            "building": self.address_building,
            "street": self.address_street,
        }

    @property
    def payment(self) -> dict:
        return {
            "status": self.payment_status,
            "method": self.payment_method,
            "invoice_id": self.payment_invoice_id,
        }

    def __repr__(self):
        return f"<Booking {self.id} {self.date} {self.client_name}>"
