"""Staff roster model."""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import Column, String, Boolean, DateTime, Enum, Uuid
from app.database import Base


class StaffRole(str, PyEnum):
    CLEANER = "Cleaner"
    SUPERVISOR = "Supervisor"
    DRIVER = "Driver"


class Staff(Base):
    """Staff member - cleaners, supervisors and drivers."""

    __tablename__ = "staff"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    name = Column(String(255), nullable=False)
    phone = Column(String(30), nullable=False, unique=True)
    role = Column(Enum(StaffRole), nullable=False)
    active = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Staff {self.name} ({self.role.value})>"
