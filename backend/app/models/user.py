"""User model for customers and admins."""

import uuid
from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import Column, String, Boolean, DateTime, Enum, Uuid
from app.database import Base


class UserRole(str, PyEnum):
    """User roles for access control."""
    USER = "user"
    ADMIN = "admin"


class AccountStatus(str, PyEnum):
    """Lifecycle state of an account.

    Email verification is tracked separately in ``User.email_verified``.
    Legal moves between states live in ``app.services.account_lifecycle``.
    """
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    DELETED = "deleted"        # soft delete ("ban")


class User(Base):
    """User entity - registered customers and admin staff."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Auth
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # Profile
    name = Column(String(255), nullable=False)
    phone = Column(String(30))

    # Role
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)

    # Lifecycle
    status = Column(Enum(AccountStatus), default=AccountStatus.ACTIVE, nullable=False)
    email_verified = Column(Boolean, default=False, nullable=False)

    # One-time secrets (sha256 of the emailed value)
    email_verification_token = Column(String(64), index=True)
    email_verification_expires = Column(DateTime)
    password_reset_token = Column(String(64), index=True)
    password_reset_expires = Column(DateTime)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    last_login_at = Column(DateTime)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    # Flag view of the lifecycle, kept for API clients
    @property
    def is_verified(self) -> bool:
        return bool(self.email_verified)

    @property
    def is_active(self) -> bool:
        return self.status == AccountStatus.ACTIVE

    @property
    def is_suspended(self) -> bool:
        return self.status in (AccountStatus.SUSPENDED, AccountStatus.DELETED)

    @property
    def is_deleted(self) -> bool:
        return self.status == AccountStatus.DELETED

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"
