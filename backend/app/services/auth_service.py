"""Auth service - registration, login and the one-time-secret flows."""

import logging
from datetime import datetime, timedelta
from typing import Optional, Tuple
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.exceptions import (
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    InvalidCredentialsError,
    InvalidOrExpiredTokenError,
    NotFoundError,
    ValidationError,
)
from app.models.user import AccountStatus, User, UserRole
from app.schemas.auth import RegisterRequest
from app.security import (
    create_access_token,
    generate_one_time_secret,
    hash_one_time_secret,
    hash_password,
    verify_password,
)
from app.services.account_lifecycle import ensure_can_login
from app.services.notification_service import NotificationKind, Notifier

settings = get_settings()
logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncSession, notifier: Notifier):
        self.db = db
        self.notifier = notifier

    async def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup; emails are stored lower-case."""
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def register(self, data: RegisterRequest) -> User:
        """Create an unverified user and email a verification link."""
        if data.role and data.role.strip().lower() == UserRole.ADMIN.value:
            raise AuthorizationError("Admin accounts cannot be created through registration")

        if await self.get_by_email(data.email):
            raise ConflictError("User with this email already exists")

        secret = generate_one_time_secret(
            timedelta(hours=settings.EMAIL_VERIFICATION_EXPIRE_HOURS)
        )
        user = User(
            name=data.name.strip(),
            email=data.email.lower(),
            password_hash=hash_password(data.password),
            phone=data.phone or None,
            role=UserRole.USER,
            status=AccountStatus.ACTIVE,
            email_verified=False,
            email_verification_token=secret.hashed,
            email_verification_expires=secret.expires_at,
        )
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info("Registered user %s", user.id)

        result = await self.notifier.notify(
            NotificationKind.VERIFY_EMAIL,
            user.email,
            {"name": user.name, "token": secret.plaintext},
        )
        if not result.ok:
            # The account exists; the user can ask for a new link
            logger.warning("Verification email for %s not delivered: %s", user.id, result.error)

        return user

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """Check credentials and account state, then issue a bearer token."""
        user = await self.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()

        ensure_can_login(user)

        user.last_login_at = datetime.utcnow()
        await self.db.commit()
        await self.db.refresh(user)

        return user, create_access_token(str(user.id))

    async def verify_email(self, token: str) -> User:
        hashed = hash_one_time_secret(token)
        result = await self.db.execute(
            select(User).where(
                User.email_verification_token == hashed,
                User.email_verification_expires > datetime.utcnow(),
            )
        )
        user = result.scalar_one_or_none()
        if not user:
            raise InvalidOrExpiredTokenError("Invalid or expired verification token")

        user.email_verified = True
        user.email_verification_token = None
        user.email_verification_expires = None
        await self.db.commit()
        await self.db.refresh(user)
        logger.info("Email verified for user %s", user.id)
        return user

    async def resend_verification(self, email: str) -> None:
        user = await self.get_by_email(email)
        if not user:
            raise NotFoundError("User not found")
        if user.email_verified:
            raise ValidationError("Email is already verified")

        secret = generate_one_time_secret(
            timedelta(hours=settings.EMAIL_VERIFICATION_EXPIRE_HOURS)
        )
        user.email_verification_token = secret.hashed
        user.email_verification_expires = secret.expires_at
        await self.db.commit()

        result = await self.notifier.notify(
            NotificationKind.VERIFY_EMAIL,
            user.email,
            {"name": user.name, "token": secret.plaintext},
        )
        if not result.ok:
            raise ExternalServiceError("Failed to send verification email")

    async def forgot_password(self, email: str) -> None:
        """
        Issue and email a reset secret if the account exists.
        Returns normally whether or not it does; only a failed send raises.
        """
        user = await self.get_by_email(email)
        if not user:
            logger.info("Password reset requested for unknown email")
            return

        secret = generate_one_time_secret(
            timedelta(minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES)
        )
        user.password_reset_token = secret.hashed
        user.password_reset_expires = secret.expires_at
        await self.db.commit()

        result = await self.notifier.notify(
            NotificationKind.PASSWORD_RESET,
            user.email,
            {"name": user.name, "token": secret.plaintext},
        )
        if not result.ok:
            user.password_reset_token = None
            user.password_reset_expires = None
            await self.db.commit()
            raise ExternalServiceError("Failed to send password reset email")

    async def reset_password(self, token: str, new_password: str) -> Tuple[User, str]:
        """Set a new password from a reset secret and log the user in."""
        hashed = hash_one_time_secret(token)
        result = await self.db.execute(
            select(User).where(
                User.password_reset_token == hashed,
                User.password_reset_expires > datetime.utcnow(),
            )
        )
        user = result.scalar_one_or_none()
        if not user:
            raise InvalidOrExpiredTokenError("Invalid or expired reset token")

        user.password_hash = hash_password(new_password)
        user.password_reset_token = None
        user.password_reset_expires = None
        await self.db.commit()
        await self.db.refresh(user)
        logger.info("Password reset for user %s", user.id)

        return user, create_access_token(str(user.id))
