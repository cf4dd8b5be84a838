"""User service - admin account management and self-service profile."""

import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models.user import AccountStatus, User
from app.schemas.user import UserProfileUpdate
from app.services.account_lifecycle import LifecycleAction, apply_transition
from app.services.notification_service import NotificationKind, Notifier

logger = logging.getLogger(__name__)

# Transitions the user hears about by email
NOTIFIED_ACTIONS = {
    LifecycleAction.APPROVE: NotificationKind.ACCOUNT_APPROVED,
    LifecycleAction.SUSPEND: NotificationKind.ACCOUNT_SUSPENDED,
    LifecycleAction.BAN: NotificationKind.ACCOUNT_BANNED,
}


class UserService:
    """Service for user account operations."""

    def __init__(self, db: AsyncSession, notifier: Optional[Notifier] = None):
        self.db = db
        self.notifier = notifier

    async def get_by_id(self, user_id: UUID) -> User:
        user = await self.db.get(User, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def list_users(self) -> List[User]:
        """All users, newest first."""
        result = await self.db.execute(
            select(User).order_by(User.created_at.desc())
        )
        return list(result.scalars())

    async def list_pending(self) -> List[User]:
        """Users still waiting on email verification, excluding banned ones."""
        result = await self.db.execute(
            select(User)
            .where(
                User.email_verified == False,  # noqa: E712
                User.status != AccountStatus.DELETED,
            )
            .order_by(User.created_at.desc())
        )
        return list(result.scalars())

    async def update_profile(self, user_id: UUID, data: UserProfileUpdate) -> User:
        """Update name, email or phone; lifecycle fields are not reachable here."""
        user = await self.get_by_id(user_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in update_data:
            email = update_data["email"].lower()
            if email != user.email:
                result = await self.db.execute(select(User.id).where(User.email == email))
                if result.scalar_one_or_none():
                    raise ConflictError("User with this email already exists")
            update_data["email"] = email

        for field, value in update_data.items():
            setattr(user, field, value)

        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete(self, user_id: UUID) -> None:
        """Remove the record entirely. Bookings keep their snapshot."""
        user = await self.get_by_id(user_id)
        await self.db.delete(user)
        await self.db.commit()
        logger.info("Deleted user %s", user_id)

    async def transition(
        self,
        user_id: UUID,
        action: LifecycleAction,
        reason: Optional[str] = None,
    ) -> User:
        """
        Apply an admin lifecycle action.
        The change is committed before any email goes out; a failed email
        is logged and does not undo it.
        """
        user = await self.get_by_id(user_id)
        previous = user.status
        apply_transition(user, action)
        await self.db.commit()
        await self.db.refresh(user)
        logger.info(
            "User %s %s: %s -> %s", user.id, action.value, previous.value, user.status.value
        )

        kind = NOTIFIED_ACTIONS.get(action)
        if kind and self.notifier:
            data = {"name": user.name}
            if reason:
                data["reason"] = reason
            result = await self.notifier.notify(kind, user.email, data)
            if not result.ok:
                logger.warning(
                    "%s email for user %s not delivered: %s", kind.value, user.id, result.error
                )

        return user
