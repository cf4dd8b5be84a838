"""Account lifecycle rules.

A user is in exactly one ``AccountStatus`` and separately has (or has not)
verified their email. ``TRANSITIONS`` is the only place that decides which
admin action is legal from which status and where it leads; a status missing
from an action's row means the action is refused.

The is_active/is_suspended/is_deleted flags exposed to clients are derived
from the status, so they cannot be set independently. Where separate flags
would diverge the status wins: unsuspending a banned account leaves it
deleted (still reported as suspended), and approving or activating a
suspended account leaves it suspended (still reported as inactive). Login
outcomes are the same either way.
"""

from enum import Enum
from typing import Dict

from app.exceptions import (
    AccountDeletedError,
    AccountInactiveError,
    AccountSuspendedError,
    AuthorizationError,
    EmailNotVerifiedError,
)
from app.models.user import AccountStatus, User


class LifecycleAction(str, Enum):
    APPROVE = "approve"
    SUSPEND = "suspend"
    UNSUSPEND = "unsuspend"
    BAN = "ban"
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"


ACTIVE = AccountStatus.ACTIVE
INACTIVE = AccountStatus.INACTIVE
SUSPENDED = AccountStatus.SUSPENDED
DELETED = AccountStatus.DELETED

TRANSITIONS: Dict[LifecycleAction, Dict[AccountStatus, AccountStatus]] = {
    # A suspension outranks activation: approving or activating a suspended
    # account leaves it suspended until someone unsuspends it.
    LifecycleAction.APPROVE: {ACTIVE: ACTIVE, INACTIVE: ACTIVE, SUSPENDED: SUSPENDED},
    LifecycleAction.SUSPEND: {ACTIVE: SUSPENDED, INACTIVE: SUSPENDED, SUSPENDED: SUSPENDED},
    LifecycleAction.UNSUSPEND: {ACTIVE: ACTIVE, INACTIVE: ACTIVE, SUSPENDED: ACTIVE, DELETED: DELETED},
    LifecycleAction.BAN: {ACTIVE: DELETED, INACTIVE: DELETED, SUSPENDED: DELETED, DELETED: DELETED},
    LifecycleAction.ACTIVATE: {ACTIVE: ACTIVE, INACTIVE: ACTIVE, SUSPENDED: SUSPENDED},
    LifecycleAction.DEACTIVATE: {ACTIVE: INACTIVE, INACTIVE: INACTIVE, SUSPENDED: SUSPENDED, DELETED: DELETED},
}

# Actions that can never target an admin
ADMIN_PROTECTED = {
    LifecycleAction.SUSPEND: "Admin accounts cannot be suspended",
    LifecycleAction.BAN: "Admin accounts cannot be banned",
    LifecycleAction.DEACTIVATE: "Admin accounts cannot be deactivated",
}

REFUSED = {
    LifecycleAction.APPROVE: "Cannot approve a deleted account",
    LifecycleAction.SUSPEND: "Cannot suspend a deleted account",
    LifecycleAction.ACTIVATE: "Cannot activate a deleted account",
}


def apply_transition(user: User, action: LifecycleAction) -> AccountStatus:
    """Move ``user`` according to ``action`` or raise AuthorizationError."""
    if action in ADMIN_PROTECTED and user.is_admin:
        raise AuthorizationError(ADMIN_PROTECTED[action])

    target = TRANSITIONS[action].get(user.status)
    if target is None:
        raise AuthorizationError(REFUSED.get(action, f"Cannot {action.value} this account"))

    user.status = target
    if action == LifecycleAction.APPROVE:
        user.email_verified = True
    return target


def ensure_can_login(user: User) -> None:
    """
    Refuse a login with valid credentials when the account may not sign in.
    Deletion and suspension are reported before email verification.
    """
    if user.status == DELETED:
        raise AccountDeletedError()
    if user.status == SUSPENDED:
        raise AccountSuspendedError()
    if user.status == INACTIVE:
        raise AccountInactiveError()
    if not user.email_verified:
        raise EmailNotVerifiedError()
