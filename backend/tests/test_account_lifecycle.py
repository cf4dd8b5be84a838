import pytest

from app.exceptions import (
    AccountDeletedError,
    AccountInactiveError,
    AccountSuspendedError,
    AuthorizationError,
    EmailNotVerifiedError,
)
from app.models.user import AccountStatus, User, UserRole
from app.services.account_lifecycle import (
    TRANSITIONS,
    LifecycleAction,
    apply_transition,
    ensure_can_login,
)

ACTIVE = AccountStatus.ACTIVE
INACTIVE = AccountStatus.INACTIVE
SUSPENDED = AccountStatus.SUSPENDED
DELETED = AccountStatus.DELETED


def _user(status=ACTIVE, verified=True, role=UserRole.USER) -> User:
    return User(
        name="Test",
        email="t@example.com",
        password_hash="x",
        role=role,
        status=status,
        email_verified=verified,
    )


@pytest.mark.parametrize("action,start,end", [
    (LifecycleAction.APPROVE, INACTIVE, ACTIVE),
    (LifecycleAction.APPROVE, SUSPENDED, SUSPENDED),
    (LifecycleAction.SUSPEND, ACTIVE, SUSPENDED),
    (LifecycleAction.SUSPEND, INACTIVE, SUSPENDED),
    (LifecycleAction.UNSUSPEND, SUSPENDED, ACTIVE),
    (LifecycleAction.UNSUSPEND, DELETED, DELETED),
    (LifecycleAction.BAN, ACTIVE, DELETED),
    (LifecycleAction.BAN, SUSPENDED, DELETED),
    (LifecycleAction.ACTIVATE, INACTIVE, ACTIVE),
    (LifecycleAction.ACTIVATE, SUSPENDED, SUSPENDED),
    (LifecycleAction.DEACTIVATE, ACTIVE, INACTIVE),
    (LifecycleAction.DEACTIVATE, SUSPENDED, SUSPENDED),
    (LifecycleAction.DEACTIVATE, DELETED, DELETED),
])
def test_transition_table(action, start, end):
    user = _user(status=start)

    assert apply_transition(user, action) == end
    assert user.status == end


@pytest.mark.parametrize("action", [
    LifecycleAction.APPROVE,
    LifecycleAction.SUSPEND,
    LifecycleAction.ACTIVATE,
])
def test_refused_from_deleted(action):
    user = _user(status=DELETED)

    with pytest.raises(AuthorizationError):
        apply_transition(user, action)
    assert user.status == DELETED


@pytest.mark.parametrize("action", [
    LifecycleAction.SUSPEND,
    LifecycleAction.BAN,
    LifecycleAction.DEACTIVATE,
])
def test_admin_cannot_be_targeted(action):
    admin = _user(role=UserRole.ADMIN)

    with pytest.raises(AuthorizationError):
        apply_transition(admin, action)
    assert admin.status == ACTIVE


def test_approve_sets_verified_bit():
    user = _user(status=INACTIVE, verified=False)

    apply_transition(user, LifecycleAction.APPROVE)

    assert user.email_verified is True
    assert user.is_verified and user.is_active


def test_every_action_has_a_row():
    assert set(TRANSITIONS) == set(LifecycleAction)


def test_flag_view_of_statuses():
    banned = _user(status=DELETED)
    assert banned.is_deleted and banned.is_suspended and not banned.is_active

    suspended = _user(status=SUSPENDED)
    assert suspended.is_suspended and not suspended.is_deleted


@pytest.mark.parametrize("status,verified,error", [
    (DELETED, False, AccountDeletedError),
    (SUSPENDED, False, AccountSuspendedError),
    (INACTIVE, False, AccountInactiveError),
    (ACTIVE, False, EmailNotVerifiedError),
])
def test_login_checks_order(status, verified, error):
    with pytest.raises(error):
        ensure_can_login(_user(status=status, verified=verified))


def test_login_allowed_when_active_and_verified():
    ensure_can_login(_user())


@pytest.mark.parametrize("action,start", [
    (LifecycleAction.UNSUSPEND, DELETED),
    (LifecycleAction.APPROVE, SUSPENDED),
    (LifecycleAction.ACTIVATE, SUSPENDED),
])
def test_status_outranks_requested_flag(action, start):
    user = _user(status=start, verified=False)

    apply_transition(user, action)

    assert user.is_suspended and not user.is_active
    with pytest.raises((AccountDeletedError, AccountSuspendedError)):
        ensure_can_login(user)
