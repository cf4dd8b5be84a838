import uuid

import pytest

from app.models.user import AccountStatus, UserRole
from app.services.notification_service import NotificationKind
from conftest import auth_headers, create_user, fetch_user

API = "/api/v1/users"


# =============================================================================
# Self-service
# =============================================================================

def test_get_my_profile(client, user, user_headers):
    response = client.get(f"{API}/me", headers=user_headers)

    assert response.status_code == 200
    assert response.json()["data"]["id"] == str(user.id)
    assert response.json()["data"]["phone"] == "+1234567891"


def test_update_my_profile_ignores_lifecycle_fields(client, user, user_headers):
    response = client.patch(
        f"{API}/me",
        headers=user_headers,
        json={"name": "Jane S.", "phone": "+97455550000", "isVerified": False, "role": "admin"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Jane S."
    assert data["phone"] == "+97455550000"
    assert data["isVerified"] is True
    assert data["role"] == "user"


def test_update_my_email_must_be_unique(client, user_headers):
    create_user("bob@example.com")

    taken = client.patch(f"{API}/me", headers=user_headers, json={"email": "BOB@example.com"})
    assert taken.status_code == 400

    free = client.patch(f"{API}/me", headers=user_headers, json={"email": "Jane.New@Example.com"})
    assert free.status_code == 200
    assert free.json()["data"]["email"] == "jane.new@example.com"


# =============================================================================
# Admin listing
# =============================================================================

def test_list_users(client, admin, admin_headers, user):
    response = client.get(API, headers=admin_headers)

    assert response.status_code == 200
    emails = {u["email"] for u in response.json()["data"]}
    assert emails == {"admin@maids.com", "jane@example.com"}


def test_list_pending_excludes_verified_and_banned(client, admin_headers):
    create_user("verified@example.com", email_verified=True)
    create_user("pending@example.com", email_verified=False, status=AccountStatus.INACTIVE)
    create_user("fresh@example.com", email_verified=False)
    create_user("banned@example.com", email_verified=False, status=AccountStatus.DELETED)

    response = client.get(f"{API}/pending", headers=admin_headers)

    assert response.status_code == 200
    emails = {u["email"] for u in response.json()["data"]}
    assert emails == {"pending@example.com", "fresh@example.com"}


def test_get_user_by_id(client, admin_headers, user):
    response = client.get(f"{API}/{user.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["email"] == "jane@example.com"


def test_get_missing_user(client, admin_headers):
    assert client.get(f"{API}/{uuid.uuid4()}", headers=admin_headers).status_code == 404
    assert client.get(f"{API}/not-a-uuid", headers=admin_headers).status_code == 400


def test_delete_user(client, admin_headers, user):
    response = client.delete(f"{API}/{user.id}", headers=admin_headers)

    assert response.status_code == 204
    assert fetch_user(user.id) is None
    assert client.get(f"{API}/{user.id}", headers=admin_headers).status_code == 404


# =============================================================================
# Lifecycle transitions
# =============================================================================

def test_approve_verifies_and_activates(client, admin_headers, notifier):
    pending = create_user("alice@example.com", name="Alice", email_verified=False, status=AccountStatus.INACTIVE)

    response = client.patch(f"{API}/{pending.id}/approve", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["isVerified"] is True
    assert data["isActive"] is True
    assert notifier.last() == (NotificationKind.ACCOUNT_APPROVED, "alice@example.com", {"name": "Alice"})


def test_approve_keeps_suspension(client, admin_headers):
    eve = create_user("eve@example.com", email_verified=False, status=AccountStatus.SUSPENDED)

    response = client.patch(f"{API}/{eve.id}/approve", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["isVerified"] is True
    assert response.json()["data"]["isSuspended"] is True
    assert response.json()["data"]["isActive"] is False


def test_suspend_and_unsuspend(client, admin_headers, notifier, user):
    suspended = client.patch(f"{API}/{user.id}/suspend", headers=admin_headers, json={"reason": "Unpaid invoices"})

    assert suspended.status_code == 200
    assert suspended.json()["data"]["isSuspended"] is True
    assert suspended.json()["data"]["isActive"] is False
    kind, _, data = notifier.last()
    assert kind == NotificationKind.ACCOUNT_SUSPENDED
    assert data["reason"] == "Unpaid invoices"

    restored = client.patch(f"{API}/{user.id}/unsuspend", headers=admin_headers)
    assert restored.status_code == 200
    assert restored.json()["data"]["isSuspended"] is False
    assert restored.json()["data"]["isActive"] is True


def test_suspend_without_body(client, admin_headers, notifier, user):
    response = client.patch(f"{API}/{user.id}/suspend", headers=admin_headers)

    assert response.status_code == 200
    assert "reason" not in notifier.last()[2]


def test_ban_soft_deletes(client, admin_headers, notifier, user):
    response = client.patch(f"{API}/{user.id}/ban", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["isDeleted"] is True
    assert data["isSuspended"] is True
    assert data["isActive"] is False
    assert notifier.last()[0] == NotificationKind.ACCOUNT_BANNED
    assert fetch_user(user.id).status == AccountStatus.DELETED


@pytest.mark.parametrize("action", ["approve", "suspend", "activate"])
def test_actions_refused_on_banned_account(client, admin_headers, action):
    banned = create_user("gone@example.com", status=AccountStatus.DELETED)

    response = client.patch(f"{API}/{banned.id}/{action}", headers=admin_headers)

    assert response.status_code == 403
    assert fetch_user(banned.id).status == AccountStatus.DELETED


def test_unsuspend_on_banned_account_keeps_it_banned(client, admin_headers):
    banned = create_user("gone@example.com", status=AccountStatus.DELETED)

    response = client.patch(f"{API}/{banned.id}/unsuspend", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["isDeleted"] is True


def test_activate_and_deactivate(client, admin_headers, user):
    off = client.patch(f"{API}/{user.id}/deactivate", headers=admin_headers)
    assert off.status_code == 200
    assert off.json()["data"]["isActive"] is False

    on = client.patch(f"{API}/{user.id}/activate", headers=admin_headers)
    assert on.status_code == 200
    assert on.json()["data"]["isActive"] is True


@pytest.mark.parametrize("action", ["suspend", "ban", "deactivate"])
def test_admin_accounts_are_protected(client, admin_headers, notifier, action):
    other_admin = create_user("ops@maids.com", role=UserRole.ADMIN)

    response = client.patch(f"{API}/{other_admin.id}/{action}", headers=admin_headers)

    assert response.status_code == 403
    assert fetch_user(other_admin.id).status == AccountStatus.ACTIVE
    assert notifier.sent == []


def test_transition_survives_email_failure(client, admin_headers, notifier, user):
    notifier.fail = True

    response = client.patch(f"{API}/{user.id}/ban", headers=admin_headers)

    assert response.status_code == 200
    assert fetch_user(user.id).status == AccountStatus.DELETED


def test_lifecycle_routes_are_admin_only(client, user):
    target = create_user("target@example.com")

    response = client.patch(f"{API}/{target.id}/ban", headers=auth_headers(user))

    assert response.status_code == 403
    assert fetch_user(target.id).status == AccountStatus.ACTIVE
