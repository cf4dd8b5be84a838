import uuid

from app.models.staff import StaffRole
from conftest import create_staff

API = "/api/v1/staff"


def test_create_staff(client, admin_headers):
    response = client.post(API, headers=admin_headers, json={"name": " Maria Santos ", "phone": "+97450000001", "role": "Cleaner"})

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["name"] == "Maria Santos"
    assert data["role"] == "Cleaner"
    assert data["active"] is True


def test_create_staff_requires_fields(client, admin_headers):
    response = client.post(API, headers=admin_headers, json={"name": "Maria"})

    assert response.status_code == 400


def test_create_staff_duplicate_phone(client, admin_headers):
    create_staff("Maria Santos", "+97450000001")

    response = client.post(API, headers=admin_headers, json={"name": "Other", "phone": "+97450000001", "role": "Driver"})

    assert response.status_code == 400
    assert response.json()["message"] == "phone already exists"


def test_list_staff_active_first_then_name(client, admin_headers):
    create_staff("Zainab", "+1", active=True)
    create_staff("Bilal", "+2", active=False)
    create_staff("Amir", "+3", active=True)
    create_staff("Aaron", "+4", active=False)

    response = client.get(API, headers=admin_headers)

    assert response.status_code == 200
    assert [s["name"] for s in response.json()["data"]] == ["Amir", "Zainab", "Aaron", "Bilal"]


def test_update_staff(client, admin_headers):
    staff = create_staff("Maria", "+97450000001")

    response = client.patch(f"{API}/{staff.id}", headers=admin_headers, json={"role": "Supervisor", "phone": "+97450000009"})

    assert response.status_code == 200
    assert response.json()["data"]["role"] == StaffRole.SUPERVISOR.value
    assert response.json()["data"]["phone"] == "+97450000009"
    assert response.json()["data"]["name"] == "Maria"


def test_update_staff_phone_conflict(client, admin_headers):
    create_staff("Maria", "+97450000001")
    other = create_staff("Grace", "+97450000002")

    response = client.patch(f"{API}/{other.id}", headers=admin_headers, json={"phone": "+97450000001"})

    assert response.status_code == 400


def test_set_staff_active(client, admin_headers):
    staff = create_staff("Maria", "+97450000001")

    response = client.patch(f"{API}/{staff.id}/active", headers=admin_headers, json={"active": False})

    assert response.status_code == 200
    assert response.json()["data"]["active"] is False


def test_delete_staff_returns_member(client, admin_headers):
    staff = create_staff("Maria", "+97450000001")

    response = client.delete(f"{API}/{staff.id}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"]["id"] == str(staff.id)
    assert response.json()["data"]["name"] == "Maria"
    assert client.get(API, headers=admin_headers).json()["data"] == []


def test_missing_staff_is_404(client, admin_headers):
    missing = uuid.uuid4()

    assert client.patch(f"{API}/{missing}", headers=admin_headers, json={"name": "X"}).status_code == 404
    assert client.delete(f"{API}/{missing}", headers=admin_headers).status_code == 404
