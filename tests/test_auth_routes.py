import pytest
from bson import ObjectId

from dependencies import get_auth_service


class RecordingAuthService:
    """Remplace AuthService pour vérifier qu'il n'est pas appelé."""

    def __init__(self):
        self.calls = []

    def register(self, data):
        self.calls.append(data)


@pytest.fixture
def recording_service(app):
    service = RecordingAuthService()
    app.dependency_overrides[get_auth_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.mark.parametrize("role", ["admin", "Manager", "CLAIMANT", "superuser"])
def test_register_rejects_unknown_role_without_calling_service(client, recording_service, role):
    response = client.post(
        "/auth/register",
        json={"name": "X", "email": "x@example.com", "password": "password123", "role": role},
    )

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Invalid role",
        "error": "Role must be either manager or claimant",
    }
    assert recording_service.calls == []


def test_register_manager_without_provider_is_rejected(client, recording_service):
    response = client.post(
        "/auth/register",
        json={"name": "M", "email": "m@example.com", "password": "password123", "role": "manager"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Provider ID is required for managers"
    assert recording_service.calls == []


@pytest.mark.parametrize("missing", ["name", "email", "password", "role"])
def test_register_requires_all_fields(client, recording_service, missing):
    body = {"name": "X", "email": "x@example.com", "password": "password123", "role": "claimant"}
    del body[missing]

    response = client.post("/auth/register", json=body)

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required fields"
    assert recording_service.calls == []


def test_mixed_case_email_is_stored_verbatim_and_can_log_in(client, register_user, db):
    assert register_user("Alice@Example.COM").status_code == 201

    response = client.post("/auth/login", json={"email": "Alice@Example.COM", "password": "password123"})

    assert response.status_code == 200
    assert response.json()["data"]["user"]["email"] == "Alice@Example.COM"
    assert db.users.count_documents({"email": "Alice@Example.COM"}) == 1


def test_email_uniqueness_is_case_sensitive(client, register_user, db):
    assert register_user("bob@example.com").status_code == 201
    assert register_user("bob@EXAMPLE.com").status_code == 201

    stored = sorted(doc["email"] for doc in db.users.find({}, {"email": 1}))
    assert stored == ["bob@EXAMPLE.com", "bob@example.com"]


def test_register_success(client, db):
    response = client.post(
        "/auth/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "password123", "role": "claimant"},
    )

    assert response.status_code == 201
    assert response.json() == {"success": True, "message": "User registered successfully"}
    assert db.users.count_documents({"email": "alice@example.com"}) == 1


def test_register_duplicate_email(client, register_user, db):
    assert register_user("alice@example.com").status_code == 201

    response = register_user("alice@example.com")

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Failed to register user",
        "error": "User already exists",
    }
    assert db.users.count_documents({"email": "alice@example.com"}) == 1


def test_register_manager_with_unknown_provider(client, register_user, db):
    response = register_user("m@example.com", role="manager", provider_id=str(ObjectId()))

    assert response.status_code == 400
    assert response.json()["error"] == "Provider not found"
    assert db.users.count_documents({}) == 0


def test_login_success_returns_token_and_user_view(client, register_user, provider):
    register_user("m@example.com", role="manager", provider_id=provider.id, name="Manager")

    response = client.post("/auth/login", json={"email": "m@example.com", "password": "password123"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["data"]["token"]
    user = body["data"]["user"]
    assert user == {
        "id": user["id"],
        "name": "Manager",
        "email": "m@example.com",
        "role": "manager",
        "providerId": provider.id,
    }


def test_login_failures_do_not_reveal_which_part_was_wrong(client, register_user):
    register_user("alice@example.com")

    wrong_password = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope"})
    unknown_email = client.post("/auth/login", json={"email": "ghost@example.com", "password": "password123"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {
        "success": False,
        "message": "Login failed",
        "error": "Invalid credentials",
    }


def test_login_inactive_user_is_reported_distinctly(client, register_user, db):
    register_user("alice@example.com")
    db.users.update_one({"email": "alice@example.com"}, {"$set": {"status": "inactive"}})

    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "password123"})

    assert response.status_code == 401
    assert response.json()["error"] == "User is not active"


def test_login_requires_email_and_password(client):
    response = client.post("/auth/login", json={"email": "alice@example.com"})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing credentials"


def test_me_returns_token_identity(client, claimant_headers):
    response = client.get("/auth/me", headers=claimant_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["email"] == "claimant@example.com"
    assert data["role"] == "claimant"
