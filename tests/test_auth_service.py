from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

import schemas
from exceptions import (
    DuplicateUserError,
    InactiveUserError,
    InvalidCredentialsError,
    InvalidTokenError,
    ProviderNotFoundError,
)
from models import User, UserStatus
from repositories import ProviderRepository, UserRepository
from security import create_access_token, decode_access_token, verify_password
from services.auth_service import AuthService


@pytest.fixture
def service(db):
    return AuthService(UserRepository(db), ProviderRepository(db))


def _claimant(email="alice@example.com", password="password123"):
    return schemas.RegisterRequest(name="Alice", email=email, password=password, role="claimant")


def test_register_persists_active_user_with_hashed_password(service, db):
    user = service.register(_claimant())

    assert user.id is not None
    stored = db.users.find_one({"_id": ObjectId(user.id)})
    assert stored["status"] == "active"
    assert stored["isDeleted"] is False
    assert stored["lastLogin"] is not None
    assert stored["password"] != "password123"
    assert verify_password("password123", stored["password"])


def test_register_twice_with_same_email_fails(service, db):
    service.register(_claimant())

    with pytest.raises(DuplicateUserError, match="User already exists"):
        service.register(_claimant())
    assert db.users.count_documents({"email": "alice@example.com"}) == 1


def test_register_manager_with_unknown_provider_fails(service, db):
    data = schemas.RegisterRequest(
        name="Bob", email="bob@example.com", password="password123", role="manager", provider_id=str(ObjectId())
    )

    with pytest.raises(ProviderNotFoundError, match="Provider not found"):
        service.register(data)
    assert db.users.count_documents({}) == 0


def test_register_manager_with_existing_provider(service, provider):
    data = schemas.RegisterRequest(
        name="Bob", email="bob@example.com", password="password123", role="manager", provider_id=provider.id
    )

    user = service.register(data)
    assert user.role == "manager"
    assert user.provider_id == provider.id


def test_duplicate_check_is_not_enforced_by_the_store(db):
    # Sans index unique, une insertion qui contourne le service n'est pas rejetée
    users = UserRepository(db)
    for _ in range(2):
        users.create(User(name="Eve", email="eve@example.com", password="x", role="claimant"))
    assert db.users.count_documents({"email": "eve@example.com"}) == 2


def test_deleted_users_do_not_block_registration(service, db):
    service.register(_claimant())
    db.users.update_one({"email": "alice@example.com"}, {"$set": {"isDeleted": True}})

    service.register(_claimant())
    assert db.users.count_documents({"email": "alice@example.com"}) == 2


def test_login_returns_token_and_redacted_user(service):
    service.register(_claimant())

    result = service.login("alice@example.com", "password123")

    assert result.token
    view = result.user.model_dump(by_alias=True)
    assert view["email"] == "alice@example.com"
    assert view["role"] == "claimant"
    assert "password" not in view


def test_login_token_expires_after_24_hours(service):
    service.register(_claimant())

    before = datetime.now(timezone.utc)
    result = service.login("alice@example.com", "password123")

    payload = decode_access_token(result.token)
    expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
    assert abs(expires_at - (before + timedelta(hours=24))) < timedelta(seconds=60)


def test_login_updates_last_login(service, db):
    user = service.register(_claimant())
    db.users.update_one({"_id": ObjectId(user.id)}, {"$set": {"lastLogin": None}})

    service.login("alice@example.com", "password123")
    assert db.users.find_one({"_id": ObjectId(user.id)})["lastLogin"] is not None


def test_login_errors_are_identical_for_unknown_email_and_wrong_password(service):
    service.register(_claimant())

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        service.login("alice@example.com", "not-the-password")
    with pytest.raises(InvalidCredentialsError) as unknown_email:
        service.login("nobody@example.com", "password123")

    assert str(wrong_password.value) == str(unknown_email.value) == "Invalid credentials"


@pytest.mark.parametrize("status", [UserStatus.inactive.value, UserStatus.blocked.value])
def test_login_rejects_user_that_is_not_active(service, db, status):
    service.register(_claimant())
    db.users.update_one({"email": "alice@example.com"}, {"$set": {"status": status}})

    with pytest.raises(InactiveUserError, match="User is not active"):
        service.login("alice@example.com", "password123")


def test_validate_token_returns_embedded_identity(service, provider):
    service.register(
        schemas.RegisterRequest(
            name="Bob", email="bob@example.com", password="password123", role="manager", provider_id=provider.id
        )
    )
    token = service.login("bob@example.com", "password123").token

    authenticated = service.validate_token(token)
    assert authenticated.email == "bob@example.com"
    assert authenticated.role == "manager"
    assert authenticated.provider_id == provider.id


def _invalid_token_cases(service, db):
    user = service.register(_claimant())
    inactive = service.register(_claimant(email="carol@example.com"))
    db.users.update_one({"_id": ObjectId(inactive.id)}, {"$set": {"status": "blocked"}})

    payload = {"id": user.id, "email": user.email, "role": user.role}
    return {
        "malformed": "not-a-jwt",
        "expired": create_access_token(payload, expires_delta=timedelta(seconds=-10)),
        "unknown user": create_access_token({**payload, "id": str(ObjectId())}),
        "inactive user": create_access_token({**payload, "id": inactive.id}),
    }


def test_validate_token_collapses_every_failure_into_invalid_token(service, db):
    messages = set()
    for token in _invalid_token_cases(service, db).values():
        with pytest.raises(InvalidTokenError) as error:
            service.validate_token(token)
        messages.add(str(error.value))
    assert messages == {"Invalid token"}


def test_validate_token_rejects_bad_signature(service):
    user = service.register(_claimant())
    token = service.login(user.email, "password123").token
    header, payload, signature = token.split(".")
    tampered = f"{header}.{payload}.{signature[::-1]}"

    with pytest.raises(InvalidTokenError):
        service.validate_token(tampered)
