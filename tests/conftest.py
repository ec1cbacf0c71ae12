"""
Configuration et fixtures communes des tests.
"""

import os

# Doit précéder l'import de config.py
os.environ.setdefault("SECRET_KEY", "tests-secret-key")
os.environ["BCRYPT_ROUNDS"] = "4"

import mongomock
import pytest
from fastapi.testclient import TestClient

from app_factory import create_app
from database import MongoConnection
from models import Provider, ProviderStatus
from repositories import ProviderRepository

PASSWORD = "password123"


@pytest.fixture
def mongo():
    """Connexion MongoDB en mémoire."""
    return MongoConnection(db_name="claims-tests", client=mongomock.MongoClient())


@pytest.fixture
def db(mongo):
    return mongo.get_db()


@pytest.fixture
def app(mongo):
    return create_app(mongo=mongo)


@pytest.fixture
def client(app):
    """Test client fixture."""
    return TestClient(app)


@pytest.fixture
def provider(db):
    return ProviderRepository(db).create(
        Provider(name="Acme Health", email="contact@acme.example.com", address="1 Main Street", status=ProviderStatus.active)
    )


@pytest.fixture
def register_user(client):
    def _register(email, role="claimant", provider_id=None, name="Test User", password=PASSWORD):
        body = {"name": name, "email": email, "password": password, "role": role}
        if provider_id is not None:
            body["providerId"] = provider_id
        return client.post("/auth/register", json=body)
    return _register


@pytest.fixture
def login_user(client):
    """Retourne les en-têtes Authorization d'un utilisateur déjà inscrit."""
    def _login(email, password=PASSWORD):
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['data']['token']}"}
    return _login


@pytest.fixture
def claimant_headers(register_user, login_user):
    assert register_user("claimant@example.com").status_code == 201
    return login_user("claimant@example.com")


@pytest.fixture
def manager_headers(register_user, login_user, provider):
    assert register_user("manager@example.com", role="manager", provider_id=provider.id).status_code == 201
    return login_user("manager@example.com")
