"""
Shared fixtures.

Every test gets a fresh in‑memory MongoDB from ``mongomock``.  The API
fixtures build the application with a ``database_factory`` that
returns that database instead of connecting to a real server.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from invitation_api.app.core.config import Settings
from invitation_api.app.core.db import Database
from invitation_api.app.main import create_app
from invitation_api.app.repositories.client_repository import ClientRepository
from invitation_api.app.repositories.guest_repository import GuestRepository
from invitation_client import InvitationAPI


@pytest.fixture
def database():
    db = Database(mongomock.MongoClient(), "invitations_test")
    yield db
    db.close()


@pytest.fixture
def client_repository(database):
    return ClientRepository(database)


@pytest.fixture
def guest_repository(database, client_repository):
    return GuestRepository(database, client_repository)


@pytest.fixture
def settings():
    return Settings(
        cors_base_domain="deiliinvitation.com",
        cors_extra_origins="http://localhost:3000,https://localhost:3000",
        api_prefix="",
    )


@pytest.fixture
def app(settings, database):
    return create_app(settings, database_factory=lambda config: database)


@pytest.fixture
def api(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sdk(api):
    return InvitationAPI(base_url="http://testserver", session=api)


@pytest.fixture
def acme(api):
    """A stored client; returns its id."""
    response = api.post(
        "/clients",
        json={"name": "Acme", "contact": "a@b.com", "invitation_types": "wedding"},
    )
    assert response.status_code == 201
    return response.json()["inserted_id"]
