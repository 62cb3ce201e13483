"""
Shared pytest fixtures.

mongoengine is connected once per session to an in-memory mongomock client;
the users collection is dropped after every test.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient
from mongoengine import connect, disconnect

from app.models.role import Role
from app.models.user import User, UserAuth, Mission
from app.utils.config import get_role_catalog


@pytest.fixture(scope="session", autouse=True)
def mongo_connection():
    connect("mission_roles_test", host="mongodb://localhost", alias="default", mongo_client_class=mongomock.MongoClient)
    yield
    disconnect(alias="default")


@pytest.fixture(autouse=True)
def clean_users(mongo_connection):
    yield
    User.drop_collection()


@pytest.fixture
def catalog():
    return get_role_catalog()


@pytest.fixture
def role(catalog):
    """Build an embedded Role from a catalog callsign."""

    def _role(callsign: str) -> Role:
        return Role.from_def(catalog.get(callsign))

    return _role


@pytest.fixture
def make_user():
    """Create and persist a user, optionally with mission entries."""

    def _make_user(email: str, missions: list[Mission] | None = None, name: str = "Test User") -> User:
        user = User(auth=UserAuth(auth_id=email.split("@")[0], token="tok", email=email, name=name), missions=missions or [])
        user.save()
        return user

    return _make_user


@pytest.fixture
def client():
    from main import app

    # Not entered as a context manager so the lifespan does not dial a real server
    return TestClient(app)
