"""
Shared pytest fixtures
"""
import pytest

from app import create_app
from config import DEFAULT_ROOM_INVENTORY
from frontdesk import FrontDesk


@pytest.fixture
def desk():
    """A front desk over the reference six-room inventory"""
    return FrontDesk.from_inventory(DEFAULT_ROOM_INVENTORY)


@pytest.fixture
def app():
    app = create_app({"TESTING": True})
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def guest_id(client):
    """Register a guest through the API and return its id"""
    response = client.post("/api/guests", json={"name": "Ana", "phone": "555-1111"})
    return response.get_json()["guest_id"]
