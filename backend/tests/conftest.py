import pytest

from app import create_app
from config import TestingConfig
from models import db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register_user(client):
    """Register a user and return (response, bearer headers)."""

    def _register(email="alice@example.com", password="s3cret-pass", name="Alice"):
        resp = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        token = (resp.get_json().get("data") or {}).get("token")
        return resp, {"Authorization": f"Bearer {token}"}

    return _register


@pytest.fixture
def auth_headers(register_user):
    _, headers = register_user()
    return headers


@pytest.fixture
def other_headers(register_user):
    _, headers = register_user(email="bob@example.com", password="hunter22", name="Bob")
    return headers


@pytest.fixture
def create_txn(client):
    def _create(headers, **fields):
        body = {"amount": 10, "description": "Lunch", "category": "Food"}
        body.update(fields)
        resp = client.post("/api/transactions", json=body, headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["data"]["transaction"]

    return _create
