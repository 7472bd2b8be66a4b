import pytest
from fastapi.testclient import TestClient

from storefront.config import Settings
from storefront.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        JWT_SECRET="test-secret",
        BCRYPT_ROUNDS=4,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        ENABLE_METRICS=False,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session(app, client):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def register_user(client):
    def _register(username="alice", email="alice@example.com", password="secret123", role=None):
        payload = {
            "username": username,
            "email": email,
            "password": password,
            "confirmPassword": password,
        }
        if role:
            payload["role"] = role
        response = client.post("/auth/register", json=payload)
        assert response.status_code == 200, response.text
        return response.json()
    return _register


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(register_user):
    return bearer(register_user()["token"])


@pytest.fixture
def admin_headers(register_user):
    return bearer(register_user("admin", "admin@example.com", role="admin")["token"])


@pytest.fixture
def create_product(client, admin_headers):
    def _create(**overrides):
        payload = {
            "name": "Widget",
            "description": "A useful widget",
            "price": "10.00",
            "image": "/uploads/widget.png",
            "stock": 5,
        }
        payload.update(overrides)
        response = client.post("/products", json=payload, headers=admin_headers)
        assert response.status_code == 200, response.text
        return response.json()
    return _create
