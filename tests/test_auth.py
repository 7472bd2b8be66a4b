from datetime import timedelta

import pytest

from storefront.exceptions import DuplicateUsernameError
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.services.security import create_access_token, verify_password
from tests.conftest import bearer


def test_register_returns_user_and_token(client):
    response = client.post("/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["username"] == "alice"
    assert data["user"]["email"] == "alice@example.com"
    assert data["user"]["role"] == "user"
    assert data["token"]
    assert "password" not in data["user"]
    assert "passwordHash" not in data["user"]


def test_register_stores_only_a_hash(client, register_user, db_session):
    register_user(password="secret123")
    user = db_session.query(User).filter(User.email == "alice@example.com").one()
    assert user.password_hash != "secret123"
    assert verify_password("secret123", user.password_hash)


def test_register_duplicate_email_reports_email(client, register_user):
    register_user("alice", "alice@example.com")
    response = client.post("/auth/register", json={
        "username": "alice2",
        "email": "alice@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 400
    assert response.json() == {"message": "User already exists"}


def test_register_duplicate_username(client, register_user):
    register_user("alice", "alice@example.com")
    response = client.post("/auth/register", json={
        "username": "alice",
        "email": "other@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 400
    assert response.json() == {"message": "Username already taken"}


def test_register_email_conflict_checked_before_username(client, register_user):
    register_user("alice", "alice@example.com")
    response = client.post("/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


def test_register_password_mismatch_creates_nothing(client, db_session):
    response = client.post("/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "confirmPassword": "different",
    })
    assert response.status_code == 400
    assert response.json()["message"] == "Passwords don't match"
    assert db_session.query(User).count() == 0


def test_register_invalid_email(client):
    response = client.post("/auth/register", json={
        "username": "alice",
        "email": "not-an-email",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 400
    assert response.json()["message"].startswith("email:")


def test_register_as_admin(register_user):
    data = register_user("boss", "boss@example.com", role="admin")
    assert data["user"]["role"] == "admin"


def test_login_success(client, register_user):
    registered = register_user()
    response = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret123"})
    assert response.status_code == 200
    data = response.json()
    assert data["user"]["id"] == registered["user"]["id"]
    assert data["token"]


def test_login_failures_are_indistinguishable(client, register_user):
    register_user()
    wrong_password = client.post("/auth/login", json={"email": "alice@example.com", "password": "wrongpass"})
    unknown_email = client.post("/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_login_token_resolves_to_same_user(client, register_user):
    registered = register_user()
    token = client.post(
        "/auth/login", json={"email": "alice@example.com", "password": "secret123"}
    ).json()["token"]
    response = client.get("/auth/me", headers=bearer(token))
    assert response.status_code == 200
    assert response.json()["user"]["id"] == registered["user"]["id"]


def test_me_requires_token(client):
    response = client.get("/auth/me")
    assert response.status_code == 401
    assert response.json() == {"message": "Access token required"}


def test_me_rejects_malformed_token(client):
    response = client.get("/auth/me", headers=bearer("not.a.token"))
    assert response.status_code == 403
    assert response.json() == {"message": "Invalid token"}


def test_tampered_and_expired_tokens_rejected_alike(client, register_user, settings):
    registered = register_user()
    token = registered["token"]
    header, payload, signature = token.split(".")
    flipped = "A" if signature[10] != "A" else "B"
    tampered = ".".join([header, payload, signature[:10] + flipped + signature[11:]])
    expired = create_access_token(registered["user"]["id"], settings, expires_delta=timedelta(seconds=-10))
    foreign = create_access_token(
        registered["user"]["id"],
        settings.model_copy(update={"JWT_SECRET": "another-secret"})
    )

    for bad_token in (tampered, expired, foreign):
        for method, path in (("get", "/auth/me"), ("get", "/orders"), ("post", "/upload")):
            response = getattr(client, method)(path, headers=bearer(bad_token))
            assert response.status_code == 403, (path, response.text)
            assert response.json() == {"message": "Invalid token"}


def test_token_for_deleted_user_is_invalid(client, register_user, db_session):
    registered = register_user()
    db_session.query(User).filter(User.id == registered["user"]["id"]).delete()
    db_session.commit()

    response = client.get("/auth/me", headers=bearer(registered["token"]))
    assert response.status_code == 403
    assert response.json() == {"message": "Invalid token"}


def test_register_race_on_email_reports_conflict(client, register_user, db_session, monkeypatch):
    register_user("alice", "alice@example.com")
    real_get_by_email = UserRepository.get_by_email
    calls = []

    def stale_first_lookup(self, email):
        # The first lookup runs before the competing insert is visible
        calls.append(email)
        if len(calls) == 1:
            return None
        return real_get_by_email(self, email)

    monkeypatch.setattr(UserRepository, "get_by_email", stale_first_lookup)
    response = client.post("/auth/register", json={
        "username": "alice2",
        "email": "alice@example.com",
        "password": "secret123",
        "confirmPassword": "secret123",
    })
    assert response.status_code == 400
    assert response.json() == {"message": "User already exists"}
    assert db_session.query(User).count() == 1


def test_repository_maps_duplicate_username_insert(db_session, register_user):
    register_user("alice", "alice@example.com")
    repository = UserRepository(db_session)
    with pytest.raises(DuplicateUsernameError):
        repository.create("alice", "other@example.com", "not-a-real-hash")
    assert repository.get_by_email("alice@example.com") is not None
