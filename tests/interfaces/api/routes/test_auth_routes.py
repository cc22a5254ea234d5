"""Tests for the login, profile and seed endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.factories import DEFAULT_PASSWORD, auth_headers, grant, make_permissions, make_user


def test_seed_creates_first_admin_only_once(client: TestClient) -> None:
    response = client.post("/auth/seed")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["user"]["username"] == "admin"
    assert body["user"]["role"] == "admin"

    second = client.post("/auth/seed")
    assert second.status_code == 403


def test_login_returns_token_and_effective_permissions(client: TestClient, session) -> None:
    make_permissions(session, "manage_news", "view_dashboard")
    client.post("/auth/seed")

    response = client.post("/auth/login", json={"username": "admin", "password": "1234"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["token"]
    assert payload["user"]["role"] == "admin"
    assert sorted(payload["user"]["permissions"]) == ["manage_news", "view_dashboard"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {payload['token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "admin"


def test_login_does_not_reveal_whether_the_username_exists(client: TestClient, session) -> None:
    make_user(session, "editor1", "editor")

    wrong_password = client.post(
        "/auth/login", json={"username": "editor1", "password": "wrong"}
    )
    unknown_user = client.post(
        "/auth/login", json={"username": "ghost", "password": DEFAULT_PASSWORD}
    )

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_token_form_endpoint(client: TestClient, session) -> None:
    make_user(session, "editor1", "editor")

    response = client.post(
        "/auth/token",
        data={"username": "editor1", "password": DEFAULT_PASSWORD},
    )

    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"


def test_me_requires_a_valid_token(client: TestClient) -> None:
    assert client.get("/auth/me").status_code == 401
    invalid = client.get("/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert invalid.status_code == 401


def test_me_uses_the_stored_role(client: TestClient, session) -> None:
    make_permissions(session, "view_dashboard", "manage_news")
    grant(session, "viewer", "view_dashboard")
    user = make_user(session, "vera", "viewer", display_name="Vera")

    response = client.get("/auth/me", headers=auth_headers(user))

    assert response.status_code == 200
    body = response.json()
    assert body["display_name"] == "Vera"
    assert body["permissions"] == ["view_dashboard"]
