"""Tests for the user administration endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from cms_api.interfaces.api.dependencies import FORBIDDEN_DETAIL
from tests.factories import auth_headers, grant, make_permissions, make_user


def _setup_roles(session) -> None:
    make_permissions(session, "manage_users", "view_dashboard")
    grant(session, "viewer", "view_dashboard")
    grant(session, "user_admin", "manage_users")


def test_user_crud_flow(client: TestClient, session) -> None:
    _setup_roles(session)
    manager = make_user(session, "manager", "user_admin")
    headers = auth_headers(manager)

    created = client.post(
        "/auth/users",
        json={"username": "newbie", "password": "pass1234", "display_name": "New"},
        headers=headers,
    )
    assert created.status_code == 201
    user = created.json()
    assert user["role"] == "viewer"
    assert user["display_name"] == "New"

    listing = client.get("/auth/users", headers=headers)
    assert listing.status_code == 200
    assert {item["username"] for item in listing.json()} == {"manager", "newbie"}

    updated = client.put(
        f"/auth/users/{user['id']}",
        json={"role": "user_admin", "display_name": "Promoted"},
        headers=headers,
    )
    assert updated.status_code == 200
    assert updated.json()["role"] == "user_admin"
    assert updated.json()["display_name"] == "Promoted"

    deleted = client.delete(f"/auth/users/{user['id']}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True

    missing = client.delete(f"/auth/users/{user['id']}", headers=headers)
    assert missing.status_code == 404


def test_created_user_can_log_in(client: TestClient, session) -> None:
    _setup_roles(session)
    admin = make_user(session, "root", "admin")

    client.post(
        "/auth/users",
        json={"username": "writer", "password": "pass1234", "role": "viewer"},
        headers=auth_headers(admin),
    )
    login = client.post("/auth/login", json={"username": "writer", "password": "pass1234"})

    assert login.status_code == 200
    assert login.json()["user"]["permissions"] == ["view_dashboard"]


def test_duplicate_username_conflicts(client: TestClient, session) -> None:
    admin = make_user(session, "root", "admin")

    response = client.post(
        "/auth/users",
        json={"username": "root", "password": "pass1234", "role": "admin"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 409


def test_unknown_role_is_rejected(client: TestClient, session) -> None:
    admin = make_user(session, "root", "admin")

    response = client.post(
        "/auth/users",
        json={"username": "someone", "password": "pass1234", "role": "wizard"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400


def test_users_cannot_delete_themselves(client: TestClient, session) -> None:
    admin = make_user(session, "root", "admin")

    response = client.delete(f"/auth/users/{admin.id}", headers=auth_headers(admin))

    assert response.status_code == 403


def test_missing_permission_gets_generic_forbidden(client: TestClient, session) -> None:
    _setup_roles(session)
    viewer = make_user(session, "vera", "viewer")

    response = client.get("/auth/users", headers=auth_headers(viewer))

    assert response.status_code == 403
    assert response.json()["detail"] == FORBIDDEN_DETAIL
    assert "manage_users" not in response.text
