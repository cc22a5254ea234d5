"""Tests for permission catalog and role administration endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.factories import auth_headers, grant, make_permissions, make_user


def test_catalog_endpoints_are_admin_only(client: TestClient, session) -> None:
    make_permissions(session, "manage_roles")
    grant(session, "role_admin", "manage_roles")
    admin = make_user(session, "root", "admin")
    delegated = make_user(session, "ross", "role_admin")

    assert client.get("/permissions", headers=auth_headers(admin)).status_code == 200
    assert client.get("/permissions", headers=auth_headers(delegated)).status_code == 403
    assert client.get("/permissions").status_code == 401


def test_seed_then_list_catalog(client: TestClient, session) -> None:
    admin = make_user(session, "root", "admin")
    headers = auth_headers(admin)

    seeded = client.post("/permissions/seed", headers=headers)
    assert seeded.status_code == 200
    assert seeded.json()["count"] == 11

    catalog = client.get("/permissions", headers=headers).json()
    assert catalog[0]["key"] == "manage_home"
    assert {item["group"] for item in catalog} == {"เว็บไซต์", "ระบบ"}

    assert client.post("/permissions/seed", headers=headers).status_code == 409


def test_create_permission_is_granted_to_admin_immediately(client: TestClient, session) -> None:
    admin = make_user(session, "root", "admin")
    headers = auth_headers(admin)

    created = client.post(
        "/permissions",
        json={"key": "manage_events", "label": "Events", "group": "เว็บไซต์"},
        headers=headers,
    )
    assert created.status_code == 201
    assert created.json()["key"] == "manage_events"

    assert client.get("/permissions/my", headers=headers).json() == ["manage_events"]
    assert client.get("/permissions/roles/admin", headers=headers).json() == []

    duplicate = client.post(
        "/permissions", json={"key": "manage_events", "label": "Again"}, headers=headers
    )
    assert duplicate.status_code == 409


def test_replace_role_permissions_endpoint(client: TestClient, session) -> None:
    make_permissions(session, "A", "B", "C")
    grant(session, "editor", "A")
    admin = make_user(session, "root", "admin")
    editor = make_user(session, "eddie", "editor")
    headers = auth_headers(admin)

    response = client.put(
        "/permissions/roles/editor", json={"permissions": ["B", "C"]}, headers=headers
    )
    assert response.status_code == 200
    assert sorted(response.json()["permissions"]) == ["B", "C"]

    stored = client.get("/permissions/roles/editor", headers=headers).json()
    assert sorted(stored) == ["B", "C"]
    assert sorted(client.get("/permissions/my", headers=auth_headers(editor)).json()) == [
        "B",
        "C",
    ]

    unknown = client.put(
        "/permissions/roles/editor", json={"permissions": ["Z"]}, headers=headers
    )
    assert unknown.status_code == 400

    admin_edit = client.put(
        "/permissions/roles/admin", json={"permissions": ["A"]}, headers=headers
    )
    assert admin_edit.status_code == 403


def test_delete_permission_endpoint(client: TestClient, session) -> None:
    make_permissions(session, "A", "B")
    grant(session, "editor", "A", "B")
    admin = make_user(session, "root", "admin")
    headers = auth_headers(admin)

    assert client.delete("/permissions/A", headers=headers).status_code == 200
    assert client.get("/permissions/roles/editor", headers=headers).json() == ["B"]
    assert [item["key"] for item in client.get("/permissions", headers=headers).json()] == ["B"]
    assert client.delete("/permissions/A", headers=headers).status_code == 404


def test_role_endpoints(client: TestClient, session) -> None:
    make_permissions(session, "manage_roles", "view_dashboard")
    grant(session, "role_admin", "manage_roles")
    manager = make_user(session, "ross", "role_admin")
    headers = auth_headers(manager)

    created = client.post("/roles", json={"name": "intern", "permissions": []}, headers=headers)
    assert created.status_code == 201
    assert created.json() == {"name": "intern", "permissions": ["view_dashboard"], "user_count": 0}

    names = [role["name"] for role in client.get("/roles", headers=headers).json()]
    assert names[0] == "admin"
    assert {"intern", "role_admin"} <= set(names)

    assert client.post("/roles", json={"name": "intern"}, headers=headers).status_code == 409
    assert client.delete("/roles/admin", headers=headers).status_code == 403
    assert client.delete("/roles/role_admin", headers=headers).status_code == 403
    assert client.delete("/roles/intern", headers=headers).status_code == 200

    names = [role["name"] for role in client.get("/roles", headers=headers).json()]
    assert "intern" not in names


def test_replace_refuses_invalid_name_for_new_role(client: TestClient, session) -> None:
    make_permissions(session, "manage_news")
    admin = make_user(session, "root", "admin")
    headers = auth_headers(admin)
    body = {"permissions": ["manage_news"]}

    too_long = client.put(f"/permissions/roles/{'x' * 80}", json=body, headers=headers)
    bad_chars = client.put("/permissions/roles/bad%20role!", json=body, headers=headers)

    assert too_long.status_code == 400
    assert bad_chars.status_code == 400
    assert [role["name"] for role in client.get("/roles", headers=headers).json()] == ["admin"]

    created = client.put("/permissions/roles/reporter", json=body, headers=headers)
    assert created.status_code == 200
    assert created.json()["permissions"] == ["manage_news"]
