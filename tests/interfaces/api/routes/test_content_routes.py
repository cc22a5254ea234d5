"""Tests for news, pharmacist lookup and web-site settings endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from tests.factories import (
    auth_headers,
    grant,
    make_permissions,
    make_pharmacist,
    make_user,
)


def _editor_headers(session) -> dict[str, str]:
    make_permissions(session, "manage_news", "manage_web_settings", "view_dashboard")
    grant(session, "editor", "manage_news", "manage_web_settings")
    grant(session, "viewer", "view_dashboard")
    return auth_headers(make_user(session, "eddie", "editor"))


def test_news_lifecycle(client: TestClient, session) -> None:
    headers = _editor_headers(session)

    created = client.post(
        "/news",
        json={"title": "Meeting", "content": "Agenda", "category": "activity", "order": 2},
        headers=headers,
    )
    assert created.status_code == 201
    news = created.json()
    assert news["status"] == "draft"
    assert news["published_at"] is None

    published = client.put(
        f"/news/{news['id']}", json={"status": "published"}, headers=headers
    )
    assert published.status_code == 200
    first_published_at = published.json()["published_at"]
    assert first_published_at is not None

    republished = client.put(
        f"/news/{news['id']}", json={"status": "published", "title": "Meeting 2"}, headers=headers
    )
    assert republished.json()["published_at"] == first_published_at
    assert republished.json()["title"] == "Meeting 2"

    assert client.get(f"/news/{news['id']}").status_code == 200
    assert client.delete(f"/news/{news['id']}", headers=headers).status_code == 200
    assert client.get(f"/news/{news['id']}").status_code == 404


def test_news_listing_filters_and_order(client: TestClient, session) -> None:
    headers = _editor_headers(session)
    for order, category, status in [
        (3, "news", "published"),
        (1, "activity", "draft"),
        (2, "news", "draft"),
    ]:
        client.post(
            "/news",
            json={
                "title": f"item {order}",
                "content": "body",
                "category": category,
                "status": status,
                "order": order,
            },
            headers=headers,
        )

    assert [item["order"] for item in client.get("/news").json()] == [1, 2, 3]
    assert [item["order"] for item in client.get("/news?category=news").json()] == [2, 3]
    assert [
        item["order"] for item in client.get("/news?category=news&status=published").json()
    ] == [3]


def test_news_order_must_be_unique(client: TestClient, session) -> None:
    headers = _editor_headers(session)
    payload = {"title": "One", "content": "body", "order": 5}

    assert client.post("/news", json=payload, headers=headers).status_code == 201
    assert client.post("/news", json=payload, headers=headers).status_code == 409


def test_news_writes_require_permission(client: TestClient, session) -> None:
    _editor_headers(session)
    viewer = make_user(session, "vera", "viewer")

    response = client.post(
        "/news", json={"title": "x", "content": "y"}, headers=auth_headers(viewer)
    )

    assert response.status_code == 403
    assert client.post("/news", json={"title": "x", "content": "y"}).status_code == 401


def test_pharmacist_search(client: TestClient, session) -> None:
    first = make_pharmacist(
        session, name="Somchai Dee", registration_id="P.12345", province="Bangkok"
    )
    make_pharmacist(session, name="Malee Suk", registration_id="P.77889", province="Chiang Mai")

    everyone = client.get("/pharmacists").json()
    assert [item["registration_id"] for item in everyone] == ["P.12345", "P.77889"]

    by_province = client.get("/pharmacists", params={"q": "chiang"}).json()
    assert [item["name"] for item in by_province] == ["Malee Suk"]

    by_licence = client.get("/pharmacists", params={"q": "12345"}).json()
    assert [item["id"] for item in by_licence] == [first]

    assert client.get(f"/pharmacists/{first}").json()["name"] == "Somchai Dee"
    assert client.get("/pharmacists/9999").status_code == 404


def test_web_settings_defaults_and_update(client: TestClient, session) -> None:
    headers = _editor_headers(session)

    defaults = client.get("/web-settings").json()
    assert defaults["site_name_en"] == "The Pharmacy Council of Thailand"
    assert defaults["phone"] == ""

    updated = client.put(
        "/web-settings", json={"phone": "02-123-4567", "line_id": "@council"}, headers=headers
    )
    assert updated.status_code == 200

    stored = client.get("/web-settings").json()
    assert stored["phone"] == "02-123-4567"
    assert stored["line_id"] == "@council"
    assert stored["site_name_en"] == "The Pharmacy Council of Thailand"

    second = client.put("/web-settings", json={"slogan": "Care"}, headers=headers)
    assert second.json()["phone"] == "02-123-4567"
    assert second.json()["slogan"] == "Care"


def test_web_settings_update_requires_permission(client: TestClient, session) -> None:
    _editor_headers(session)
    viewer = make_user(session, "vera", "viewer")

    response = client.put("/web-settings", json={"phone": "1"}, headers=auth_headers(viewer))

    assert response.status_code == 403


def test_pharmacist_search_treats_wildcards_literally(client: TestClient, session) -> None:
    make_pharmacist(session, name="Anong Jai", registration_id="P.100", province="Nan")
    discounted = make_pharmacist(
        session, name="Pranee 50% Pharmacy", registration_id="P_200", province="Loei"
    )

    assert client.get("/pharmacists", params={"q": "%"}).json()[0]["id"] == discounted
    assert len(client.get("/pharmacists", params={"q": "%"}).json()) == 1
    assert [item["id"] for item in client.get("/pharmacists", params={"q": "P_2"}).json()] == [
        discounted
    ]
    assert client.get("/pharmacists", params={"q": "P_1"}).json() == []
