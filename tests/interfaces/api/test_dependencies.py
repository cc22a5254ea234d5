"""Tests for the permission guard dependency."""

from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from cms_api.domain.entities import User
from cms_api.interfaces.api.dependencies import FORBIDDEN_DETAIL, require_permission
from tests.factories import auth_headers, grant, make_permissions, make_user


def _guarded_app() -> FastAPI:
    app = FastAPI()

    @app.get("/guarded")
    def guarded(user: User = Depends(require_permission("manage_news", "manage_law"))):
        return {"username": user.username}

    return app


def test_guard_admits_any_one_of_the_listed_permissions(session) -> None:
    make_permissions(session, "manage_news", "manage_law", "view_dashboard")
    grant(session, "lawyer", "manage_law")
    grant(session, "viewer", "view_dashboard")
    lawyer = make_user(session, "lena", "lawyer")
    viewer = make_user(session, "vera", "viewer")
    admin = make_user(session, "root", "admin")

    client = TestClient(_guarded_app())

    assert client.get("/guarded", headers=auth_headers(lawyer)).json() == {"username": "lena"}
    assert client.get("/guarded", headers=auth_headers(admin)).status_code == 200

    denied = client.get("/guarded", headers=auth_headers(viewer))
    assert denied.status_code == 403
    assert denied.json() == {"detail": FORBIDDEN_DETAIL}
