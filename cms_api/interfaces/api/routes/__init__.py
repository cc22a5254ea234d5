from fastapi import FastAPI

from .auth import router as auth_router
from .news import router as news_router
from .permissions import router as permissions_router
from .pharmacists import router as pharmacists_router
from .roles import router as roles_router
from .users import router as users_router
from .web_settings import router as web_settings_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(permissions_router)
    app.include_router(roles_router)
    app.include_router(news_router)
    app.include_router(pharmacists_router)
    app.include_router(web_settings_router)
