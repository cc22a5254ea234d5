import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms_api.config import get_settings
from cms_api.infrastructure.database import engine, initialize_database
from cms_api.interfaces.api.routes import register_routes

_DEV_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Council CMS API", lifespan=lifespan)

    origins = list(_DEV_ORIGINS)
    if settings.frontend_url:
        origins.append(settings.frontend_url)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_routes(app)
    return app


app = create_app()
