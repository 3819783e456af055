"""FastAPI application for the comment engine."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vidtalk.config import Settings
from vidtalk.interface.api.errors import register_exception_handlers
from vidtalk.interface.api.routes import (
    comments,
    health,
    moderation,
    notifications,
    pins,
)
from vidtalk.util.di.container import create_container, setup_di
from vidtalk.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    comments.router,
    pins.router,
    moderation.router,
    notifications.router,
)


def create_app() -> FastAPI:
    """Assemble the API: tracing, CORS, DI, error mapping and routes.

    Logfire should already be configured (``scripts/start_app.py`` does it).
    Tests call this and then swap in their own container with ``setup_di``.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="VidTalk Comments API",
        description="Comments, votes, pins, reports and notifications for videos",
        version="0.1.0",
    )
    instrument_fastapi(app_instance)

    # Browsers send the auth cookie, so origins must be explicit
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, create_container())
    register_exception_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


app = create_app()
