"""FastAPI application factory.

Started by ``scripts/start_app.py`` through uvicorn's factory mode:

    uvicorn stackit.interface.api.app:create_app --factory
"""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.errors import register_error_handlers
from stackit.interface.api.routes import (
    answers,
    auth,
    comments,
    health,
    notifications,
    questions,
    realtime,
    users,
    votes,
)
from stackit.util.di.container import container_lifespan, create_container, setup_di
from stackit.util.observability import instrument_fastapi

ROUTERS = [
    health.router,
    auth.router,
    questions.router,
    answers.router,
    comments.router,
    votes.router,
    notifications.router,
    users.router,
    realtime.router,
]

# Local frontends allowed alongside the configured one
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the StackIt API application.

    Logfire must already be configured: ``scripts/start_app.py`` does it
    for the server and ``tests/conftest.py`` for the test suite.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="StackIt API",
        description="Backend API for StackIt, a community question and answer forum",
        version=health.API_VERSION,
        lifespan=container_lifespan,
    )
    instrument_fastapi(app_instance)

    # The auth cookie is sent cross-origin, so origins are listed explicitly
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance
