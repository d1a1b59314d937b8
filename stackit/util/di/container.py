"""Dependency injection container wiring for the API process."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from stackit.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation:
    PostgreSQL repositories and the process-local connection directory.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the application.

    Routes resolve their use cases with ``FromDishka``. The notification
    WebSocket reads the container from ``app.state.dishka_container``.
    """
    setup_dishka(container, app)


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the application container on shutdown.

    Closing finalizes APP-scoped dependencies, which disposes the database
    engine and its connection pool.
    """
    yield
    await app.state.dishka_container.close()
