"""Container fixtures shared by unit and integration tests.

Unit tests run against in-memory repositories and need nothing else.
Integration tests unmock ``persistence`` and expect ``DATABASE__URL`` to
point at a PostgreSQL database migrated to head.
"""

import pytest_asyncio

from stackit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Build a pytest fixture yielding a request-scoped container.

    Each test gets a fresh container, so in-memory state never leaks
    between tests. The container is closed once the test finishes.

    Args:
        unmock: Components to resolve to their production implementations

    Returns:
        An async fixture function yielding an ``AsyncContainer``

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_ask(unit_env):
            use_case = await unit_env.get(CreateQuestionUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _environment():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _environment
