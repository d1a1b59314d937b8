"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from stackit.util.di import PROVIDERS, Component, get_provider


def _mockable_components() -> set[str]:
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and getattr(base, "__mock_component__", None)
    }


def build_test_container(
    unmock: set[Component] | None = None, with_fastapi: bool = False
) -> AsyncContainer:
    """Build a container for tests.

    Mockable components resolve to their in-memory implementations unless
    named in ``unmock``. Config, domain and application providers are the
    production ones; settings come from the environment that
    ``tests/conftest.py`` prepares.

    Args:
        unmock: Components that should use production implementations
        with_fastapi: Add dishka's FastAPI provider, required when the
            container is passed to ``create_app``

    Raises:
        ValueError: If ``unmock`` names a component that does not exist

    Examples:
        build_test_container()
        build_test_container(unmock={"persistence"})
        create_app(build_test_container(with_fastapi=True))
    """
    unmock = unmock or set()
    unknown = unmock - _mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        is_mockable = bool(base.__subclasses__())
        use_mock = is_mockable and base.__mock_component__ not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    if with_fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)
