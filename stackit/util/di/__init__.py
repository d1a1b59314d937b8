"""Dependency injection providers and implementation selection."""

from typing import Type

from stackit.util.di.application import ProdApplicationProvider
from stackit.util.di.base import Component, ProviderBase
from stackit.util.di.core import ProdConfigProvider
from stackit.util.di.domain import ProdDomainProvider
from stackit.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdRealtimeProvider,
    RealtimeProvider,
)

# Concrete providers first, then the mockable component bases
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    RealtimeProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Select the provider class to instantiate for a ``PROVIDERS`` entry.

    Concrete providers are returned as they are. For a component base the
    subclass whose ``__is_mock__`` matches ``use_mock`` is returned; mock
    subclasses only exist once ``tests.di`` has been imported.

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProdRealtimeProvider",
    "ProviderBase",
    "RealtimeProvider",
    "get_provider",
]
