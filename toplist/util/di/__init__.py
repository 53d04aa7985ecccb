"""Dependency injection module.

Providers are listed once in PROVIDERS. Swappable components (clock,
persistence, status probe) are declared as a base provider with one
production and one mock subclass; ``get_provider`` picks between them.
"""

from toplist.util.di.application import ProdApplicationProvider
from toplist.util.di.base import Component, ProviderBase
from toplist.util.di.core import ProdConfigProvider
from toplist.util.di.domain import ProdDomainProvider
from toplist.util.di.infrastructure import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdPersistenceProvider,
    ProdStatusProvider,
    StatusProvider,
)
from toplist.util.error import DependencyInjectionError

PROVIDERS: list[type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable components
    ClockProvider,
    PersistenceProvider,
    StatusProvider,
]


def get_provider(
    base: type[ProviderBase], use_mock: bool = False
) -> type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Concrete providers have no implementations and are returned as-is.
    Swappable components return the subclass whose ``__is_mock__`` matches
    ``use_mock``. Mock subclasses live under tests/ and only exist once
    that package has been imported.

    Args:
        base: Entry from PROVIDERS
        use_mock: Whether to pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        DependencyInjectionError: If no implementation matches
    """
    implementations = base.implementations()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for component {base.__mock_component__!r}"
    )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "ClockProvider",
    "PersistenceProvider",
    "StatusProvider",
    "ProdClockProvider",
    "ProdPersistenceProvider",
    "ProdStatusProvider",
]
