"""Dependency injection module."""

from typing import Type

from commentstreams.util.di.application import ProdApplicationProvider
from commentstreams.util.di.base import Component, ProviderBase
from commentstreams.util.di.core import ProdConfigProvider
from commentstreams.util.di.domain import ProdDomainProvider
from commentstreams.util.di.infrastructure import (
    NotificationProvider,
    PersistenceProvider,
    ProdNotificationProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    PersistenceProvider,
    NotificationProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for a PROVIDERS entry.

    Entries without subclasses are concrete and returned unchanged. Entries
    with subclasses are mockable components: the subclass whose ``__is_mock__``
    matches ``use_mock`` is returned.

    Raises:
        ValueError: If the component has no implementation of the requested kind
    """
    implementations = {
        getattr(impl, "__is_mock__", False): impl for impl in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        component = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {component}") from None


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "NotificationProvider",
    "PersistenceProvider",
    # Infrastructure implementations
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
