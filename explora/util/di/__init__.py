"""Dishka wiring for Explora.

Config, domain services and use cases have one implementation each.
Persistence is the only swappable component: production seeds the
location repository from the city catalog, tests get empty repositories
unless they ask for ``unmock={"persistence"}``.
"""

from typing import Type

from explora.util.di.application import ProdApplicationProvider
from explora.util.di.base import Component, ProviderBase
from explora.util.di.core import ProdConfigProvider
from explora.util.di.domain import ProdDomainProvider
from explora.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider
from explora.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a listed provider to the class that should be instantiated.

    A provider without subclasses is returned as is. For a swappable
    component the subclass whose ``__is_mock__`` equals ``use_mock`` wins.

    Raises:
        DependencyInjectionError: No subclass matches the requested flavour
    """
    candidates = base.__subclasses__()
    if not candidates:
        return base

    for candidate in candidates:
        if candidate.__is_mock__ is use_mock:
            return candidate

    flavour = "mock" if use_mock else "production"
    name = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"{name} has no {flavour} provider registered")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
]
