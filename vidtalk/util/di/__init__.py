"""Dependency injection module.

Providers are listed once in ``PROVIDERS``. A base with subclasses is a
mockable component; the subclass whose ``__is_mock__`` matches the request
is used. A base without subclasses is used as-is.
"""

from typing import Iterable, Type

from dishka import Provider

from vidtalk.util.di.application import ProdApplicationProvider
from vidtalk.util.di.base import Component, ProviderBase
from vidtalk.util.di.core import ProdConfigProvider
from vidtalk.util.di.domain import ProdDomainProvider
from vidtalk.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from vidtalk.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Mockable: in-memory store in tests, PostgreSQL otherwise
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of every component that has a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__subclasses__() and base.__mock_component__
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class that should be instantiated.

    Raises:
        DependencyInjectionError: If the component has no implementation
            of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise DependencyInjectionError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )


def select_providers(mocked: Iterable[Component] = ()) -> list[Provider]:
    """Instantiate one provider per entry in ``PROVIDERS``.

    Args:
        mocked: Components to back with their mock implementation

    Returns:
        Provider instances ready for ``make_async_container``

    Raises:
        DependencyInjectionError: If a named component is unknown
    """
    mocked = set(mocked)
    unknown = mocked - mockable_components()
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    return [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "select_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
