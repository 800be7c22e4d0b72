"""Dependency injection wiring for Atelier."""

from atelier.util.di.application import ProdApplicationProvider
from atelier.util.di.base import Component, ProviderBase
from atelier.util.di.core import ProdConfigProvider
from atelier.util.di.domain import ProdDomainProvider
from atelier.util.di.infrastructure import PersistenceProvider
from atelier.util.error import DependencyInjectionError

PROVIDERS: tuple[type[ProviderBase], ...] = (
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
)

SWAPPABLE: frozenset[Component] = frozenset(
    base.__component__ for base in PROVIDERS if base.__component__
)


def get_provider(
    base: type[ProviderBase], in_memory: bool = False
) -> type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Concrete providers come back unchanged. A component base resolves to
    the imported subclass whose ``__in_memory__`` flag matches.

    Raises:
        DependencyInjectionError: If that variant was never imported
    """
    if base.__component__ is None:
        return base

    variants = {impl.__in_memory__: impl for impl in base.__subclasses__()}
    if in_memory not in variants:
        kind = "in-memory" if in_memory else "production"
        raise DependencyInjectionError(
            f"No {kind} provider registered for {base.__component__}"
        )
    return variants[in_memory]


__all__ = [
    "Component",
    "PROVIDERS",
    "ProviderBase",
    "SWAPPABLE",
    "get_provider",
]
