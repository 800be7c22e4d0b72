"""Container assembly."""

from collections.abc import Iterable

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from atelier.util.di import PROVIDERS, SWAPPABLE, Component, get_provider
from atelier.util.error import DependencyInjectionError


def create_container(in_memory: Iterable[Component] = ()) -> AsyncContainer:
    """Assemble the application container.

    The API runs with no arguments. Test suites register in-memory
    providers first and then name the components to swap, for example
    ``create_container(in_memory={"persistence"})``.

    Raises:
        DependencyInjectionError: If an unknown component is named
    """
    swapped = frozenset(in_memory)
    unknown = swapped - SWAPPABLE
    if unknown:
        raise DependencyInjectionError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, in_memory=base.__component__ in swapped)()
        for base in PROVIDERS
    ]
    # FastapiProvider makes the current Request resolvable
    return make_async_container(*providers, FastapiProvider())
