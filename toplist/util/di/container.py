"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from toplist.util.di import PROVIDERS, get_provider


def create_container(*extra_providers: Provider) -> AsyncContainer:
    """Build the production container.

    Every component uses its production implementation. Settings are read
    from the environment when first requested.

    Args:
        *extra_providers: Additional providers, appended last so they
            override earlier registrations

    Returns:
        Container ready to be attached to the FastAPI app
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider(), *extra_providers)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can use ``FromDishka``.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
