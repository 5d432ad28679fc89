"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from explora.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container the API runs with.

    Every swappable component resolves to its production provider, so the
    location repository is seeded from the configured catalog on first use.

    Returns:
        Container with production providers
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request object to REQUEST-scoped providers
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app; tests call this again to swap it."""
    setup_dishka(container, app)
