"""Production container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from materia.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the production implementation of every component.

    Settings are read from the environment when first requested.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Open a request scope per HTTP request and expose the container on ``app.state``."""
    setup_dishka(container, app)
