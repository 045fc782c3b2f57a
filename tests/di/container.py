"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from materia.persistence.repository.inmemory import InMemoryStore
from materia.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None,
    store: InMemoryStore | None = None,
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        store: In-memory tables shared by the mock repositories

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence, in-memory files
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.is_mockable() and base.__mock_component__ not in unmock
        provider_class = get_provider(base, use_mock=use_mock)

        provider_instances.append(provider_class())

    context = {}
    if "persistence" not in unmock:
        context[InMemoryStore] = store or InMemoryStore()

    # FastapiProvider exposes the Request to providers when used by the app
    return make_async_container(*provider_instances, FastapiProvider(), context=context)


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    all_components = {p.__mock_component__ for p in PROVIDERS if p.is_mockable()}

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
