"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from board.util.di import PROVIDERS, Component, get_provider, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Args:
        unmock: Components that should use their production implementation

    Returns:
        Container usable directly or as a TestClient app's container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and e2e tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real persistence, needs postgres
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = []
    for base in PROVIDERS:
        use_mock = (
            base.__mock_component__ is not None
            and base.__mock_component__ not in unmock
        )
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, FastapiProvider())
