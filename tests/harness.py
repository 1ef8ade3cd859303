"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio
from fastapi import FastAPI

from eduforum.interface.api.app import create_app
from eduforum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_community(unit_env):
            service = await unit_env.get(CommunityService)
            community = await service.create_community("CS Majors", "All CS")
            assert community.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_test_app() -> FastAPI:
    """Build the API on an all-mock container.

    Every call gets fresh in-memory repositories and session store, so each
    test sees an empty forum.
    """
    return create_app(build_test_container())
