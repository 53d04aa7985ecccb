"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL database is reachable at DATABASE__URL
with migrations applied.
"""

import httpx
import pytest_asyncio

from toplist.interface.api.app import create_app
from toplist.util.di import Component
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
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for creating API client fixtures.

    The fixture yields ``(client, container)``: an ``httpx.AsyncClient``
    talking to the app in-process, and the APP container behind it, so
    tests can reach the in-memory store, the frozen clock or the mock
    probe through ``await container.get(...)``.
    """

    @pytest_asyncio.fixture
    async def _client():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container=container)
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(
            transport=transport, base_url="http://testserver"
        ) as client:
            yield client, container

        await container.close()

    return _client
