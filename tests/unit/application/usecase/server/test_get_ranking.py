"""Unit tests for GetRankingUseCase."""

import pytest

from toplist.application.usecase.server import GetRankingRequest, GetRankingUseCase
from toplist.domain.repository import ServerRepository
from tests.conftest import make_server
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_ranks_continue_across_pages(unit_env):
    """The first entry of page 2 is ranked page_size + 1."""
    use_case = await unit_env.get(GetRankingUseCase)
    repo = await unit_env.get(ServerRepository)
    for votes in (10, 40, 30, 20):
        await repo.save(make_server(name=f"Votes {votes}", votes_count=votes))

    response = await use_case.execute(GetRankingRequest(page=2, page_size=2))

    assert response.total == 4
    assert response.page == 2
    assert response.page_size == 2
    assert [(s.rank, s.votes_count) for s in response.servers] == [(3, 20), (4, 10)]


@pytest.mark.asyncio
async def test_defaults(unit_env):
    use_case = await unit_env.get(GetRankingUseCase)

    response = await use_case.execute(GetRankingRequest())

    assert response.page == 1
    assert response.page_size == 15
    assert response.servers == []
    assert response.total == 0
