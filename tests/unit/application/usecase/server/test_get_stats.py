"""Unit tests for GetGlobalStatsUseCase."""

import pytest

from toplist.application.usecase.server import GetGlobalStatsUseCase
from toplist.domain.repository import ProfileRepository, ServerRepository
from toplist.domain.value import ServerStatus
from tests.conftest import make_profile, make_server
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_global_stats(unit_env):
    use_case = await unit_env.get(GetGlobalStatsUseCase)
    server_repo = await unit_env.get(ServerRepository)
    profile_repo = await unit_env.get(ProfileRepository)
    await server_repo.save(make_server(votes_count=12))
    await server_repo.save(make_server(votes_count=30))
    await server_repo.save(make_server(status=ServerStatus.PENDING, votes_count=0))
    await profile_repo.save(make_profile("first_user"))

    stats = await use_case.execute()

    assert stats.total_servers == 2
    assert stats.total_users == 1
    assert stats.total_votes == 42
