"""Integration tests for PostgresVoteRepository and the cooldown constraint."""

import random
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from toplist.domain.error import CooldownConflictError
from toplist.domain.model import Vote
from toplist.domain.repository import ServerRepository, VoteRepository
from toplist.domain.service import VoteService
from toplist.domain.value import ServerId, UserId, VoteId
from tests.conftest import make_server
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

T0 = datetime(2025, 5, 1, 9, 30, tzinfo=timezone.utc)


def _unique_server_id() -> ServerId:
    return ServerId(random.randint(10_000_000, 2**40))


def _vote(user_id, server_id, voted_at) -> Vote:
    return Vote(id=VoteId(uuid4()), user_id=user_id, server_id=server_id, voted_at=voted_at)


class TestCooldownConstraint:
    """The exclusion constraint rejects overlapping votes at insert time."""

    @pytest.mark.asyncio
    async def test_overlapping_insert_is_rejected(self, integration_env):
        server_repo = await integration_env.get(ServerRepository)
        vote_repo = await integration_env.get(VoteRepository)
        server = await server_repo.save(make_server(id=_unique_server_id()))
        user_id = UserId(uuid4())

        await vote_repo.save(_vote(user_id, server.id, T0))

        with pytest.raises(CooldownConflictError):
            await vote_repo.save(_vote(user_id, server.id, T0 + timedelta(hours=23)))

        # The savepoint kept the request transaction usable
        assert await vote_repo.count_by_server(server.id) == 1

    @pytest.mark.asyncio
    async def test_adjacent_windows_are_allowed(self, integration_env):
        server_repo = await integration_env.get(ServerRepository)
        vote_repo = await integration_env.get(VoteRepository)
        server = await server_repo.save(make_server(id=_unique_server_id()))
        user_id = UserId(uuid4())

        await vote_repo.save(_vote(user_id, server.id, T0))
        await vote_repo.save(_vote(user_id, server.id, T0 + timedelta(hours=24)))

        assert await vote_repo.count_by_server(server.id) == 2

    @pytest.mark.asyncio
    async def test_vote_for_missing_server_is_not_a_cooldown_conflict(
        self, integration_env
    ):
        """A foreign key violation surfaces as a plain IntegrityError."""
        vote_repo = await integration_env.get(VoteRepository)
        missing = _unique_server_id()

        with pytest.raises(IntegrityError):
            await vote_repo.save(_vote(UserId(uuid4()), missing, T0))

        assert await vote_repo.count_by_server(missing) == 0

    @pytest.mark.asyncio
    async def test_find_latest_since(self, integration_env):
        server_repo = await integration_env.get(ServerRepository)
        vote_repo = await integration_env.get(VoteRepository)
        server = await server_repo.save(make_server(id=_unique_server_id()))
        user_id = UserId(uuid4())
        vote = await vote_repo.save(_vote(user_id, server.id, T0))

        found = await vote_repo.find_latest_since(user_id, server.id, T0 - timedelta(hours=1))
        missed = await vote_repo.find_latest_since(user_id, server.id, T0)

        assert found is not None
        assert found.id == vote.id
        assert missed is None


class TestVoteAdmission:
    """Vote admission against the real schema."""

    @pytest.mark.asyncio
    async def test_vote_increments_counter(self, integration_env):
        server_repo = await integration_env.get(ServerRepository)
        vote_service = await integration_env.get(VoteService)
        server = await server_repo.save(make_server(id=_unique_server_id(), votes_count=4))

        await vote_service.cast_vote(UserId(uuid4()), server.id)

        updated = await server_repo.find_by_id(server.id)
        assert updated.votes_count == 5
