"""Unit tests for the in-memory vote repository."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from toplist.domain.error import CooldownConflictError
from toplist.domain.model import Vote
from toplist.domain.value import ServerId, UserId, VoteId
from toplist.persistence.repository.inmemory import (
    InMemoryStore,
    InMemoryVoteRepository,
)

T0 = datetime(2025, 3, 1, 8, 0, tzinfo=timezone.utc)


def _vote(user_id, server_id, voted_at) -> Vote:
    return Vote(id=VoteId(uuid4()), user_id=user_id, server_id=server_id, voted_at=voted_at)


@pytest.fixture
def repo():
    return InMemoryVoteRepository(InMemoryStore(), cooldown=timedelta(hours=24))


@pytest.mark.asyncio
async def test_overlapping_vote_violates_constraint(repo):
    user_id, server_id = UserId(uuid4()), ServerId(1)
    await repo.save(_vote(user_id, server_id, T0))

    with pytest.raises(CooldownConflictError):
        await repo.save(_vote(user_id, server_id, T0 + timedelta(hours=12)))

    assert await repo.count_by_server(server_id) == 1


@pytest.mark.asyncio
async def test_adjacent_windows_do_not_overlap(repo):
    user_id, server_id = UserId(uuid4()), ServerId(1)
    await repo.save(_vote(user_id, server_id, T0))
    await repo.save(_vote(user_id, server_id, T0 + timedelta(hours=24)))

    assert await repo.count_by_server(server_id) == 2


@pytest.mark.asyncio
async def test_find_latest_since_returns_newest_match(repo):
    user_id, server_id = UserId(uuid4()), ServerId(1)
    await repo.save(_vote(user_id, server_id, T0))
    newest = await repo.save(_vote(user_id, server_id, T0 + timedelta(days=2)))
    await repo.save(_vote(UserId(uuid4()), server_id, T0 + timedelta(days=3)))

    found = await repo.find_latest_since(user_id, server_id, T0 + timedelta(hours=1))

    assert found == newest


@pytest.mark.asyncio
async def test_find_latest_since_is_exclusive(repo):
    """A vote exactly at ``since`` is outside the window."""
    user_id, server_id = UserId(uuid4()), ServerId(1)
    await repo.save(_vote(user_id, server_id, T0))

    assert await repo.find_latest_since(user_id, server_id, T0) is None
