"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import logfire

from toplist.config import AuthSettings
from toplist.domain.model import Profile, Server
from toplist.domain.repository import ServerRepository
from toplist.domain.value import ProfileRole, ServerId, ServerStatus, UserId, Username
from toplist.util.jwt import create_token

# Local-only telemetry for the test session
logfire.configure(send_to_logfire=False, console=False)

_server_ids = iter(range(1, 1_000_000))


def make_server(**overrides) -> Server:
    """Build an approved server with sensible defaults.

    Args:
        **overrides: Field values to replace

    Returns:
        Server domain model
    """
    fields = {
        "id": ServerId(next(_server_ids)),
        "name": "Test Server",
        "description": "A test server",
        "version": "Season 6",
        "type": "PvP",
        "configuration": "Low",
        "exp_rate": 100,
        "drop_rate": 20,
        "website_url": "https://test-server.example",
        "image_url": None,
        "banner_url": None,
        "status": ServerStatus.APPROVED,
        "is_featured": False,
        "votes_count": 0,
        "opening_date": None,
        "owner_id": None,
        "created_at": datetime(2024, 12, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Server(**fields)


def make_profile(username: str = "player_one", **overrides) -> Profile:
    """Build a profile with sensible defaults."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "email": f"{username}@example.com",
        "avatar_url": None,
        "role": ProfileRole.USER,
        "created_at": datetime(2024, 12, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Profile(**fields)


def make_token(
    user_id: UUID | None = None,
    settings: AuthSettings | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Create a bearer token signed with the test settings."""
    return create_token(
        str(user_id or uuid4()),
        settings or AuthSettings(),
        expires_in=expires_in,
    )


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


async def seed_server(container, **overrides) -> Server:
    """Store a server through the container's repository.

    Args:
        container: APP container of the app under test
        **overrides: Field values passed to ``make_server``
    """
    async with container() as request_container:
        repo = await request_container.get(ServerRepository)
        return await repo.save(make_server(**overrides))
