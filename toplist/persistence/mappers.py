"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from datetime import timedelta
from typing import Any, Dict
from uuid import UUID

from toplist.domain.model import Profile, Server, Vote
from toplist.domain.value import (
    ProfileRole,
    ServerId,
    ServerStatus,
    UserId,
    Username,
    VoteId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_server(row: Dict[str, Any]) -> Server:
    """Convert database row to Server domain model.

    Args:
        row: Database row as dict

    Returns:
        Server domain model
    """
    owner_id = row.get("owner_id")
    return Server(
        id=ServerId(row["id"]),
        name=row["name"],
        description=row.get("description"),
        version=row.get("version"),
        type=row.get("type"),
        configuration=row.get("configuration"),
        exp_rate=row.get("exp_rate"),
        drop_rate=row.get("drop_rate"),
        website_url=row.get("website_url"),
        image_url=row.get("image_url"),
        banner_url=row.get("banner_url"),
        status=ServerStatus(row["status"]),
        is_featured=row["is_featured"],
        votes_count=row["votes_count"],
        opening_date=row.get("opening_date"),
        owner_id=UserId(_uuid(owner_id)) if owner_id is not None else None,
        created_at=row["created_at"],
    )


def server_to_dict(server: Server) -> Dict[str, Any]:
    """Convert Server domain model to database dict.

    Args:
        server: Server domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": server.id,
        "name": server.name,
        "description": server.description,
        "version": server.version,
        "type": server.type,
        "configuration": server.configuration,
        "exp_rate": server.exp_rate,
        "drop_rate": server.drop_rate,
        "website_url": server.website_url,
        "image_url": server.image_url,
        "banner_url": server.banner_url,
        "status": server.status.value,
        "is_featured": server.is_featured,
        "votes_count": server.votes_count,
        "opening_date": server.opening_date,
        "owner_id": server.owner_id,
        "created_at": server.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        server_id=ServerId(row["server_id"]),
        voted_at=row["voted_at"],
    )


def vote_to_dict(vote: Vote, cooldown: timedelta) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model
        cooldown: Cooldown window, used to fill cooldown_ends_at

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "server_id": vote.server_id,
        "voted_at": vote.voted_at,
        "cooldown_ends_at": vote.voted_at + cooldown,
    }


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    return Profile(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        role=ProfileRole(row["role"]),
        created_at=row["created_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": profile.id,
        "username": profile.username.root,
        "email": profile.email,
        "avatar_url": profile.avatar_url,
        "role": profile.role.value,
        "created_at": profile.created_at,
    }
