"""Shared response models for server use cases."""

from datetime import datetime

from pydantic import BaseModel

from toplist.domain.model import Server
from toplist.domain.value import ServerStatus


class ServerInfo(BaseModel):
    """Public view of a server listing."""

    id: int
    name: str
    description: str | None
    version: str | None
    type: str | None
    configuration: str | None
    exp_rate: int | None
    drop_rate: int | None
    website_url: str | None
    image_url: str | None
    banner_url: str | None
    status: ServerStatus
    is_featured: bool
    votes_count: int
    opening_date: datetime | None
    created_at: datetime

    @classmethod
    def from_server(cls, server: Server) -> "ServerInfo":
        """Build the public view of a server."""
        return cls(
            id=server.id,
            name=server.name,
            description=server.description,
            version=server.version,
            type=server.type,
            configuration=server.configuration,
            exp_rate=server.exp_rate,
            drop_rate=server.drop_rate,
            website_url=server.website_url,
            image_url=server.image_url,
            banner_url=server.banner_url,
            status=server.status,
            is_featured=server.is_featured,
            votes_count=server.votes_count,
            opening_date=server.opening_date,
            created_at=server.created_at,
        )
