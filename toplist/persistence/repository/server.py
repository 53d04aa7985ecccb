"""PostgreSQL implementation of Server repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from toplist.domain.model import Server
from toplist.domain.repository import ServerFilters, ServerRepository
from toplist.domain.value import ServerId, ServerSortOrder, ServerStatus
from toplist.persistence.mappers import row_to_server, server_to_dict
from toplist.persistence.tables import servers_table


class PostgresServerRepository(ServerRepository):
    """PostgreSQL implementation of ServerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, server_id: ServerId) -> Optional[Server]:
        """Find a server by ID regardless of status."""
        stmt = select(servers_table).where(servers_table.c.id == server_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_server(row._asdict()) if row else None

    async def find_approved(
        self, filters: ServerFilters, now: datetime
    ) -> List[Server]:
        """Find approved servers matching the explore filters."""
        with logfire.span(
            "server_repository.find_approved", sort=filters.sort.value
        ):
            stmt = select(servers_table).where(
                servers_table.c.status == ServerStatus.APPROVED.value
            )

            if filters.name:
                stmt = stmt.where(
                    servers_table.c.name.icontains(filters.name, autoescape=True)
                )
            if filters.version:
                stmt = stmt.where(servers_table.c.version == filters.version)
            if filters.type:
                stmt = stmt.where(servers_table.c.type == filters.type)
            if filters.configuration:
                stmt = stmt.where(
                    servers_table.c.configuration == filters.configuration
                )
            if filters.max_exp is not None:
                stmt = stmt.where(servers_table.c.exp_rate <= filters.max_exp)

            if filters.sort == ServerSortOrder.NEWEST:
                primary = servers_table.c.created_at.desc()
            elif filters.sort == ServerSortOrder.OPENING_SOON:
                stmt = stmt.where(servers_table.c.opening_date > now)
                primary = servers_table.c.opening_date.asc()
            else:
                primary = servers_table.c.votes_count.desc()

            stmt = (
                stmt.order_by(
                    primary,
                    servers_table.c.is_featured.desc(),
                    servers_table.c.id.asc(),
                )
                .limit(filters.limit)
                .offset(filters.offset)
            )

            result = await self.session.execute(stmt)
            return [row_to_server(row._asdict()) for row in result.fetchall()]

    async def find_ranking(self, limit: int, offset: int) -> List[Server]:
        """Find approved servers ordered by votes_count DESC."""
        stmt = (
            select(servers_table)
            .where(servers_table.c.status == ServerStatus.APPROVED.value)
            .order_by(
                servers_table.c.votes_count.desc(),
                servers_table.c.is_featured.desc(),
                servers_table.c.id.asc(),
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_server(row._asdict()) for row in result.fetchall()]

    async def count_approved(self) -> int:
        """Count approved servers."""
        stmt = (
            select(func.count())
            .select_from(servers_table)
            .where(servers_table.c.status == ServerStatus.APPROVED.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def sum_votes_approved(self) -> int:
        """Sum votes_count over approved servers."""
        stmt = select(
            func.coalesce(func.sum(servers_table.c.votes_count), 0)
        ).where(servers_table.c.status == ServerStatus.APPROVED.value)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def increment_votes(self, server_id: ServerId) -> None:
        """Atomically increment votes_count by 1."""
        stmt = (
            servers_table.update()
            .where(servers_table.c.id == server_id)
            .values(votes_count=servers_table.c.votes_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def save(self, server: Server) -> Server:
        """Save a server (create)."""
        stmt = insert(servers_table).values(**server_to_dict(server))
        await self.session.execute(stmt)
        await self.session.flush()
        return server
