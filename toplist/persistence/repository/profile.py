"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from toplist.domain.model import Profile
from toplist.domain.repository import ProfileRepository
from toplist.domain.value import Username
from toplist.persistence.mappers import profile_to_dict, row_to_profile
from toplist.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username."""
        # Extract primitive value from value object
        stmt = select(profiles_table).where(
            profiles_table.c.username == username.root
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def count(self) -> int:
        """Count all profiles."""
        stmt = select(func.count()).select_from(profiles_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create)."""
        stmt = insert(profiles_table).values(**profile_to_dict(profile))
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
