"""PostgreSQL implementation of Community repository."""

from typing import List, Optional

from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from eduforum.domain.model import Community
from eduforum.domain.repository import CommunityRepository
from eduforum.domain.value import CommunityId
from eduforum.persistence.mappers import community_to_dict, row_to_community
from eduforum.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_community(row._asdict()) if row else None

    async def find_all(self) -> List[Community]:
        """List all communities, newest first."""
        stmt = select(communities_table).order_by(desc(communities_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_community(row._asdict()) for row in result.fetchall()]

    async def save(self, community: Community) -> Community:
        """Save a community (create)."""
        stmt = insert(communities_table).values(**community_to_dict(community))
        await self.session.execute(stmt)
        await self.session.flush()
        return community

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community."""
        stmt = delete(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
