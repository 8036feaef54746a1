"""PostgreSQL implementation of Community repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import asc, desc, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.domain.model import Community
from devforum.domain.repository import CommunityRepository, CommunitySortOrder
from devforum.domain.value import CommunityName, TagName
from devforum.persistence.mappers import community_to_dict, row_to_community
from devforum.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(self, stmt, search: Optional[str], public_only: bool):
        if public_only:
            stmt = stmt.where(communities_table.c.is_public.is_(True))
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    communities_table.c.name.ilike(pattern),
                    communities_table.c.display_name.ilike(pattern),
                    communities_table.c.description.ilike(pattern),
                )
            )
        return stmt

    async def find_by_name(
        self, name: CommunityName, for_update: bool = False
    ) -> Optional[Community]:
        """Find a community by its unique name."""
        stmt = select(communities_table).where(communities_table.c.name == name.root)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community(dict(row)) if row else None

    async def find_all(
        self,
        sort: CommunitySortOrder = CommunitySortOrder.MEMBERS,
        search: Optional[str] = None,
        public_only: bool = True,
        limit: Optional[int] = 20,
        offset: int = 0,
    ) -> List[Community]:
        """Find communities with filtering and pagination."""
        with logfire.span(
            "community_repository.find_all",
            sort=sort.value,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(communities_table), search, public_only)

            if sort == CommunitySortOrder.MEMBERS:
                stmt = stmt.order_by(
                    desc(communities_table.c.member_count),
                    desc(communities_table.c.post_count),
                )
            elif sort == CommunitySortOrder.POSTS:
                stmt = stmt.order_by(
                    desc(communities_table.c.post_count),
                    desc(communities_table.c.member_count),
                )
            elif sort == CommunitySortOrder.NEWEST:
                stmt = stmt.order_by(desc(communities_table.c.created_at))
            elif sort == CommunitySortOrder.NAME:
                stmt = stmt.order_by(asc(communities_table.c.name))

            if limit is not None:
                stmt = stmt.limit(limit)
            stmt = stmt.offset(offset)

            result = await self.session.execute(stmt)
            return [row_to_community(dict(row)) for row in result.mappings()]

    async def count(self, search: Optional[str] = None, public_only: bool = True) -> int:
        """Count communities matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(communities_table), search, public_only
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        existing = await self.session.execute(
            select(communities_table.c.id).where(
                communities_table.c.id == community.id
            )
        )
        community_dict = community_to_dict(community)

        if existing.first():
            stmt = (
                communities_table.update()
                .where(communities_table.c.id == community.id)
                .values(**community_dict)
            )
        else:
            stmt = communities_table.insert().values(**community_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return community

    async def increment_post_count(self, tags: Sequence[TagName]) -> int:
        """Atomically increment post_count of communities named after the tags."""
        if not tags:
            return 0
        stmt = (
            update(communities_table)
            .where(communities_table.c.name.in_([t.root for t in tags]))
            .values(post_count=communities_table.c.post_count + 1)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
