"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.domain.model import User
from devforum.domain.repository import UserRepository
from devforum.domain.value import UserId, Username
from devforum.persistence.mappers import row_to_user, user_to_dict
from devforum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (case-insensitive)."""
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            # Reputation is owned by adjust_reputation
            user_dict.pop("reputation")
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            stmt = users_table.insert().values(**user_dict)
            await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> Optional[int]:
        """Atomically add delta to reputation, clamped at 0."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(reputation=func.greatest(users_table.c.reputation + delta, 0))
            .returning(users_table.c.reputation)
        )
        result = await self.session.execute(stmt)
        reputation = result.scalar_one_or_none()
        await self.session.flush()
        return reputation
