"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.domain.model import Comment
from devforum.domain.repository import CommentRepository
from devforum.domain.value import AnswerId, CommentId
from devforum.persistence.mappers import comment_to_dict, row_to_comment
from devforum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_answer(self, answer_id: AnswerId) -> List[Comment]:
        """Find all comments on an answer, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.answer_id == answer_id)
            .order_by(asc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment attached to the given answers."""
        if not answer_ids:
            return 0
        stmt = delete(comments_table).where(
            comments_table.c.answer_id.in_(list(answer_ids))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
