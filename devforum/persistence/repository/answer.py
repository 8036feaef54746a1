"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.domain.model import Answer
from devforum.domain.repository import AnswerRepository
from devforum.domain.value import AnswerId, QuestionId, UserId, VotableType
from devforum.persistence.mappers import answer_to_dict, row_to_answer
from devforum.persistence.repository.votes import (
    delete_vote_set,
    fetch_vote_sets,
    replace_vote_set,
)
from devforum.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _hydrate(self, rows) -> List[Answer]:
        """Build Answer models with their vote sets."""
        if not rows:
            return []
        vote_map = await fetch_vote_sets(
            self.session, VotableType.ANSWER, [row.id for row in rows]
        )
        return [
            row_to_answer(row._asdict(), votes=vote_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None
        answers = await self._hydrate([row])
        return answers[0]

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(asc(answers_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.fetchall())

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        """Find answers by a specific author, newest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.author_id == author_id)
            .order_by(desc(answers_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.fetchall())

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by a specific author."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(answers_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update) with its vote set."""
        with logfire.span(
            "answer_repository.save",
            answer_id=str(answer.id),
            votes=len(answer.votes),
        ):
            existing = await self.session.execute(
                select(answers_table.c.id).where(answers_table.c.id == answer.id)
            )
            answer_dict = answer_to_dict(answer)

            if existing.first():
                stmt = (
                    answers_table.update()
                    .where(answers_table.c.id == answer.id)
                    .values(**answer_dict)
                )
            else:
                stmt = answers_table.insert().values(**answer_dict)
            await self.session.execute(stmt)

            await replace_vote_set(
                self.session, VotableType.ANSWER, answer.id, answer.votes
            )

            await self.session.flush()
            return answer

    async def unaccept_others(
        self, question_id: QuestionId, keep: AnswerId
    ) -> List[AnswerId]:
        """Clear is_accepted on every other accepted answer of the question."""
        stmt = (
            update(answers_table)
            .where(
                and_(
                    answers_table.c.question_id == question_id,
                    answers_table.c.id != keep,
                    answers_table.c.is_accepted.is_(True),
                )
            )
            .values(is_accepted=False, updated_at=func.now())
            .returning(answers_table.c.id)
        )
        result = await self.session.execute(stmt)
        ids = [AnswerId(row.id) for row in result.fetchall()]
        await self.session.flush()
        return ids

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer and its vote set (hard delete)."""
        await delete_vote_set(self.session, VotableType.ANSWER, answer_id)
        stmt = answers_table.delete().where(answers_table.c.id == answer_id)
        await self.session.execute(stmt)
        await self.session.flush()
