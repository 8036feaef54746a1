"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import asc, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from devforum.config import Settings
from devforum.domain.model import Question
from devforum.domain.repository import QuestionRepository, QuestionSortOrder
from devforum.domain.value import AnswerId, QuestionId, TagName, UserId, VotableType
from devforum.persistence.mappers import question_to_dict, row_to_question
from devforum.persistence.repository.votes import (
    delete_vote_set,
    fetch_vote_sets,
    replace_vote_set,
    vote_count_column,
)
from devforum.persistence.tables import answers_table, questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            settings: Application settings (score decay)
        """
        self.session = session
        self.settings = settings

    async def _fetch_answer_ids(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[AnswerId]]:
        """Fetch answer IDs for multiple questions in a single query."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table.c.id, answers_table.c.question_id)
            .where(answers_table.c.question_id.in_(question_ids))
            .order_by(answers_table.c.created_at)
        )
        result = await self.session.execute(stmt)

        answer_map: dict[UUID, list[AnswerId]] = defaultdict(list)
        for row in result.fetchall():
            answer_map[row.question_id].append(AnswerId(row.id))
        return answer_map

    async def _hydrate(self, rows) -> List[Question]:
        """Build Question models with their vote sets and answer IDs."""
        if not rows:
            return []

        question_ids = [row.id for row in rows]
        vote_map = await fetch_vote_sets(
            self.session, VotableType.QUESTION, question_ids
        )
        answer_map = await self._fetch_answer_ids(question_ids)

        return [
            row_to_question(
                row._asdict(),
                votes=vote_map.get(row.id, []),
                answer_ids=answer_map.get(row.id, []),
            )
            for row in rows
        ]

    def _filtered(self, stmt, tag: Optional[TagName], search: Optional[str]):
        if tag:
            stmt = stmt.where(questions_table.c.tags.any(tag.root))
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern),
                    questions_table.c.body.ilike(pattern),
                    func.array_to_string(questions_table.c.tags, " ").ilike(pattern),
                )
            )
        return stmt

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id",
            question_id=str(question_id),
            for_update=for_update,
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            questions = await self._hydrate([row])
            return questions[0]

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filtered(select(questions_table), tag, search)
            vote_count = vote_count_column(VotableType.QUESTION, questions_table.c.id)

            if sort == QuestionSortOrder.NEWEST:
                stmt = stmt.order_by(desc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.OLDEST:
                stmt = stmt.order_by(asc(questions_table.c.created_at))
            elif sort == QuestionSortOrder.VOTES:
                stmt = stmt.order_by(
                    desc(vote_count), desc(questions_table.c.created_at)
                )
            elif sort == QuestionSortOrder.SCORE:
                # vote_count - age_days * decay_per_day, computed at read time
                age_days = (
                    func.extract("epoch", func.now() - questions_table.c.created_at)
                    / 86400
                )
                score = vote_count - age_days * self.settings.ranking.decay_per_day
                stmt = stmt.order_by(desc(score))
            elif sort == QuestionSortOrder.VIEWS:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = await self._hydrate(result.fetchall())
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self, tag: Optional[TagName] = None, search: Optional[str] = None
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._filtered(
            select(func.count()).select_from(questions_table), tag, search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        """Find questions by a specific author."""
        stmt = (
            select(questions_table)
            .where(questions_table.c.author_id == author_id)
            .order_by(desc(questions_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.fetchall())

    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions by a specific author."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.author_id == author_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def tag_counts(
        self, limit: Optional[int] = None
    ) -> list[tuple[TagName, int]]:
        """Count questions per tag, most used first."""
        with logfire.span("question_repository.tag_counts", limit=limit):
            tags = select(func.unnest(questions_table.c.tags).label("tag")).subquery()
            stmt = (
                select(tags.c.tag, func.count().label("count"))
                .group_by(tags.c.tag)
                .order_by(desc("count"), asc(tags.c.tag))
            )
            if limit is not None:
                stmt = stmt.limit(limit)

            result = await self.session.execute(stmt)
            return [(TagName(row.tag), row.count) for row in result.fetchall()]

    async def save(self, question: Question) -> Question:
        """Save a question (create or update) with its vote set."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            votes=len(question.votes),
        ):
            existing = await self.session.execute(
                select(questions_table.c.id).where(questions_table.c.id == question.id)
            )
            question_dict = question_to_dict(question)

            if existing.first():
                # Views are owned by increment_views
                question_dict.pop("views")
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
            else:
                stmt = questions_table.insert().values(**question_dict)
            await self.session.execute(stmt)

            await replace_vote_set(
                self.session, VotableType.QUESTION, question.id, question.votes
            )

            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question and its vote set (hard delete)."""
        await delete_vote_set(self.session, VotableType.QUESTION, question_id)
        stmt = questions_table.delete().where(questions_table.c.id == question_id)
        await self.session.execute(stmt)
        await self.session.flush()
