"""Question domain service."""

from datetime import UTC, datetime
from typing import Optional
from uuid import uuid4

import logfire

from devforum.config import RankingSettings
from devforum.domain.error import NotAuthorizedError, NotFoundError
from devforum.domain.model import Question, User
from devforum.domain.repository import (
    AnswerRepository,
    CommentRepository,
    CommunityRepository,
    QuestionRepository,
    QuestionSortOrder,
)
from devforum.domain.value import QuestionId, TagName, UserId

from .base import Service
from .ranking import question_score


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
        community_repository: CommunityRepository,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            comment_repository: Comment repository
            community_repository: Community repository
            ranking_settings: Score decay configuration
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository
        self.community_repository = community_repository
        self.ranking_settings = ranking_settings

    async def create_question(
        self, author_id: UserId, title: str, body: str, tags: list[TagName]
    ) -> Question:
        """Create a question and count it in the communities matching its tags.

        Communities are never created here; tags without a community record
        are left for read-time reconciliation.

        Args:
            author_id: Question author
            title: Question title
            body: Question body
            tags: Normalized tags (at least one)

        Returns:
            Created question
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            tags=[t.root for t in tags],
        ):
            now = datetime.now(UTC)
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                body=body,
                author_id=author_id,
                tags=tags,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)

            updated = await self.community_repository.increment_post_count(saved.tags)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                communities_updated=updated,
            )
            return saved

    async def get_question(
        self, question_id: QuestionId, count_view: bool = True
    ) -> Question:
        """Get a question, recording a view by default.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "question_service.get_question", question_id=str(question_id)
        ):
            if count_view:
                await self.question_repository.increment_views(question_id)
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
                raise NotFoundError("Question", str(question_id))
            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions with the total number matching the filters."""
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            tag=tag.root if tag else None,
            search=search,
            limit=limit,
            offset=offset,
        ):
            questions = await self.question_repository.find_all(
                sort=sort, tag=tag, search=search, limit=limit, offset=offset
            )
            total = await self.question_repository.count(tag=tag, search=search)
            return questions, total

    async def get_questions_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> tuple[list[Question], int]:
        """Questions asked by a user, newest first, with the total count."""
        questions = await self.question_repository.find_by_author(
            author_id, limit, offset
        )
        total = await self.question_repository.count_by_author(author_id)
        return questions, total

    def score(self, question: Question, now: Optional[datetime] = None) -> float:
        """Time-decayed score of a question at the given time (default: now)."""
        return question_score(
            question.vote_count,
            question.created_at,
            now or datetime.now(UTC),
            self.ranking_settings.decay_per_day,
        )

    async def delete_question(self, question_id: QuestionId, actor: User) -> None:
        """Delete a question with its answers and their comments.

        Args:
            question_id: Question to delete
            actor: User requesting the deletion

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):
            question = await self.question_repository.find_by_id(
                question_id, for_update=True
            )
            if not question:
                raise NotFoundError("Question", str(question_id))
            if question.author_id != actor.id and not actor.is_admin:
                logfire.warn(
                    "Question deletion rejected",
                    question_id=str(question_id),
                    actor_id=str(actor.id),
                )
                raise NotAuthorizedError(
                    "delete", "question", str(question_id), str(actor.id)
                )

            answers = await self.answer_repository.find_by_question(question_id)
            answer_ids = [a.id for a in answers]
            comments = await self.comment_repository.delete_by_answers(answer_ids)
            for answer_id in answer_ids:
                await self.answer_repository.delete(answer_id)
            await self.question_repository.delete(question_id)

            logfire.info(
                "Question deleted",
                question_id=str(question_id),
                answers=len(answer_ids),
                comments=comments,
            )
