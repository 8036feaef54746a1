"""Comment domain service."""

from datetime import UTC, datetime
from uuid import uuid4

import logfire

from devforum.domain.error import NotFoundError
from devforum.domain.model import Comment
from devforum.domain.repository import AnswerRepository, CommentRepository
from devforum.domain.value import AnswerId, CommentId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            answer_repository: Answer repository
        """
        self.comment_repository = comment_repository
        self.answer_repository = answer_repository

    async def create_comment(
        self, answer_id: AnswerId, author_id: UserId, body: str
    ) -> Comment:
        """Comment on an answer.

        Args:
            answer_id: Answer being commented on
            author_id: Comment author
            body: Comment text (trimmed, 1-1000 characters)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            answer_id=str(answer_id),
            author_id=str(author_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Comment on non-existent answer", answer_id=str(answer_id))
                raise NotFoundError("Answer", str(answer_id))

            comment = Comment(
                id=CommentId(uuid4()),
                answer_id=answer_id,
                author_id=author_id,
                body=body.strip(),
                created_at=datetime.now(UTC),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), answer_id=str(answer_id)
            )
            return saved

    async def get_comments_for_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Comments on an answer, oldest first.

        Raises:
            NotFoundError: If the answer does not exist
        """
        with logfire.span(
            "comment_service.get_comments_for_answer", answer_id=str(answer_id)
        ):
            if not await self.answer_repository.find_by_id(answer_id):
                raise NotFoundError("Answer", str(answer_id))
            return await self.comment_repository.find_by_answer(answer_id)
