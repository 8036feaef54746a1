"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from devforum.domain.service import CommentService, UserService
from devforum.domain.value import AnswerId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    answer_id: str
    author_id: str  # From authenticated user
    body: str = Field(min_length=1, max_length=1000)


class CommentItem(BaseModel):
    """Comment in responses."""

    comment_id: str
    answer_id: str
    author_id: str
    author_username: str | None
    body: str
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on an answer."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        comment = await self.comment_service.create_comment(
            answer_id=AnswerId(UUID(request.answer_id)),
            author_id=author.id,
            body=request.body,
        )
        return CommentItem(
            comment_id=str(comment.id),
            answer_id=str(comment.answer_id),
            author_id=str(comment.author_id),
            author_username=author.username.root,
            body=comment.body,
            created_at=comment.created_at,
        )
