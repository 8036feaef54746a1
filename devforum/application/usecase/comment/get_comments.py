"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from devforum.application.usecase.views import load_authors
from devforum.domain.repository import UserRepository
from devforum.domain.service import CommentService
from devforum.domain.value import AnswerId

from .create_comment import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    answer_id: str


class GetCommentsResponse(BaseModel):
    """Comments on an answer, oldest first."""

    comments: list[CommentItem]


class GetCommentsUseCase:
    """Use case for reading the comments on an answer."""

    def __init__(
        self, comment_service: CommentService, user_repository: UserRepository
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            user_repository: User repository (author names)
        """
        self.comment_service = comment_service
        self.user_repository = user_repository

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the answer does not exist
        """
        comments = await self.comment_service.get_comments_for_answer(
            AnswerId(UUID(request.answer_id))
        )
        authors = await load_authors(
            self.user_repository, [c.author_id for c in comments]
        )
        return GetCommentsResponse(
            comments=[
                CommentItem(
                    comment_id=str(c.id),
                    answer_id=str(c.answer_id),
                    author_id=str(c.author_id),
                    author_username=(
                        authors[c.author_id].username.root
                        if c.author_id in authors
                        else None
                    ),
                    body=c.body,
                    created_at=c.created_at,
                )
                for c in comments
            ]
        )
