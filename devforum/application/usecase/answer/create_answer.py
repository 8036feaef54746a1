"""Create answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devforum.application.usecase.views import AnswerItem, answer_item
from devforum.domain.service import AnswerService, UserService
from devforum.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    author_id: str  # From authenticated user
    body: str = Field(min_length=1)


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerItem:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
            answer = await self.answer_service.create_answer(
                question_id=QuestionId(UUID(request.question_id)),
                author_id=author.id,
                body=request.body,
            )
            return answer_item(answer, author)
