"""Paginated question and answer listings for one user."""

from pydantic import BaseModel, Field

from devforum.application.usecase.views import (
    AnswerItem,
    QuestionItem,
    answer_item,
    question_item,
)
from devforum.domain.service import AnswerService, QuestionService, UserService
from devforum.domain.value import Username


class UserContentRequest(BaseModel):
    """Request for one page of a user's posts."""

    username: Username
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class UserQuestionsResponse(BaseModel):
    """Questions asked by a user, newest first."""

    questions: list[QuestionItem]
    total: int
    total_pages: int
    current_page: int


class UserAnswersResponse(BaseModel):
    """Answers written by a user, newest first."""

    answers: list[AnswerItem]
    total: int
    total_pages: int
    current_page: int


class ListUserQuestionsUseCase:
    """Use case for listing a user's questions."""

    def __init__(
        self, user_service: UserService, question_service: QuestionService
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service

    async def execute(self, request: UserContentRequest) -> UserQuestionsResponse:
        """Execute list user questions flow.

        Raises:
            NotFoundError: If no user has this username
        """
        user = await self.user_service.get_by_username(request.username)
        questions, total = await self.question_service.get_questions_by_author(
            user.id, limit=request.limit, offset=request.offset
        )
        return UserQuestionsResponse(
            questions=[
                question_item(q, user, self.question_service.score(q))
                for q in questions
            ],
            total=total,
            total_pages=-(-total // request.limit),
            current_page=request.page,
        )


class ListUserAnswersUseCase:
    """Use case for listing a user's answers."""

    def __init__(self, user_service: UserService, answer_service: AnswerService) -> None:
        self.user_service = user_service
        self.answer_service = answer_service

    async def execute(self, request: UserContentRequest) -> UserAnswersResponse:
        """Execute list user answers flow.

        Raises:
            NotFoundError: If no user has this username
        """
        user = await self.user_service.get_by_username(request.username)
        answers, total = await self.answer_service.get_answers_by_author(
            user.id, limit=request.limit, offset=request.offset
        )
        return UserAnswersResponse(
            answers=[answer_item(a, user) for a in answers],
            total=total,
            total_pages=-(-total // request.limit),
            current_page=request.page,
        )
