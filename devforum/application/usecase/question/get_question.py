"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from devforum.application.usecase.views import (
    AnswerItem,
    QuestionItem,
    answer_item,
    load_authors,
    my_vote,
    question_item,
)
from devforum.domain.repository import UserRepository
from devforum.domain.service import AnswerService, QuestionService
from devforum.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Question with its answers in display order."""

    question: QuestionItem
    my_vote: int | None
    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for viewing a question. Each view is counted."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            user_repository: User repository (author details)
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.user_repository = user_repository

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Answers are ordered accepted first, then by vote count, then oldest first.

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.get_question(
            QuestionId(UUID(request.question_id))
        )
        answers = await self.answer_service.get_answers_for_question(question.id)
        viewer = UserId(UUID(request.user_id)) if request.user_id else None

        authors = await load_authors(
            self.user_repository,
            [question.author_id, *(a.author_id for a in answers)],
        )

        return GetQuestionResponse(
            question=question_item(
                question,
                authors.get(question.author_id),
                self.question_service.score(question),
            ),
            my_vote=my_vote(question, viewer),
            answers=[answer_item(a, authors.get(a.author_id), viewer) for a in answers],
        )
