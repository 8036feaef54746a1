"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from devforum.application.usecase.base import BaseUseCase
from devforum.domain.service import AnswerService
from devforum.domain.value import AnswerId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    answer_id: str
    user_id: str  # From authenticated user


class AcceptAnswerResponse(BaseModel):
    """Accepted state of the answer and its question after the toggle."""

    answer_id: str
    question_id: str
    is_accepted: bool
    question_is_answered: bool
    selected_answer_id: str | None
    unaccepted_answer_ids: list[str]


class AcceptAnswerUseCase(BaseUseCase):
    """Use case for toggling the accepted answer of a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize accept answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the answer or its question does not exist
            NotAuthorizedError: If the user did not ask the question
        """
        result = await self.answer_service.toggle_acceptance(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
        selected = result.question.selected_answer_id
        return AcceptAnswerResponse(
            answer_id=str(result.answer.id),
            question_id=str(result.question.id),
            is_accepted=result.answer.is_accepted,
            question_is_answered=result.question.is_answered,
            selected_answer_id=str(selected) if selected else None,
            unaccepted_answer_ids=[str(a) for a in result.unaccepted_ids],
        )
