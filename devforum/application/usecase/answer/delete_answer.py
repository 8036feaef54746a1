"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from devforum.domain.service import AnswerService, UserService
from devforum.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # From authenticated user


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    answer_id: str
    deleted: bool


class DeleteAnswerUseCase:
    """Use case for deleting an answer (author or admin)."""

    def __init__(self, answer_service: AnswerService, user_service: UserService) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
        """
        self.answer_service = answer_service
        self.user_service = user_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.answer_service.delete_answer(AnswerId(UUID(request.answer_id)), actor)
        return DeleteAnswerResponse(answer_id=request.answer_id, deleted=True)
