"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from devforum.domain.service import QuestionService, UserService
from devforum.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # From authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    question_id: str
    deleted: bool


class DeleteQuestionUseCase:
    """Use case for deleting a question (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), actor
        )
        return DeleteQuestionResponse(question_id=request.question_id, deleted=True)
