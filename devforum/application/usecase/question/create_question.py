"""Create question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devforum.domain.service import QuestionService
from devforum.domain.value import TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)
    tags: list[TagName] = Field(min_length=1, max_length=5)
    author_id: str  # From authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    tags: list[str]
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Question content and author

        Returns:
            Created question details
        """
        with logfire.span("create_question.execute", author_id=request.author_id):
            question = await self.question_service.create_question(
                author_id=UserId(UUID(request.author_id)),
                title=request.title.strip(),
                body=request.body,
                tags=request.tags,
            )
            return CreateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                tags=[t.root for t in question.tags],
                created_at=question.created_at,
            )
