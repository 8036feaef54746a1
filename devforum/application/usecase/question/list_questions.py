"""List questions use case."""

import logfire
from pydantic import BaseModel, Field

from devforum.application.usecase.views import QuestionItem, load_authors, question_item
from devforum.domain.repository import QuestionSortOrder, UserRepository
from devforum.domain.service import QuestionService
from devforum.domain.value import TagName


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    tag: TagName | None = None
    search: str | None = Field(default=None, max_length=200)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionItem]
    total: int
    total_pages: int
    current_page: int


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            user_repository: User repository (author details)
        """
        self.question_service = question_service
        self.user_repository = user_repository

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters and pagination

        Returns:
            One page of questions with pagination totals
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            tag=request.tag.root if request.tag else None,
            page=request.page,
        ):
            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                tag=request.tag,
                search=request.search or None,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )
            authors = await load_authors(
                self.user_repository, [q.author_id for q in questions]
            )

            items = [
                question_item(
                    q, authors.get(q.author_id), self.question_service.score(q)
                )
                for q in questions
            ]
            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                questions=items,
                total=total,
                total_pages=-(-total // request.limit),
                current_page=request.page,
            )
