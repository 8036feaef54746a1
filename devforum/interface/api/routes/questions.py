"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from devforum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from devforum.domain.repository import QuestionSortOrder
from devforum.domain.service import JWTService
from devforum.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)
    tags: list[str] = Field(min_length=1, max_length=5)


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
    tag: str | None = None,
    search: str | None = Query(default=None, max_length=200),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> ListQuestionsResponse:
    """List questions with sorting, tag filter, text search and pagination.

    Args:
        sort: newest, oldest, votes, score or views
        tag: Only questions carrying this tag
        search: Substring matched against title, body and tags
        page: Page number, starting at 1
        limit: Page size
    """
    request = ListQuestionsRequest(
        sort=sort, tag=tag or None, search=search, page=page, limit=limit
    )
    return await list_questions_use_case.execute(request)


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateQuestionResponse:
    """Ask a question. Requires authentication.

    Tags are normalized to lowercase and de-duplicated.
    """
    user_id = require_user_id(
        jwt_service, authorization, "Authentication required to ask questions"
    )
    use_case_request = CreateQuestionRequest(
        title=request.title,
        body=request.body,
        tags=request.tags,
        author_id=user_id,
    )
    return await create_question_use_case.execute(use_case_request)


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetQuestionResponse:
    """Get a question with its answers. Counts a view.

    Authentication is optional; when present the caller's votes are included.
    """
    request = GetQuestionRequest(
        question_id=str(question_id),
        user_id=optional_user_id(jwt_service, authorization),
    )
    return await get_question_use_case.execute(request)


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers and their comments.

    Only the author or an admin may delete.
    """
    user_id = require_user_id(jwt_service, authorization)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(question_id=str(question_id), user_id=user_id)
    )
