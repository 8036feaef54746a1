"""Answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from devforum.application.usecase.answer import (
    AcceptAnswerRequest,
    AcceptAnswerResponse,
    AcceptAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
)
from devforum.application.usecase.views import AnswerItem
from devforum.domain.service import JWTService
from devforum.interface.api.auth import require_user_id

router = APIRouter(tags=["answers"], route_class=DishkaRoute)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    body: str = Field(min_length=1)


@router.post(
    "/questions/{question_id}/answers",
    response_model=AnswerItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AnswerItem:
    """Answer a question. Requires authentication."""
    user_id = require_user_id(
        jwt_service, authorization, "Authentication required to answer"
    )
    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            question_id=str(question_id), author_id=user_id, body=request.body
        )
    )


@router.post("/answers/{answer_id}/accept", response_model=AcceptAnswerResponse)
async def toggle_accept_answer(
    answer_id: UUID,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AcceptAnswerResponse:
    """Accept an answer, or withdraw acceptance if it is already accepted.

    Only the question's author may do this. Accepting un-accepts any other
    answer to the same question.

    Raises:
        NotAuthorizedError: If the caller did not ask the question (403)
        NotFoundError: If the answer or its question does not exist (404)
    """
    user_id = require_user_id(jwt_service, authorization)
    return await accept_answer_use_case.execute(
        AcceptAnswerRequest(answer_id=str(answer_id), user_id=user_id)
    )


@router.delete("/answers/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer and its comments. Author or admin only."""
    user_id = require_user_id(jwt_service, authorization)
    return await delete_answer_use_case.execute(
        DeleteAnswerRequest(answer_id=str(answer_id), user_id=user_id)
    )
