"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from devforum.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from devforum.domain.service import JWTService
from devforum.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/answers/{answer_id}/comments", tags=["comments"], route_class=DishkaRoute
)


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting on an answer."""

    body: str = Field(min_length=1, max_length=1000)


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    answer_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Comments on an answer, oldest first."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(answer_id=str(answer_id))
    )


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    answer_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommentItem:
    """Comment on an answer. Requires authentication."""
    user_id = require_user_id(
        jwt_service, authorization, "Authentication required to comment"
    )
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            answer_id=str(answer_id), author_id=user_id, body=request.body
        )
    )
