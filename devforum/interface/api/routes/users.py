"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from devforum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from devforum.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ListUserAnswersUseCase,
    ListUserQuestionsUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
    UserAnswersResponse,
    UserContentRequest,
    UserQuestionsResponse,
)
from devforum.domain.service import JWTService
from devforum.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing one's profile."""

    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """The authenticated user's own account, including email."""
    user_id = require_user_id(jwt_service, authorization)
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=user_id)
    )


@router.put("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> UpdateProfileResponse:
    """Update the authenticated user's bio and avatar."""
    user_id = require_user_id(jwt_service, authorization)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id, bio=request.bio, avatar_url=request.avatar_url
        )
    )


@router.get("/{username}", response_model=ProfileResponse)
async def get_profile(
    username: str,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Public profile with the user's 5 most recent questions and answers."""
    return await get_profile_use_case.execute(GetProfileRequest(username=username))


@router.get("/{username}/questions", response_model=UserQuestionsResponse)
async def get_user_questions(
    username: str,
    list_user_questions_use_case: FromDishka[ListUserQuestionsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> UserQuestionsResponse:
    """Questions asked by a user, newest first."""
    return await list_user_questions_use_case.execute(
        UserContentRequest(username=username, page=page, limit=limit)
    )


@router.get("/{username}/answers", response_model=UserAnswersResponse)
async def get_user_answers(
    username: str,
    list_user_answers_use_case: FromDishka[ListUserAnswersUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
) -> UserAnswersResponse:
    """Answers written by a user, newest first."""
    return await list_user_answers_use_case.execute(
        UserContentRequest(username=username, page=page, limit=limit)
    )
