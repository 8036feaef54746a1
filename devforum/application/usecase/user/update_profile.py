"""Update profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devforum.domain.service import UserService
from devforum.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request. Omitted fields are unchanged."""

    user_id: str  # From authenticated user
    bio: str | None = Field(default=None, max_length=500)
    avatar_url: str | None = Field(default=None, max_length=2048)


class UpdateProfileResponse(BaseModel):
    """Updated profile fields."""

    user_id: str
    username: str
    bio: str | None
    avatar_url: str | None


class UpdateProfileUseCase:
    """Use case for editing one's own bio and avatar."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow."""
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)),
            bio=request.bio,
            avatar_url=request.avatar_url,
        )
        return UpdateProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            bio=user.bio,
            avatar_url=user.avatar_url,
        )
