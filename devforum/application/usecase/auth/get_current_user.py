"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devforum.domain.service import UserService
from devforum.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # From a verified token


class GetCurrentUserResponse(BaseModel):
    """Get current user response. Includes private fields."""

    user_id: str
    username: str
    email: str
    reputation: int
    bio: str | None
    avatar_url: str | None
    is_admin: bool
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's own account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the account no longer exists
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email,
            reputation=user.reputation,
            bio=user.bio,
            avatar_url=user.avatar_url,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )
