"""Create community use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devforum.application.usecase.views import CommunityItem, community_item
from devforum.domain.model import CommunityRule
from devforum.domain.service import CommunityService
from devforum.domain.value import CommunityName, UserId


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: CommunityName
    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    is_public: bool = True
    rules: list[CommunityRule] = Field(default_factory=list, max_length=20)
    avatar_url: str | None = None
    creator_id: str  # From authenticated user


class CreateCommunityUseCase:
    """Use case for creating a community record."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: CreateCommunityRequest) -> CommunityItem:
        """Execute create community flow.

        Raises:
            ConflictError: If the name is already taken
        """
        community = await self.community_service.create_community(
            creator_id=UserId(UUID(request.creator_id)),
            name=request.name,
            display_name=request.display_name,
            description=request.description,
            is_public=request.is_public,
            rules=request.rules,
            avatar_url=request.avatar_url,
        )
        return community_item(community)
