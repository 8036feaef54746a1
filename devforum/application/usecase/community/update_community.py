"""Update community use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devforum.application.usecase.views import CommunityItem, community_item
from devforum.domain.model import CommunityRule
from devforum.domain.service import CommunityService
from devforum.domain.value import CommunityName, UserId


class UpdateCommunityRequest(BaseModel):
    """Update community request. Omitted fields are unchanged."""

    name: CommunityName
    actor_id: str  # From authenticated user
    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=500)
    is_public: bool | None = None
    rules: list[CommunityRule] | None = Field(default=None, max_length=20)
    avatar_url: str | None = None


class UpdateCommunityUseCase:
    """Use case for editing a community as its creator or a moderator."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize update community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: UpdateCommunityRequest) -> CommunityItem:
        """Execute update community flow.

        Raises:
            NotFoundError: If the community does not exist
            NotAuthorizedError: If the actor cannot moderate it
        """
        community = await self.community_service.update_community(
            name=request.name,
            actor_id=UserId(UUID(request.actor_id)),
            display_name=request.display_name,
            description=request.description,
            is_public=request.is_public,
            rules=request.rules,
            avatar_url=request.avatar_url,
        )
        return community_item(community)
