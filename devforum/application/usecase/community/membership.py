"""Join and leave community use cases."""

from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from devforum.domain.service import CommunityService
from devforum.domain.value import CommunityName, UserId


class MembershipRequest(BaseModel):
    """Join or leave request."""

    name: CommunityName
    user_id: str  # From authenticated user
    action: Literal["join", "leave"]


class MembershipResponse(BaseModel):
    """Membership change result."""

    name: str
    member_count: int


class ChangeMembershipUseCase:
    """Use case for joining or leaving a community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize membership use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: MembershipRequest) -> MembershipResponse:
        """Execute join or leave.

        Raises:
            NotFoundError: If the community does not exist
        """
        user_id = UserId(UUID(request.user_id))
        if request.action == "join":
            community = await self.community_service.join(request.name, user_id)
        else:
            community = await self.community_service.leave(request.name, user_id)
        return MembershipResponse(
            name=community.name.root, member_count=community.member_count
        )
