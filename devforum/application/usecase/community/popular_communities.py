"""Popular communities use case."""

import logfire
from pydantic import BaseModel, Field

from devforum.application.usecase.views import CommunityItem, community_item
from devforum.domain.service import CommunityService


class PopularCommunitiesRequest(BaseModel):
    """Popular communities request."""

    limit: int = Field(default=10, ge=1, le=100)


class PopularCommunitiesResponse(BaseModel):
    """Communities and tag placeholders ranked by activity."""

    communities: list[CommunityItem]


class PopularCommunitiesUseCase:
    """Use case for the most active communities, including tag-only ones."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize popular communities use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(
        self, request: PopularCommunitiesRequest
    ) -> PopularCommunitiesResponse:
        """Execute popular communities flow."""
        with logfire.span("popular_communities.execute", limit=request.limit):
            communities = await self.community_service.popular(limit=request.limit)
            return PopularCommunitiesResponse(
                communities=[community_item(c) for c in communities]
            )
