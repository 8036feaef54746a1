"""List communities use case."""

from pydantic import BaseModel, Field

from devforum.application.usecase.views import CommunityItem, community_item
from devforum.domain.repository import CommunitySortOrder
from devforum.domain.service import CommunityService


class ListCommunitiesRequest(BaseModel):
    """List communities request."""

    sort: CommunitySortOrder = CommunitySortOrder.MEMBERS
    search: str | None = Field(default=None, max_length=100)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListCommunitiesResponse(BaseModel):
    """Paginated public community records."""

    communities: list[CommunityItem]
    total: int
    total_pages: int
    current_page: int


class ListCommunitiesUseCase:
    """Use case for browsing public community records."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize list communities use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(
        self, request: ListCommunitiesRequest
    ) -> ListCommunitiesResponse:
        """Execute list communities flow."""
        communities, total = await self.community_service.list_communities(
            sort=request.sort,
            search=request.search or None,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        return ListCommunitiesResponse(
            communities=[community_item(c) for c in communities],
            total=total,
            total_pages=-(-total // request.limit),
            current_page=request.page,
        )
