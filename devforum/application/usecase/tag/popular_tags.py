"""Popular tags use case."""

from pydantic import BaseModel, Field

from devforum.domain.service import TagService


class PopularTagsRequest(BaseModel):
    """Popular tags request."""

    limit: int = Field(default=20, ge=1, le=100)


class TagCount(BaseModel):
    """Tag with the number of questions using it."""

    name: str
    count: int


class PopularTagsResponse(BaseModel):
    """Popular tags response."""

    tags: list[TagCount]


class PopularTagsUseCase:
    """Use case for listing the most used tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize popular tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: PopularTagsRequest) -> PopularTagsResponse:
        """Execute popular tags flow."""
        tags = await self.tag_service.popular_tags(limit=request.limit)
        return PopularTagsResponse(
            tags=[TagCount(name=tag.root, count=count) for tag, count in tags]
        )
