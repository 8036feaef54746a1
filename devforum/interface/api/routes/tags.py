"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from devforum.application.usecase.tag import (
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("/popular", response_model=PopularTagsResponse)
async def popular_tags(
    popular_tags_use_case: FromDishka[PopularTagsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
) -> PopularTagsResponse:
    """Most used tags with their question counts."""
    return await popular_tags_use_case.execute(PopularTagsRequest(limit=limit))
