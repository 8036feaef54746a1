"""Tag use cases."""

from .popular_tags import (
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
    TagCount,
)

__all__ = [
    "PopularTagsRequest",
    "PopularTagsResponse",
    "PopularTagsUseCase",
    "TagCount",
]
