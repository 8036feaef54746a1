"""Community use cases."""

from .create_community import CreateCommunityRequest, CreateCommunityUseCase
from .get_community import (
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
)
from .list_communities import (
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
)
from .membership import ChangeMembershipUseCase, MembershipRequest, MembershipResponse
from .popular_communities import (
    PopularCommunitiesRequest,
    PopularCommunitiesResponse,
    PopularCommunitiesUseCase,
)
from .update_community import UpdateCommunityRequest, UpdateCommunityUseCase

__all__ = [
    "ChangeMembershipUseCase",
    "CreateCommunityRequest",
    "CreateCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityResponse",
    "GetCommunityUseCase",
    "ListCommunitiesRequest",
    "ListCommunitiesResponse",
    "ListCommunitiesUseCase",
    "MembershipRequest",
    "MembershipResponse",
    "PopularCommunitiesRequest",
    "PopularCommunitiesResponse",
    "PopularCommunitiesUseCase",
    "UpdateCommunityRequest",
    "UpdateCommunityUseCase",
]
