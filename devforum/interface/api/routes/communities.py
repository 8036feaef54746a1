"""Community routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from devforum.application.usecase.community import (
    ChangeMembershipUseCase,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityResponse,
    GetCommunityUseCase,
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
    MembershipRequest,
    MembershipResponse,
    PopularCommunitiesRequest,
    PopularCommunitiesResponse,
    PopularCommunitiesUseCase,
    UpdateCommunityRequest,
    UpdateCommunityUseCase,
)
from devforum.application.usecase.views import CommunityItem
from devforum.domain.model import CommunityRule
from devforum.domain.repository import CommunitySortOrder
from devforum.domain.service import JWTService
from devforum.interface.api.auth import optional_user_id, require_user_id

router = APIRouter(
    prefix="/communities", tags=["communities"], route_class=DishkaRoute
)


class CreateCommunityAPIRequest(BaseModel):
    """API request for creating a community."""

    name: str = Field(min_length=2, max_length=30)
    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    is_public: bool = True
    rules: list[CommunityRule] = Field(default_factory=list)
    avatar_url: str | None = None


class UpdateCommunityAPIRequest(BaseModel):
    """API request for editing a community. Omitted fields are unchanged."""

    display_name: str | None = Field(default=None, min_length=1, max_length=50)
    description: str | None = Field(default=None, max_length=500)
    is_public: bool | None = None
    rules: list[CommunityRule] | None = None
    avatar_url: str | None = None


@router.get("", response_model=ListCommunitiesResponse)
async def list_communities(
    list_communities_use_case: FromDishka[ListCommunitiesUseCase],
    sort: CommunitySortOrder = CommunitySortOrder.MEMBERS,
    search: str | None = Query(default=None, max_length=100),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
) -> ListCommunitiesResponse:
    """List public community records."""
    return await list_communities_use_case.execute(
        ListCommunitiesRequest(sort=sort, search=search, page=page, limit=limit)
    )


@router.get("/popular", response_model=PopularCommunitiesResponse)
async def popular_communities(
    popular_communities_use_case: FromDishka[PopularCommunitiesUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> PopularCommunitiesResponse:
    """Most active communities, including tags without a community record."""
    return await popular_communities_use_case.execute(
        PopularCommunitiesRequest(limit=limit)
    )


@router.post("", response_model=CommunityItem, status_code=status.HTTP_201_CREATED)
async def create_community(
    request: CreateCommunityAPIRequest,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommunityItem:
    """Create a community. The creator becomes its first moderator.

    Raises:
        ConflictError: If the name is taken (409)
    """
    user_id = require_user_id(
        jwt_service, authorization, "Authentication required to create communities"
    )
    return await create_community_use_case.execute(
        CreateCommunityRequest(
            name=request.name,
            display_name=request.display_name,
            description=request.description,
            is_public=request.is_public,
            rules=request.rules,
            avatar_url=request.avatar_url,
            creator_id=user_id,
        )
    )


@router.get("/{name}", response_model=GetCommunityResponse)
async def get_community(
    name: str,
    get_community_use_case: FromDishka[GetCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCommunityResponse:
    """Get a community by name with its 10 most recent questions.

    Tags in use without a community record resolve to a placeholder.
    """
    return await get_community_use_case.execute(
        GetCommunityRequest(
            name=name, user_id=optional_user_id(jwt_service, authorization)
        )
    )


@router.put("/{name}", response_model=CommunityItem)
async def update_community(
    name: str,
    request: UpdateCommunityAPIRequest,
    update_community_use_case: FromDishka[UpdateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CommunityItem:
    """Edit a community. Creator and moderators only.

    Raises:
        NotAuthorizedError: If the caller cannot moderate the community (403)
    """
    user_id = require_user_id(jwt_service, authorization)
    return await update_community_use_case.execute(
        UpdateCommunityRequest(
            name=name,
            actor_id=user_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.post("/{name}/join", response_model=MembershipResponse)
async def join_community(
    name: str,
    membership_use_case: FromDishka[ChangeMembershipUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MembershipResponse:
    """Join a community."""
    user_id = require_user_id(jwt_service, authorization)
    return await membership_use_case.execute(
        MembershipRequest(name=name, user_id=user_id, action="join")
    )


@router.post("/{name}/leave", response_model=MembershipResponse)
async def leave_community(
    name: str,
    membership_use_case: FromDishka[ChangeMembershipUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> MembershipResponse:
    """Leave a community. member_count never drops below zero."""
    user_id = require_user_id(jwt_service, authorization)
    return await membership_use_case.execute(
        MembershipRequest(name=name, user_id=user_id, action="leave")
    )
