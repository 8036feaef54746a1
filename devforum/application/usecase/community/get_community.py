"""Get community use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from devforum.application.usecase.views import (
    CommunityItem,
    QuestionItem,
    community_item,
    load_authors,
    question_item,
)
from devforum.domain.model import Community
from devforum.domain.repository import QuestionSortOrder, UserRepository
from devforum.domain.service import CommunityService, QuestionService
from devforum.domain.value import TagName, UserId

RECENT_QUESTIONS = 10


class GetCommunityRequest(BaseModel):
    """Get community request."""

    name: str
    user_id: str | None = None  # From authenticated user, if any


class GetCommunityResponse(BaseModel):
    """Community page: the community and its newest questions."""

    community: CommunityItem
    recent_questions: list[QuestionItem]
    can_moderate: bool = False


class GetCommunityUseCase:
    """Use case for a community page, stored or tag-derived."""

    def __init__(
        self,
        community_service: CommunityService,
        question_service: QuestionService,
        user_repository: UserRepository,
    ) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
            question_service: Question domain service
            user_repository: User repository (author details)
        """
        self.community_service = community_service
        self.question_service = question_service
        self.user_repository = user_repository

    async def execute(self, request: GetCommunityRequest) -> GetCommunityResponse:
        """Execute get community flow.

        Raises:
            NotFoundError: If neither a community nor a tag of that name exists
        """
        with logfire.span("get_community.execute", name=request.name):
            community = await self.community_service.resolve(request.name)

            questions, _ = await self.question_service.list_questions(
                sort=QuestionSortOrder.NEWEST,
                tag=TagName(community.name.root),
                limit=RECENT_QUESTIONS,
            )
            authors = await load_authors(
                self.user_repository, [q.author_id for q in questions]
            )

            can_moderate = (
                isinstance(community, Community)
                and request.user_id is not None
                and community.can_moderate(UserId(UUID(request.user_id)))
            )

            return GetCommunityResponse(
                community=community_item(community),
                recent_questions=[
                    question_item(
                        q, authors.get(q.author_id), self.question_service.score(q)
                    )
                    for q in questions
                ],
                can_moderate=can_moderate,
            )
