"""Community domain service."""

from datetime import UTC, datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError

from devforum.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from devforum.domain.model import (
    Community,
    CommunityRule,
    CommunityView,
    SynthesizedCommunity,
)
from devforum.domain.repository import (
    CommunityRepository,
    CommunitySortOrder,
    QuestionRepository,
)
from devforum.domain.value import CommunityId, CommunityName, TagName, UserId

from .base import Service


def _as_community_name(raw: str) -> Optional[CommunityName]:
    try:
        return CommunityName(raw)
    except ValidationError:
        return None


def _as_tag(raw: str) -> Optional[TagName]:
    try:
        return TagName(raw)
    except ValidationError:
        return None


class CommunityService(Service):
    """Domain service for communities and their reconciliation with tags.

    A community name doubles as a tag. Stored communities carry an
    incrementally maintained post_count; read paths replace it with the
    live number of questions using the tag. Tags in use without a
    community record resolve to a synthesized placeholder.
    """

    def __init__(
        self,
        community_repository: CommunityRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
            question_repository: Question repository
        """
        self.community_repository = community_repository
        self.question_repository = question_repository

    async def resolve(self, name: str) -> CommunityView:
        """Look up a community by name, stored or derived from tag usage.

        Args:
            name: Community name, matched case-insensitively

        Returns:
            Stored community with a live post_count, or a synthesized
            placeholder when only questions use the tag

        Raises:
            NotFoundError: If there is neither a record nor a question using the tag
        """
        with logfire.span("community_service.resolve", name=name):
            tag = _as_tag(name)
            live_count = await self.question_repository.count(tag=tag) if tag else 0

            community_name = _as_community_name(name)
            stored = (
                await self.community_repository.find_by_name(community_name)
                if community_name
                else None
            )
            if stored:
                return stored.model_copy(update={"post_count": live_count})

            if tag and live_count > 0:
                logfire.info(
                    "Synthesized community from tag", tag=tag.root, post_count=live_count
                )
                return SynthesizedCommunity(name=tag, post_count=live_count)

            logfire.warn("Community not found", name=name)
            raise NotFoundError("Community", name)

    async def list_communities(
        self,
        sort: CommunitySortOrder = CommunitySortOrder.MEMBERS,
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Community], int]:
        """List public community records with the total matching count."""
        with logfire.span(
            "community_service.list_communities",
            sort=sort.value,
            search=search,
            limit=limit,
            offset=offset,
        ):
            communities = await self.community_repository.find_all(
                sort=sort, search=search, public_only=True, limit=limit, offset=offset
            )
            total = await self.community_repository.count(search=search, public_only=True)
            return communities, total

    async def popular(self, limit: Optional[int] = None) -> list[CommunityView]:
        """Public communities merged with record-less tags, most active first.

        Every entry's post_count is recomputed from tag usage. Entries are
        ordered by post_count, then member_count, both descending.
        """
        with logfire.span("community_service.popular", limit=limit):
            tag_counts = dict(
                (tag.root, count)
                for tag, count in await self.question_repository.tag_counts()
            )
            stored = await self.community_repository.find_all(
                sort=CommunitySortOrder.MEMBERS, public_only=True, limit=None
            )

            merged: list[CommunityView] = [
                c.model_copy(update={"post_count": tag_counts.get(c.name.root, 0)})
                for c in stored
            ]
            # A private record does not hide its tag from the listing
            taken = {c.name.root for c in stored}
            merged.extend(
                SynthesizedCommunity(name=TagName(name), post_count=count)
                for name, count in tag_counts.items()
                if name not in taken
            )

            merged.sort(key=lambda c: (-c.post_count, -c.member_count))
            return merged[:limit] if limit is not None else merged

    async def create_community(
        self,
        creator_id: UserId,
        name: CommunityName,
        display_name: Optional[str] = None,
        description: str = "",
        is_public: bool = True,
        rules: Optional[list[CommunityRule]] = None,
        avatar_url: Optional[str] = None,
    ) -> Community:
        """Create a community record; the creator becomes its first moderator.

        Args:
            creator_id: Creating user
            name: Unique community name
            display_name: Display name (defaults to the capitalized name)
            description: Community description
            is_public: Whether it appears in public listings
            rules: Posting rules
            avatar_url: Avatar image URL

        Returns:
            Created community

        Raises:
            ConflictError: If a community with this name already exists
        """
        with logfire.span(
            "community_service.create_community",
            name=name.root,
            creator_id=str(creator_id),
        ):
            if await self.community_repository.find_by_name(name):
                logfire.warn("Community name taken", name=name.root)
                raise ConflictError(f"Community '{name.root}' already exists")

            tag = _as_tag(name.root)
            live_count = await self.question_repository.count(tag=tag) if tag else 0
            now = datetime.now(UTC)
            community = Community(
                id=CommunityId(uuid4()),
                name=name,
                display_name=display_name or name.default_display_name,
                description=description,
                created_by=creator_id,
                moderator_ids=[creator_id],
                post_count=live_count,
                is_public=is_public,
                rules=rules or [],
                avatar_url=avatar_url,
                created_at=now,
                updated_at=now,
            )
            saved = await self.community_repository.save(community)
            logfire.info("Community created", name=name.root, community_id=str(saved.id))
            return saved

    async def update_community(
        self,
        name: CommunityName,
        actor_id: UserId,
        display_name: Optional[str] = None,
        description: Optional[str] = None,
        is_public: Optional[bool] = None,
        rules: Optional[list[CommunityRule]] = None,
        avatar_url: Optional[str] = None,
    ) -> Community:
        """Edit a community. Only its creator and moderators may do so.

        Fields left as None are unchanged.

        Raises:
            NotFoundError: If the community does not exist
            NotAuthorizedError: If the actor cannot moderate the community
        """
        with logfire.span(
            "community_service.update_community",
            name=name.root,
            actor_id=str(actor_id),
        ):
            community = await self.community_repository.find_by_name(
                name, for_update=True
            )
            if not community:
                raise NotFoundError("Community", name.root)
            if not community.can_moderate(actor_id):
                logfire.warn(
                    "Community update rejected", name=name.root, actor_id=str(actor_id)
                )
                raise NotAuthorizedError(
                    "update", "community", name.root, str(actor_id)
                )

            update: dict[str, object] = {"updated_at": datetime.now(UTC)}
            if display_name is not None:
                update["display_name"] = display_name
            if description is not None:
                update["description"] = description
            if is_public is not None:
                update["is_public"] = is_public
            if rules is not None:
                update["rules"] = rules
            if avatar_url is not None:
                update["avatar_url"] = avatar_url

            saved = await self.community_repository.save(
                community.model_copy(update=update)
            )
            logfire.info("Community updated", name=name.root)
            return saved

    async def join(self, name: CommunityName, user_id: UserId) -> Community:
        """Count a new member in a community.

        Raises:
            NotFoundError: If the community does not exist
        """
        return await self._change_members(name, user_id, 1)

    async def leave(self, name: CommunityName, user_id: UserId) -> Community:
        """Count a member leaving; member_count never drops below zero.

        Raises:
            NotFoundError: If the community does not exist
        """
        return await self._change_members(name, user_id, -1)

    async def _change_members(
        self, name: CommunityName, user_id: UserId, delta: int
    ) -> Community:
        with logfire.span(
            "community_service.change_members",
            name=name.root,
            user_id=str(user_id),
            delta=delta,
        ):
            community = await self.community_repository.find_by_name(
                name, for_update=True
            )
            if not community:
                raise NotFoundError("Community", name.root)
            member_count = max(0, community.member_count + delta)
            saved = await self.community_repository.save(
                community.model_copy(
                    update={"member_count": member_count, "updated_at": datetime.now(UTC)}
                )
            )
            logfire.info(
                "Community membership changed", name=name.root, member_count=member_count
            )
            return saved
