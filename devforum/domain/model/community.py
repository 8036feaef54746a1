"""Community entities.

A community groups questions sharing a tag of the same name. A community
record is optional: tags used by questions but lacking a record still
resolve to a synthesized, read-only community.
"""

from datetime import UTC, datetime
from typing import Literal, Optional, Union

from pydantic import Field

from devforum.domain.model.common import DomainModel
from devforum.domain.value import CommunityId, CommunityName, TagName, UserId


class CommunityRule(DomainModel):
    """Posting rule shown on a community page."""

    title: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)


class Community(DomainModel):
    """Community record created by a user.

    post_count is maintained incrementally and may drift from the real
    number of questions carrying the tag; read paths recompute it.
    """

    kind: Literal["stored"] = "stored"
    id: CommunityId
    name: CommunityName
    display_name: str = Field(min_length=1, max_length=50)
    description: str = Field(default="", max_length=500)
    created_by: UserId
    moderator_ids: list[UserId] = Field(default_factory=list)
    member_count: int = Field(default=0, ge=0)
    post_count: int = Field(default=0, ge=0)
    is_public: bool = True
    rules: list[CommunityRule] = Field(default_factory=list)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def can_moderate(self, user_id: UserId) -> bool:
        """Whether a user may edit this community."""
        return user_id == self.created_by or user_id in self.moderator_ids


class SynthesizedCommunity(DomainModel):
    """Placeholder community derived from tag usage.

    Exists only as a read model; it has no members, moderators or creator.
    """

    kind: Literal["synthesized"] = "synthesized"
    name: TagName
    post_count: int = Field(ge=0)
    member_count: int = 0
    description: str = ""
    is_public: bool = True

    @property
    def display_name(self) -> str:
        """Capitalized tag name."""
        return self.name.root[:1].upper() + self.name.root[1:]


CommunityView = Union[Community, SynthesizedCommunity]
