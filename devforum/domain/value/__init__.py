"""Domain value objects for DevForum."""

from devforum.domain.value.identifiers import (
    AnswerId,
    CommentId,
    CommunityId,
    QuestionId,
    UserId,
)
from devforum.domain.value.types import (
    CommunityName,
    TagName,
    Username,
    VotableType,
    VoteAction,
    VoteValue,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "CommunityId",
    # Types
    "CommunityName",
    "TagName",
    "Username",
    "VotableType",
    "VoteAction",
    "VoteValue",
]
