"""Domain model entities for DevForum."""

from devforum.domain.model.answer import Answer
from devforum.domain.model.comment import Comment
from devforum.domain.model.community import (
    Community,
    CommunityRule,
    CommunityView,
    SynthesizedCommunity,
)
from devforum.domain.model.question import Question
from devforum.domain.model.user import User
from devforum.domain.model.vote import Vote, VoteOutcome, apply_vote, vote_count

__all__ = [
    "User",
    "Question",
    "Answer",
    "Comment",
    "Community",
    "CommunityRule",
    "CommunityView",
    "SynthesizedCommunity",
    "Vote",
    "VoteOutcome",
    "apply_vote",
    "vote_count",
]
