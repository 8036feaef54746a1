"""Shared state for in-memory repositories."""

from dataclasses import dataclass, field

from devforum.domain.model import Answer, Comment, Community, Question, User
from devforum.domain.value import AnswerId, CommentId, CommunityId, QuestionId, UserId


@dataclass
class InMemoryStore:
    """Process-local tables backing the in-memory repositories.

    There is no transaction or row locking: two callers that load the same
    entity and save it back can overwrite each other's changes.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    questions: dict[QuestionId, Question] = field(default_factory=dict)
    answers: dict[AnswerId, Answer] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    communities: dict[CommunityId, Community] = field(default_factory=dict)
