"""Repository interfaces for DevForum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from devforum.domain.repository.answer import AnswerRepository
from devforum.domain.repository.comment import CommentRepository
from devforum.domain.repository.community import (
    CommunityRepository,
    CommunitySortOrder,
)
from devforum.domain.repository.question import QuestionRepository, QuestionSortOrder
from devforum.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "QuestionRepository",
    "QuestionSortOrder",
    "AnswerRepository",
    "CommentRepository",
    "CommunityRepository",
    "CommunitySortOrder",
]
