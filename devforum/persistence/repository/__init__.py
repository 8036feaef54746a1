"""PostgreSQL repository implementations."""

from devforum.persistence.repository.answer import PostgresAnswerRepository
from devforum.persistence.repository.comment import PostgresCommentRepository
from devforum.persistence.repository.community import PostgresCommunityRepository
from devforum.persistence.repository.question import PostgresQuestionRepository
from devforum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresCommentRepository",
    "PostgresCommunityRepository",
]
