"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .community import InMemoryCommunityRepository
from .question import InMemoryQuestionRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryQuestionRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
