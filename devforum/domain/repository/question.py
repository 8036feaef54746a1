"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from devforum.domain.model.question import Question
from devforum.domain.value import QuestionId, TagName, UserId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC
    VOTES = "votes"  # vote count DESC
    SCORE = "score"  # time-decayed vote count DESC
    VIEWS = "views"  # views DESC


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            tag: Only questions carrying this tag
            search: Case-insensitive text matched against title, body and tags
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self, tag: Optional[TagName] = None, search: Optional[str] = None
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        """Find questions by a specific author, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions by a specific author."""
        pass

    @abstractmethod
    async def tag_counts(self, limit: Optional[int] = None) -> list[tuple[TagName, int]]:
        """Count questions per tag.

        Args:
            limit: Maximum number of tags to return (None for all)

        Returns:
            (tag, question count) pairs, most used first
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its vote set.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question and its vote set (hard delete)."""
        pass
