"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from devforum.domain.model.answer import Answer
from devforum.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier
            for_update: Lock the row until the current transaction ends

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> List[Answer]:
        """Find answers by a specific author, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by a specific author."""
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), including its vote set.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def unaccept_others(
        self, question_id: QuestionId, keep: AnswerId
    ) -> List[AnswerId]:
        """Clear is_accepted on every answer of a question except one.

        Args:
            question_id: The question whose answers are updated
            keep: Answer left untouched

        Returns:
            IDs of answers that were accepted and no longer are
        """
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer and its vote set (hard delete)."""
        pass
