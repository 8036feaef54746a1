"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from devforum.domain.model.comment import Comment
from devforum.domain.value import AnswerId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answer(self, answer_id: AnswerId) -> List[Comment]:
        """Find all comments on an answer, oldest first."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        pass

    @abstractmethod
    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment attached to the given answers.

        Returns:
            Number of deleted comments
        """
        pass
