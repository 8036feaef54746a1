"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from devforum.domain.model import Comment
from devforum.domain.repository import CommentRepository
from devforum.domain.value import AnswerId, CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._comments = store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_answer(self, answer_id: AnswerId) -> list[Comment]:
        """Find all comments on an answer, oldest first."""
        comments = [c for c in self._comments.values() if c.answer_id == answer_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete_by_answers(self, answer_ids: Sequence[AnswerId]) -> int:
        """Delete every comment attached to the given answers."""
        doomed = [c.id for c in self._comments.values() if c.answer_id in answer_ids]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
