"""In-memory answer repository for testing."""

from typing import Optional

from devforum.domain.model import Answer
from devforum.domain.repository import AnswerRepository
from devforum.domain.value import AnswerId, QuestionId, UserId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._answers = store.answers

    async def find_by_id(
        self, answer_id: AnswerId, for_update: bool = False
    ) -> Optional[Answer]:
        """Find an answer by ID (for_update is ignored)."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question, oldest first."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Answer]:
        """Find answers by a specific author, newest first."""
        answers = [a for a in self._answers.values() if a.author_id == author_id]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return answers[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count answers by a specific author."""
        return sum(1 for a in self._answers.values() if a.author_id == author_id)

    async def save(self, answer: Answer) -> Answer:
        """Save or update an answer."""
        self._answers[answer.id] = answer
        return answer

    async def unaccept_others(
        self, question_id: QuestionId, keep: AnswerId
    ) -> list[AnswerId]:
        """Clear is_accepted on every other accepted answer of the question."""
        cleared = []
        for answer in list(self._answers.values()):
            if (
                answer.question_id == question_id
                and answer.id != keep
                and answer.is_accepted
            ):
                self._answers[answer.id] = answer.model_copy(
                    update={"is_accepted": False}
                )
                cleared.append(answer.id)
        return cleared

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer."""
        self._answers.pop(answer_id, None)
