"""In-memory question repository for testing."""

from collections import Counter
from datetime import UTC, datetime
from typing import Optional

from devforum.config import Settings
from devforum.domain.model import Question
from devforum.domain.repository import QuestionRepository, QuestionSortOrder
from devforum.domain.service.ranking import question_score
from devforum.domain.value import QuestionId, TagName, UserId

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    for_update is accepted but ignored: nothing is locked.
    """

    def __init__(self, store: InMemoryStore, settings: Settings) -> None:
        self._questions = store.questions
        self.settings = settings

    def _filtered(
        self, tag: Optional[TagName], search: Optional[str]
    ) -> list[Question]:
        questions = list(self._questions.values())

        if tag is not None:
            questions = [q for q in questions if q.has_tag(tag)]

        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower()
                or needle in q.body.lower()
                or any(needle in t.root for t in q.tags)
            ]

        return questions

    async def find_by_id(
        self, question_id: QuestionId, for_update: bool = False
    ) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        tag: Optional[TagName] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filtered(tag, search)

        if sort == QuestionSortOrder.NEWEST:
            questions.sort(key=lambda q: q.created_at, reverse=True)
        elif sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.VOTES:
            questions.sort(key=lambda q: (q.vote_count, q.created_at), reverse=True)
        elif sort == QuestionSortOrder.SCORE:
            now = datetime.now(UTC)
            decay = self.settings.ranking.decay_per_day
            questions.sort(
                key=lambda q: question_score(q.vote_count, q.created_at, now, decay),
                reverse=True,
            )
        elif sort == QuestionSortOrder.VIEWS:
            questions.sort(key=lambda q: (q.views, q.created_at), reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self, tag: Optional[TagName] = None, search: Optional[str] = None
    ) -> int:
        """Count questions matching the given filters."""
        return len(self._filtered(tag, search))

    async def find_by_author(
        self, author_id: UserId, limit: int = 10, offset: int = 0
    ) -> list[Question]:
        """Find questions by a specific author, newest first."""
        questions = [q for q in self._questions.values() if q.author_id == author_id]
        questions.sort(key=lambda q: q.created_at, reverse=True)
        return questions[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count questions by a specific author."""
        return sum(1 for q in self._questions.values() if q.author_id == author_id)

    async def tag_counts(
        self, limit: Optional[int] = None
    ) -> list[tuple[TagName, int]]:
        """Count questions per tag, most used first, ties by name."""
        counts = Counter(t.root for q in self._questions.values() for t in q.tags)
        ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        if limit is not None:
            ordered = ordered[:limit]
        return [(TagName(name), count) for name, count in ordered]

    async def save(self, question: Question) -> Question:
        """Save or update a question; stored views win over the snapshot."""
        existing = self._questions.get(question.id)
        if existing:
            question = question.model_copy(update={"views": existing.views})
        self._questions[question.id] = question
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment views by 1."""
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question."""
        self._questions.pop(question_id, None)
