"""Question aggregate root.

Questions are tagged into communities, collect answers and votes,
and track which answer their author accepted.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field, field_validator

from devforum.domain.model.common import VotableModel
from devforum.domain.value import AnswerId, QuestionId, TagName, UserId


class Question(VotableModel):
    """Question aggregate root.

    Bookkeeping rules:
    - answer_ids lists exactly the answers referencing this question
    - when an answer is accepted, is_answered is True and selected_answer_id
      points at it
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=200)
    body: str = Field(min_length=1)
    author_id: UserId
    tags: list[TagName] = Field(min_length=1)
    answer_ids: list[AnswerId] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    is_answered: bool = False
    selected_answer_id: Optional[AnswerId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("tags")
    @classmethod
    def deduplicate_tags(cls, v: list[TagName]) -> list[TagName]:
        """Drop repeated tags, keeping the first occurrence."""
        seen: set[str] = set()
        unique = []
        for tag in v:
            if tag.root not in seen:
                seen.add(tag.root)
                unique.append(tag)
        return unique

    @property
    def answer_count(self) -> int:
        """Number of answers posted to this question."""
        return len(self.answer_ids)

    def has_tag(self, tag: TagName) -> bool:
        """Check whether the question carries a tag."""
        return any(t.root == tag.root for t in self.tags)
