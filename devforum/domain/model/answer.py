"""Answer entity."""

from datetime import UTC, datetime

from pydantic import Field

from devforum.domain.model.common import VotableModel
from devforum.domain.value import AnswerId, QuestionId, UserId


class Answer(VotableModel):
    """Answer to a question.

    At most one answer per question has is_accepted set.
    """

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    body: str = Field(min_length=1)
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
