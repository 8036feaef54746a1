"""Comment entity.

Comments are short remarks attached to an answer.
"""

from datetime import UTC, datetime

from pydantic import Field

from devforum.domain.model.common import DomainModel
from devforum.domain.value import AnswerId, CommentId, UserId


class Comment(DomainModel):
    """Comment on an answer."""

    id: CommentId
    answer_id: AnswerId
    author_id: UserId
    body: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
