"""User aggregate root.

Users register with a username and password and accumulate reputation
when others vote on their content or accept their answers.
"""

from datetime import UTC, datetime
from typing import Optional

from pydantic import Field

from devforum.domain.model.common import DomainModel
from devforum.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Reputation is only changed by the voting and acceptance ledger
    and never drops below zero.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=3, max_length=255)
    password_hash: str
    reputation: int = Field(default=0, ge=0)
    bio: Optional[str] = Field(default=None, max_length=500)
    avatar_url: Optional[str] = None
    is_admin: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
