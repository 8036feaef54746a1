"""Test configuration and shared factories."""

import os
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from devforum.domain.model import Answer, Question, User, Vote
from devforum.domain.value import (
    AnswerId,
    QuestionId,
    TagName,
    UserId,
    Username,
    VoteValue,
)

# Cheap password hashing and test environment for every container built in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")


def make_user(
    username: str | None = None, reputation: int = 0, is_admin: bool = False
) -> User:
    """Build a user with a unique username unless one is given."""
    user_id = UserId(uuid4())
    name = username or f"user-{str(user_id)[:8]}"
    return User(
        id=user_id,
        username=Username(name),
        email=f"{name}@example.com",
        password_hash="not-a-real-hash",
        reputation=reputation,
        is_admin=is_admin,
    )


def make_question(
    author_id: UserId,
    tags: list[str] | None = None,
    title: str = "How do I reverse a list?",
    age: timedelta = timedelta(0),
    votes: list[Vote] | None = None,
) -> Question:
    """Build a question posted ``age`` ago."""
    created_at = datetime.now(UTC) - age
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body="I tried a for loop but it feels clumsy.",
        author_id=author_id,
        tags=[TagName(t) for t in (tags if tags is not None else ["python"])],
        votes=votes or [],
        created_at=created_at,
        updated_at=created_at,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    is_accepted: bool = False,
    age: timedelta = timedelta(0),
    votes: list[Vote] | None = None,
) -> Answer:
    """Build an answer posted ``age`` ago."""
    created_at = datetime.now(UTC) - age
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        body="Use slicing: items[::-1]",
        is_accepted=is_accepted,
        votes=votes or [],
        created_at=created_at,
        updated_at=created_at,
    )


def votes_from(*values: int) -> list[Vote]:
    """A vote set with one vote per value, each from a different user."""
    return [Vote(user_id=UserId(uuid4()), value=VoteValue(v)) for v in values]
