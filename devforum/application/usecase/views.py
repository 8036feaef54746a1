"""Response items shared by several use cases."""

from datetime import datetime
from typing import Iterable, Literal, Optional

from pydantic import BaseModel

from devforum.domain.model import Answer, Community, CommunityView, Question, User
from devforum.domain.repository import UserRepository
from devforum.domain.value import UserId


class AuthorInfo(BaseModel):
    """Public author details embedded in content items."""

    user_id: str
    username: str
    reputation: int
    avatar_url: str | None


class QuestionItem(BaseModel):
    """Question as shown in listings. Carries counts, not the vote set."""

    question_id: str
    title: str
    body: str
    author: AuthorInfo | None
    tags: list[str]
    vote_count: int
    answer_count: int
    views: int
    score: float
    is_answered: bool
    selected_answer_id: str | None
    created_at: datetime


class AnswerItem(BaseModel):
    """Answer with its derived vote count."""

    answer_id: str
    question_id: str
    body: str
    author: AuthorInfo | None
    vote_count: int
    is_accepted: bool
    my_vote: int | None = None  # Requesting user's vote, when authenticated
    created_at: datetime
    updated_at: datetime


class CommunityItem(BaseModel):
    """Community record or tag-derived placeholder."""

    kind: Literal["stored", "synthesized"]
    community_id: str | None
    name: str
    display_name: str
    description: str
    member_count: int
    post_count: int
    is_public: bool
    created_by: str | None = None
    moderator_ids: list[str] = []
    rules: list[dict[str, str]] = []
    avatar_url: str | None = None
    created_at: datetime | None = None


def author_info(user: Optional[User]) -> AuthorInfo | None:
    """Public author details, or None for a deleted account."""
    if not user:
        return None
    return AuthorInfo(
        user_id=str(user.id),
        username=user.username.root,
        reputation=user.reputation,
        avatar_url=user.avatar_url,
    )


async def load_authors(
    user_repository: UserRepository, author_ids: Iterable[UserId]
) -> dict[UserId, User]:
    """Load each distinct author once."""
    authors: dict[UserId, User] = {}
    for author_id in set(author_ids):
        user = await user_repository.find_by_id(author_id)
        if user:
            authors[author_id] = user
    return authors


def question_item(
    question: Question, author: Optional[User], score: float
) -> QuestionItem:
    """Build a listing item from a question."""
    return QuestionItem(
        question_id=str(question.id),
        title=question.title,
        body=question.body,
        author=author_info(author),
        tags=[t.root for t in question.tags],
        vote_count=question.vote_count,
        answer_count=question.answer_count,
        views=question.views,
        score=score,
        is_answered=question.is_answered,
        selected_answer_id=(
            str(question.selected_answer_id) if question.selected_answer_id else None
        ),
        created_at=question.created_at,
    )


def my_vote(entity: Question | Answer, user_id: Optional[UserId]) -> int | None:
    """The requesting user's vote value on an entity, if any."""
    if user_id is None:
        return None
    for vote in entity.votes:
        if vote.user_id == user_id:
            return int(vote.value)
    return None


def answer_item(
    answer: Answer, author: Optional[User], viewer_id: Optional[UserId] = None
) -> AnswerItem:
    """Build a response item from an answer."""
    return AnswerItem(
        answer_id=str(answer.id),
        question_id=str(answer.question_id),
        body=answer.body,
        author=author_info(author),
        vote_count=answer.vote_count,
        is_accepted=answer.is_accepted,
        my_vote=my_vote(answer, viewer_id),
        created_at=answer.created_at,
        updated_at=answer.updated_at,
    )


def community_item(community: CommunityView) -> CommunityItem:
    """Build a response item from either kind of community."""
    if isinstance(community, Community):
        return CommunityItem(
            kind="stored",
            community_id=str(community.id),
            name=community.name.root,
            display_name=community.display_name,
            description=community.description,
            member_count=community.member_count,
            post_count=community.post_count,
            is_public=community.is_public,
            created_by=str(community.created_by),
            moderator_ids=[str(m) for m in community.moderator_ids],
            rules=[rule.model_dump() for rule in community.rules],
            avatar_url=community.avatar_url,
            created_at=community.created_at,
        )
    return CommunityItem(
        kind="synthesized",
        community_id=None,
        name=community.name.root,
        display_name=community.display_name,
        description=community.description,
        member_count=community.member_count,
        post_count=community.post_count,
        is_public=community.is_public,
    )
