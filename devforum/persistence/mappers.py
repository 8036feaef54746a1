"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM.
"""

from typing import Any, Dict, Sequence
from uuid import UUID

from devforum.domain.model import (
    Answer,
    Comment,
    Community,
    CommunityRule,
    Question,
    User,
    Vote,
)
from devforum.domain.value import (
    AnswerId,
    CommentId,
    CommunityId,
    CommunityName,
    QuestionId,
    TagName,
    UserId,
    Username,
    VoteValue,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        reputation=row["reputation"],
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        is_admin=row.get("is_admin", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "password_hash": user.password_hash,
        "reputation": user.reputation,
        "bio": user.bio,
        "avatar_url": user.avatar_url,
        "is_admin": user.is_admin,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert a votes table row to a Vote."""
    return Vote(user_id=UserId(_uuid(row["user_id"])), value=VoteValue(row["value"]))


def row_to_question(
    row: Dict[str, Any],
    votes: Sequence[Vote] = (),
    answer_ids: Sequence[AnswerId] = (),
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        votes: The question's vote set (stored in the votes table)
        answer_ids: IDs of answers referencing the question

    Returns:
        Question domain model
    """
    selected = row.get("selected_answer_id")
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        tags=[TagName(t) for t in row["tags"]],
        votes=list(votes),
        answer_ids=list(answer_ids),
        views=row["views"],
        is_answered=row["is_answered"],
        selected_answer_id=AnswerId(_uuid(selected)) if selected else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Vote sets and answer IDs live in other tables and are excluded.
    """
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "author_id": question.author_id,
        "tags": [t.root for t in question.tags],
        "views": question.views,
        "is_answered": question.is_answered,
        "selected_answer_id": question.selected_answer_id,
        "created_at": question.created_at,
        "updated_at": question.updated_at,
    }


def row_to_answer(row: Dict[str, Any], votes: Sequence[Vote] = ()) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        is_accepted=row["is_accepted"],
        votes=list(votes),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict (vote set excluded)."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "author_id": answer.author_id,
        "body": answer.body,
        "is_accepted": answer.is_accepted,
        "created_at": answer.created_at,
        "updated_at": answer.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        answer_id=AnswerId(_uuid(row["answer_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=CommunityName(row["name"]),
        display_name=row["display_name"],
        description=row["description"],
        created_by=UserId(_uuid(row["created_by"])),
        moderator_ids=[UserId(_uuid(m)) for m in row["moderator_ids"]],
        member_count=row["member_count"],
        post_count=row["post_count"],
        is_public=row["is_public"],
        rules=[CommunityRule(**rule) for rule in row["rules"]],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return {
        "id": community.id,
        "name": community.name.root,
        "display_name": community.display_name,
        "description": community.description,
        "created_by": community.created_by,
        "moderator_ids": list(community.moderator_ids),
        "member_count": community.member_count,
        "post_count": community.post_count,
        "is_public": community.is_public,
        "rules": [rule.model_dump() for rule in community.rules],
        "avatar_url": community.avatar_url,
        "created_at": community.created_at,
        "updated_at": community.updated_at,
    }
