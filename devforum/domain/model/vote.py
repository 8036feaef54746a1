"""Vote value object and vote-set mutation.

A vote set holds at most one vote per user. Repeating a vote withdraws it,
voting the other way flips it.
"""

from typing import Sequence

from pydantic import BaseModel, ConfigDict

from devforum.domain.value import UserId, VoteAction, VoteValue


class Vote(BaseModel):
    """A single user's vote inside an entity's vote set."""

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    value: VoteValue


class VoteOutcome(BaseModel):
    """Result of applying one vote request to a vote set."""

    model_config = ConfigDict(frozen=True)

    votes: list[Vote]
    action: VoteAction
    value: VoteValue  # Requested direction
    score_delta: int  # Change of the summed vote count


def vote_count(votes: Sequence[Vote]) -> int:
    """Sum the values of a vote set."""
    return sum(int(vote.value) for vote in votes)


def apply_vote(votes: Sequence[Vote], user_id: UserId, value: object) -> VoteOutcome:
    """Apply a user's vote request to a vote set.

    - No existing vote: insert it, score changes by ``value``
    - Existing vote with the same value: remove it, score changes by ``-value``
    - Existing vote with the opposite value: replace it, score changes by ``2 * value``

    The input sequence is not modified.

    Args:
        votes: Current vote set
        user_id: Voting user
        value: Requested vote value (1 or -1)

    Returns:
        New vote set with the action taken and the score delta

    Raises:
        InvalidVoteValueError: If value is not 1 or -1
    """
    direction = VoteValue.parse(value)
    existing = next((vote for vote in votes if vote.user_id == user_id), None)

    if existing is None:
        return VoteOutcome(
            votes=[*votes, Vote(user_id=user_id, value=direction)],
            action=VoteAction.CAST,
            value=direction,
            score_delta=int(direction),
        )

    if existing.value == direction:
        return VoteOutcome(
            votes=[vote for vote in votes if vote.user_id != user_id],
            action=VoteAction.REMOVED,
            value=direction,
            score_delta=-int(direction),
        )

    # Replace in place to keep the original ordering of the set
    flipped = [
        Vote(user_id=user_id, value=direction) if vote.user_id == user_id else vote
        for vote in votes
    ]
    return VoteOutcome(
        votes=flipped,
        action=VoteAction.CHANGED,
        value=direction,
        score_delta=2 * int(direction),
    )
