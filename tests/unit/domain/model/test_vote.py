"""Unit tests for vote-set mutation."""

from uuid import uuid4

import pytest

from devforum.domain.error import InvalidVoteValueError
from devforum.domain.model import Vote, apply_vote, vote_count
from devforum.domain.value import UserId, VoteAction, VoteValue
from tests.conftest import votes_from


class TestApplyVote:
    """Tests for apply_vote."""

    def test_first_vote_is_inserted(self):
        """A user without a vote gets one, and the score moves by its value."""
        user_id = UserId(uuid4())

        outcome = apply_vote([], user_id, 1)

        assert outcome.action == VoteAction.CAST
        assert outcome.votes == [Vote(user_id=user_id, value=VoteValue.UP)]
        assert outcome.score_delta == 1

    def test_repeating_a_vote_removes_it(self):
        """Voting the same way twice withdraws the vote."""
        user_id = UserId(uuid4())
        votes = [Vote(user_id=user_id, value=VoteValue.DOWN)]

        outcome = apply_vote(votes, user_id, -1)

        assert outcome.action == VoteAction.REMOVED
        assert outcome.votes == []
        assert outcome.score_delta == 1

    def test_opposite_vote_replaces_existing(self):
        """Voting the other way flips the vote and moves the score by two."""
        user_id = UserId(uuid4())
        others = votes_from(1, 1)
        votes = [others[0], Vote(user_id=user_id, value=VoteValue.UP), others[1]]

        outcome = apply_vote(votes, user_id, -1)

        assert outcome.action == VoteAction.CHANGED
        assert outcome.score_delta == -2
        assert outcome.votes[1] == Vote(user_id=user_id, value=VoteValue.DOWN)
        assert [v.user_id for v in outcome.votes] == [v.user_id for v in votes]

    def test_input_vote_set_is_not_modified(self):
        """apply_vote returns a new set and leaves its input alone."""
        votes = votes_from(1)
        snapshot = list(votes)

        apply_vote(votes, UserId(uuid4()), -1)

        assert votes == snapshot

    def test_other_users_votes_are_kept(self):
        """Only the voting user's entry changes."""
        votes = votes_from(1, -1, 1)

        outcome = apply_vote(votes, UserId(uuid4()), 1)

        assert outcome.votes[:3] == votes
        assert vote_count(outcome.votes) == 2

    @pytest.mark.parametrize("value", [0, 2, -2, True, 0.5, 1.5, "1", None])
    def test_invalid_values_are_rejected(self, value):
        """Only the numbers 1 and -1 are votes."""
        with pytest.raises(InvalidVoteValueError):
            apply_vote([], UserId(uuid4()), value)

    def test_score_delta_matches_vote_count_change(self):
        """Each outcome's delta equals the change of the summed votes."""
        user_id = UserId(uuid4())
        votes = votes_from(1, -1)

        for value in (1, 1, -1, -1, 1, -1):
            before = vote_count(votes)
            outcome = apply_vote(votes, user_id, value)
            assert vote_count(outcome.votes) - before == outcome.score_delta
            votes = outcome.votes

    def test_at_most_one_vote_per_user(self):
        """Whatever the sequence of requests, a user holds at most one vote."""
        user_id = UserId(uuid4())
        votes: list[Vote] = []

        for value in (1, -1, -1, 1, 1, -1):
            votes = apply_vote(votes, user_id, value).votes
            assert sum(1 for v in votes if v.user_id == user_id) <= 1


class TestVoteValue:
    """Tests for VoteValue.parse."""

    def test_parses_unit_integers(self):
        assert VoteValue.parse(1) is VoteValue.UP
        assert VoteValue.parse(-1) is VoteValue.DOWN

    def test_parses_integral_floats(self):
        """JSON 1.0 and -1.0 are the same numbers as 1 and -1."""
        assert VoteValue.parse(1.0) is VoteValue.UP
        assert VoteValue.parse(-1.0) is VoteValue.DOWN

    def test_rejects_booleans(self):
        with pytest.raises(InvalidVoteValueError):
            VoteValue.parse(True)

    def test_error_carries_rejected_value(self):
        with pytest.raises(InvalidVoteValueError) as exc_info:
            VoteValue.parse(5)

        assert exc_info.value.value == 5
