"""Unit tests for VoteUseCase."""

from uuid import uuid4

import pytest

from devforum.application.usecase.vote import VoteRequest, VoteUseCase
from devforum.domain.error import InvalidVoteValueError, NotFoundError
from devforum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from devforum.domain.value import VotableType, VoteAction
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVoteUseCase:
    """Tests for VoteUseCase."""

    @pytest.mark.asyncio
    async def test_upvote_then_repeat_withdraws(self, unit_env):
        """The same vote twice returns the question to its original count."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))
        request = VoteRequest(
            votable_type=VotableType.QUESTION,
            votable_id=str(question.id),
            user_id=str(voter.id),
            value=1,
        )

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.action == VoteAction.CAST
        assert first.vote_count == 1
        assert first.my_vote == 1
        assert second.action == VoteAction.REMOVED
        assert second.vote_count == 0
        assert second.my_vote is None

    @pytest.mark.asyncio
    async def test_answer_vote_flips(self, unit_env):
        """Voting the other way on an answer moves the count by two."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        author = await user_repo.save(make_user())
        voter = await user_repo.save(make_user())
        answer = await answer_repo.save(make_answer(make_question(author.id).id, author.id))

        def vote(value):
            return VoteRequest(
                votable_type=VotableType.ANSWER,
                votable_id=str(answer.id),
                user_id=str(voter.id),
                value=value,
            )

        # Act
        await use_case.execute(vote(1))
        response = await use_case.execute(vote(-1))

        # Assert
        assert response.action == VoteAction.CHANGED
        assert response.vote_count == -1
        assert response.my_vote == -1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [True, "1", 0.5, 0, 3])
    async def test_value_is_not_coerced(self, unit_env, value):
        """Values that merely look like 1 are rejected, not converted."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        question = await question_repo.save(make_question(author.id))

        # Act & Assert
        with pytest.raises(InvalidVoteValueError):
            await use_case.execute(
                VoteRequest(
                    votable_type=VotableType.QUESTION,
                    votable_id=str(question.id),
                    user_id=str(uuid4()),
                    value=value,
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_target_raises_not_found(self, unit_env):
        """Voting on a missing answer raises NotFoundError."""
        # Arrange
        use_case = await unit_env.get(VoteUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                VoteRequest(
                    votable_type=VotableType.ANSWER,
                    votable_id=str(uuid4()),
                    user_id=str(uuid4()),
                    value=-1,
                )
            )
