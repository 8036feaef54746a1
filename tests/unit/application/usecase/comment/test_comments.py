"""Unit tests for comment use cases."""

from uuid import uuid4

import pytest

from devforum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from devforum.domain.error import NotFoundError
from devforum.domain.repository import AnswerRepository, UserRepository
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestComments:
    """Tests for CreateCommentUseCase and GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_listed_oldest_first(self, unit_env):
        """Comments on an answer come back in posting order with authors."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = await user_repo.save(make_user(username="linus"))
        answer = await answer_repo.save(make_answer(make_question(user.id).id, user.id))

        # Act
        for body in ("First!", "Second"):
            await create.execute(
                CreateCommentRequest(
                    answer_id=str(answer.id), author_id=str(user.id), body=body
                )
            )
        response = await get_comments.execute(GetCommentsRequest(answer_id=str(answer.id)))

        # Assert
        assert [c.body for c in response.comments] == ["First!", "Second"]
        assert response.comments[0].author_username == "linus"

    @pytest.mark.asyncio
    async def test_comment_on_missing_answer(self, unit_env):
        """Commenting on an unknown answer raises NotFoundError."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        # Act & Assert
        with pytest.raises(NotFoundError):
            await create.execute(
                CreateCommentRequest(
                    answer_id=str(uuid4()), author_id=str(user.id), body="Hello"
                )
            )
