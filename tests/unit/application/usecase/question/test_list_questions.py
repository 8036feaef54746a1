"""Unit tests for ListQuestionsUseCase."""

import pytest

from devforum.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsUseCase,
)
from devforum.domain.repository import QuestionRepository, UserRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListQuestions:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_pagination_totals(self, unit_env):
        """Pages report the total and the number of pages."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        for _ in range(5):
            await question_repo.save(make_question(author.id))

        # Act
        response = await use_case.execute(ListQuestionsRequest(page=3, limit=2))

        # Assert
        assert response.total == 5
        assert response.total_pages == 3
        assert response.current_page == 3
        assert len(response.questions) == 1
        assert response.questions[0].author.username == author.username.root

    @pytest.mark.asyncio
    async def test_tag_filter_is_normalized(self, unit_env):
        """Tag filters match regardless of case."""
        # Arrange
        use_case = await unit_env.get(ListQuestionsUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        await question_repo.save(make_question(author.id, tags=["rust"]))
        await question_repo.save(make_question(author.id, tags=["go"]))

        # Act
        response = await use_case.execute(ListQuestionsRequest(tag="Rust"))

        # Assert
        assert response.total == 1
        assert response.questions[0].tags == ["rust"]
