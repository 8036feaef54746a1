"""Unit tests for user profile use cases."""

import pytest

from devforum.application.usecase.user import (
    GetProfileRequest,
    GetProfileUseCase,
    ListUserAnswersUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserContentRequest,
)
from devforum.domain.error import NotFoundError
from devforum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from tests.conftest import make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetProfile:
    """Tests for GetProfileUseCase."""

    @pytest.mark.asyncio
    async def test_profile_counts_activity(self, unit_env):
        """A profile shows reputation and counts without the email address."""
        # Arrange
        use_case = await unit_env.get(GetProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = await user_repo.save(make_user(username="grace", reputation=120))
        for _ in range(7):
            await question_repo.save(make_question(user.id))
        await answer_repo.save(make_answer(make_question(user.id).id, user.id))

        # Act
        profile = await use_case.execute(GetProfileRequest(username="grace"))

        # Assert
        assert profile.reputation == 120
        assert profile.question_count == 7
        assert profile.answer_count == 1
        assert len(profile.recent_questions) == 5
        assert "email" not in profile.model_dump()

    @pytest.mark.asyncio
    async def test_unknown_username_raises_not_found(self, unit_env):
        """Missing users raise NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetProfileUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetProfileRequest(username="nobody"))


class TestUpdateProfile:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_bio(self, unit_env):
        """The bio is replaced and shown on the profile."""
        # Arrange
        update = await unit_env.get(UpdateProfileUseCase)
        get_profile = await unit_env.get(GetProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user(username="grace"))

        # Act
        await update.execute(
            UpdateProfileRequest(user_id=str(user.id), bio="COBOL pioneer")
        )

        # Assert
        profile = await get_profile.execute(GetProfileRequest(username="grace"))
        assert profile.bio == "COBOL pioneer"


class TestListUserAnswers:
    """Tests for ListUserAnswersUseCase."""

    @pytest.mark.asyncio
    async def test_pages_through_answers(self, unit_env):
        """Answers are paginated with totals."""
        # Arrange
        use_case = await unit_env.get(ListUserAnswersUseCase)
        user_repo = await unit_env.get(UserRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        user = await user_repo.save(make_user(username="grace"))
        question_id = make_question(user.id).id
        for _ in range(3):
            await answer_repo.save(make_answer(question_id, user.id))

        # Act
        response = await use_case.execute(
            UserContentRequest(username="grace", page=2, limit=2)
        )

        # Assert
        assert response.total == 3
        assert response.total_pages == 2
        assert len(response.answers) == 1
