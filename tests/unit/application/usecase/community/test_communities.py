"""Unit tests for community use cases."""

import pytest

from devforum.application.usecase.community import (
    ChangeMembershipUseCase,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    MembershipRequest,
    PopularCommunitiesRequest,
    PopularCommunitiesUseCase,
)
from devforum.domain.error import NotFoundError
from devforum.domain.repository import QuestionRepository, UserRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCommunity:
    """Tests for GetCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_tag_page_without_record(self, unit_env):
        """A tag in use gets a read-only community page."""
        # Arrange
        use_case = await unit_env.get(GetCommunityUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        await question_repo.save(make_question(author.id, tags=["rust"]))

        # Act
        response = await use_case.execute(
            GetCommunityRequest(name="rust", user_id=str(author.id))
        )

        # Assert
        assert response.community.kind == "synthesized"
        assert response.community.post_count == 1
        assert len(response.recent_questions) == 1
        assert response.can_moderate is False

    @pytest.mark.asyncio
    async def test_creator_can_moderate(self, unit_env):
        """The creator sees moderation rights on the stored community."""
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        use_case = await unit_env.get(GetCommunityUseCase)
        user_repo = await unit_env.get(UserRepository)
        creator = await user_repo.save(make_user())
        await create.execute(
            CreateCommunityRequest(name="elixir", creator_id=str(creator.id))
        )

        # Act
        response = await use_case.execute(
            GetCommunityRequest(name="elixir", user_id=str(creator.id))
        )

        # Assert
        assert response.community.kind == "stored"
        assert response.community.post_count == 0
        assert response.can_moderate is True

    @pytest.mark.asyncio
    async def test_unknown_name_raises_not_found(self, unit_env):
        """Neither record nor tag means NotFoundError."""
        # Arrange
        use_case = await unit_env.get(GetCommunityUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommunityRequest(name="cobol"))


class TestPopularCommunities:
    """Tests for PopularCommunitiesUseCase."""

    @pytest.mark.asyncio
    async def test_limit_applies_after_merge(self, unit_env):
        """The limit cuts the merged, ranked list."""
        # Arrange
        use_case = await unit_env.get(PopularCommunitiesUseCase)
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = await user_repo.save(make_user())
        for tags in (["go"], ["go"], ["rust"], ["zig"]):
            await question_repo.save(make_question(author.id, tags=tags))

        # Act
        response = await use_case.execute(PopularCommunitiesRequest(limit=2))

        # Assert
        assert [c.name for c in response.communities][0] == "go"
        assert len(response.communities) == 2


class TestMembership:
    """Tests for ChangeMembershipUseCase."""

    @pytest.mark.asyncio
    async def test_join_then_leave(self, unit_env):
        """Membership changes report the new member count."""
        # Arrange
        create = await unit_env.get(CreateCommunityUseCase)
        use_case = await unit_env.get(ChangeMembershipUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        await create.execute(CreateCommunityRequest(name="go", creator_id=str(user.id)))

        # Act
        joined = await use_case.execute(
            MembershipRequest(name="go", user_id=str(user.id), action="join")
        )
        left = await use_case.execute(
            MembershipRequest(name="go", user_id=str(user.id), action="leave")
        )

        # Assert
        assert joined.member_count == 1
        assert left.member_count == 0
