"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from devforum.domain.error import AuthenticationError, ConflictError, NotFoundError
from devforum.domain.repository import UserRepository
from devforum.domain.service import UserService
from devforum.domain.value import UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register."""

    @pytest.mark.asyncio
    async def test_register_creates_user_with_hashed_password(self, unit_env):
        """New users start at zero reputation and never store the raw password."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register(
            Username("ada"), "Ada@Example.com", "correct horse"
        )

        # Assert
        assert user.reputation == 0
        assert user.email == "ada@example.com"
        assert user.password_hash != "correct horse"

    @pytest.mark.asyncio
    async def test_duplicate_username_conflicts(self, unit_env):
        """Usernames are unique."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Username("ada"), "ada@example.com", "pw123456")

        # Act & Assert
        with pytest.raises(ConflictError):
            await user_service.register(Username("ada"), "other@example.com", "pw123456")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        """Emails are unique regardless of case."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Username("ada"), "ada@example.com", "pw123456")

        # Act & Assert
        with pytest.raises(ConflictError):
            await user_service.register(Username("grace"), "ADA@example.com", "pw123456")


class TestAuthenticate:
    """Tests for authenticate."""

    @pytest.mark.asyncio
    async def test_login_by_username_or_email(self, unit_env):
        """Either identifier works with the right password."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register(
            Username("ada"), "ada@example.com", "pw123456"
        )

        # Act
        by_name = await user_service.authenticate("ada", "pw123456")
        by_email = await user_service.authenticate("ADA@example.com", "pw123456")

        # Assert
        assert by_name.id == user.id
        assert by_email.id == user.id

    @pytest.mark.asyncio
    async def test_wrong_password_fails(self, unit_env):
        """A wrong password raises AuthenticationError."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Username("ada"), "ada@example.com", "pw123456")

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await user_service.authenticate("ada", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_login_fails(self, unit_env):
        """Unknown users get the same error as a wrong password."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await user_service.authenticate("nobody", "pw123456")
        with pytest.raises(AuthenticationError):
            await user_service.authenticate("not a username!", "pw123456")


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_update_keeps_reputation(self, unit_env):
        """Profile edits never touch reputation, even from a stale copy."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_service.register(
            Username("ada"), "ada@example.com", "pw123456"
        )
        await user_repo.adjust_reputation(user.id, 25)

        # Act
        updated = await user_service.update_profile(user.id, bio="Mathematician")

        # Assert
        assert updated.bio == "Mathematician"
        assert updated.avatar_url is None
        assert (await user_repo.find_by_id(user.id)).reputation == 25

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, unit_env):
        """Updating a missing user raises NotFoundError."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), bio="Ghost")
