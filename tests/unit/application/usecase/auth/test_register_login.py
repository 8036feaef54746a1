"""Unit tests for RegisterUseCase and LoginUseCase."""

import pytest
from pydantic import ValidationError

from devforum.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from devforum.domain.error import AuthenticationError, ConflictError
from devforum.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_valid_token(self, unit_env):
        """The issued token identifies the new user."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await use_case.execute(
            RegisterRequest(username="ada", email="ada@example.com", password="s3cret!")
        )

        # Assert
        assert response.username == "ada"
        assert jwt_service.verify_token(response.token).user_id == response.user_id

    @pytest.mark.asyncio
    async def test_register_twice_conflicts(self, unit_env):
        """Registering the same username again raises ConflictError."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        request = RegisterRequest(
            username="ada", email="ada@example.com", password="s3cret!"
        )
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(request)

    def test_request_validates_fields(self):
        """Malformed usernames, emails and short passwords are rejected."""
        with pytest.raises(ValidationError):
            RegisterRequest(username="a!", email="ada@example.com", password="s3cret!")
        with pytest.raises(ValidationError):
            RegisterRequest(username="ada", email="not-an-email", password="s3cret!")
        with pytest.raises(ValidationError):
            RegisterRequest(username="ada", email="ada@example.com", password="123")


class TestLogin:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_register(self, unit_env):
        """Credentials used at registration log the user in."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        registered = await register.execute(
            RegisterRequest(username="ada", email="ada@example.com", password="s3cret!")
        )

        # Act
        response = await login.execute(LoginRequest(login="ada", password="s3cret!"))

        # Assert
        assert response.user_id == registered.user_id

    @pytest.mark.asyncio
    async def test_bad_credentials(self, unit_env):
        """A wrong password raises AuthenticationError."""
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        login = await unit_env.get(LoginUseCase)
        await register.execute(
            RegisterRequest(username="ada", email="ada@example.com", password="s3cret!")
        )

        # Act & Assert
        with pytest.raises(AuthenticationError):
            await login.execute(LoginRequest(login="ada", password="wrong!"))
