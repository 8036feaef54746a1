"""Login use case."""

import logfire
from pydantic import BaseModel, Field

from devforum.domain.service import JWTService, UserService

from .register import AuthTokenResponse


class LoginRequest(BaseModel):
    """Login request. login accepts a username or an email address."""

    login: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=128)


class LoginUseCase:
    """Use case for exchanging credentials for a bearer token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthTokenResponse:
        """Execute login flow.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        with logfire.span("login.execute"):
            user = await self.user_service.authenticate(request.login, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return AuthTokenResponse(
                token=token, user_id=str(user.id), username=user.username.root
            )
