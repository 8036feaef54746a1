"""Register use case."""

import logfire
from pydantic import BaseModel, Field

from devforum.domain.service import JWTService, UserService
from devforum.domain.value import Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: Username
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=6, max_length=128)


class AuthTokenResponse(BaseModel):
    """Bearer token issued after registration or login."""

    token: str
    user_id: str
    username: str


class RegisterUseCase:
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthTokenResponse:
        """Execute register flow.

        Raises:
            ConflictError: If the username or email is taken
        """
        with logfire.span("register.execute", username=request.username.root):
            user = await self.user_service.register(
                request.username, request.email, request.password
            )
            token = self.jwt_service.create_token(str(user.id), user.username.root)
            return AuthTokenResponse(
                token=token, user_id=str(user.id), username=user.username.root
            )
