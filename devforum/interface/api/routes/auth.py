"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from devforum.application.usecase.auth import (
    AuthTokenResponse,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=AuthTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthTokenResponse:
    """Create an account and return a bearer token.

    Raises:
        ConflictError: If the username or email is taken (409)
    """
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthTokenResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthTokenResponse:
    """Exchange a username or email and password for a bearer token.

    Raises:
        AuthenticationError: If the credentials do not match (401)
    """
    return await login_use_case.execute(request)
