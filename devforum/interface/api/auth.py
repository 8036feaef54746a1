"""Bearer token helpers for routes."""

from fastapi import HTTPException, status

from devforum.domain.service import JWTService


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def optional_user_id(jwt_service: JWTService, authorization: str | None) -> str | None:
    """User ID of the caller, or None for anonymous or invalid tokens."""
    return jwt_service.get_user_id_from_token(bearer_token(authorization))


def require_user_id(
    jwt_service: JWTService,
    authorization: str | None,
    detail: str = "Authentication required",
) -> str:
    """User ID of the caller.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = optional_user_id(jwt_service, authorization)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
