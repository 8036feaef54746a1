"""User domain service."""

from datetime import UTC, datetime
from typing import Optional
from uuid import uuid4

import logfire

from devforum.config import AuthSettings
from devforum.domain.error import AuthenticationError, ConflictError, NotFoundError
from devforum.domain.model import User
from devforum.domain.repository import UserRepository
from devforum.domain.value import UserId, Username
from devforum.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts and profiles."""

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (password hashing cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def register(self, username: Username, email: str, password: str) -> User:
        """Create a new account.

        Args:
            username: Unique username
            email: Unique email address
            password: Plain text password (hashed before storage)

        Returns:
            Created user

        Raises:
            ConflictError: If the username or email is already registered
        """
        with logfire.span("user_service.register", username=username.root):
            email = email.strip().lower()
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username taken", username=username.root)
                raise ConflictError("Username already taken")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", username=username.root)
                raise ConflictError("Email already registered")

            now = datetime.now(UTC)
            user = User(
                id=UserId(uuid4()),
                username=username,
                email=email,
                password_hash=hash_password(password, self.auth_settings.bcrypt_rounds),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username.root)
            return saved

    async def authenticate(self, login: str, password: str) -> User:
        """Check credentials given as username or email.

        Args:
            login: Username or email address
            password: Plain text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If no user matches or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self._find_by_login(login.strip())
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Invalid credentials")
                raise AuthenticationError("Invalid credentials")
            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def _find_by_login(self, login: str) -> Optional[User]:
        if "@" in login:
            return await self.user_repository.find_by_email(login.lower())
        try:
            username = Username(login)
        except ValueError:
            return None
        return await self.user_repository.find_by_username(username)

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_username(self, username: Username) -> User:
        """Get user by username.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if not user:
                logfire.warn("User not found", username=username.root)
                raise NotFoundError("User", username.root)
            return user

    async def update_profile(
        self,
        user_id: UserId,
        bio: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> User:
        """Update a user's bio and avatar. None leaves a field unchanged.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            update: dict[str, object] = {"updated_at": datetime.now(UTC)}
            if bio is not None:
                update["bio"] = bio
            if avatar_url is not None:
                update["avatar_url"] = avatar_url
            saved = await self.user_repository.save(user.model_copy(update=update))
            logfire.info("User profile updated", user_id=str(user_id))
            return saved
