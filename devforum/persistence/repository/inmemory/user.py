"""In-memory user repository for testing."""

from typing import Optional

from devforum.domain.model import User
from devforum.domain.repository import UserRepository
from devforum.domain.value import UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._users = store.users

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by username."""
        for user in self._users.values():
            if user.username.root == username.root:
                return user
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        for user in self._users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user; stored reputation wins over the snapshot."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(update={"reputation": existing.reputation})
        self._users[user.id] = user
        return user

    async def adjust_reputation(self, user_id: UserId, delta: int) -> Optional[int]:
        """Add delta to reputation, clamped at 0."""
        user = self._users.get(user_id)
        if not user:
            return None
        reputation = max(0, user.reputation + delta)
        self._users[user_id] = user.model_copy(update={"reputation": reputation})
        return reputation
