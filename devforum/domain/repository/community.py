"""Community repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Sequence

from devforum.domain.model.community import Community
from devforum.domain.value import CommunityName, TagName


class CommunitySortOrder(str, Enum):
    """Sort order for community listings."""

    MEMBERS = "members"  # member_count DESC
    POSTS = "posts"  # post_count DESC
    NEWEST = "newest"  # created_at DESC
    NAME = "name"  # name ASC


class CommunityRepository(ABC):
    """Repository for Community records."""

    @abstractmethod
    async def find_by_name(
        self, name: CommunityName, for_update: bool = False
    ) -> Optional[Community]:
        """Find a community by its unique name.

        Args:
            name: Normalized community name
            for_update: Lock the row until the current transaction ends

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: CommunitySortOrder = CommunitySortOrder.MEMBERS,
        search: Optional[str] = None,
        public_only: bool = True,
        limit: Optional[int] = 20,
        offset: int = 0,
    ) -> List[Community]:
        """Find communities with filtering and pagination.

        Args:
            sort: Sort order
            search: Case-insensitive text matched against display name and description
            public_only: Exclude non-public communities
            limit: Maximum number of communities to return (None for all)
            offset: Number of communities to skip

        Returns:
            List of communities matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None, public_only: bool = True) -> int:
        """Count communities matching the given filters."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community (create or update)."""
        pass

    @abstractmethod
    async def increment_post_count(self, tags: Sequence[TagName]) -> int:
        """Increment post_count by 1 for each existing community named after a tag.

        Tags without a community record are ignored; nothing is created.

        Returns:
            Number of communities updated
        """
        pass
