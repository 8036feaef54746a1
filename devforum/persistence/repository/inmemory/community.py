"""In-memory community repository for testing."""

from typing import Optional, Sequence

from devforum.domain.model import Community
from devforum.domain.repository import CommunityRepository, CommunitySortOrder
from devforum.domain.value import CommunityName, TagName

from .store import InMemoryStore


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._communities = store.communities

    def _filtered(self, search: Optional[str], public_only: bool) -> list[Community]:
        communities = list(self._communities.values())
        if public_only:
            communities = [c for c in communities if c.is_public]
        if search:
            needle = search.lower()
            communities = [
                c
                for c in communities
                if needle in c.name.root
                or needle in c.display_name.lower()
                or needle in c.description.lower()
            ]
        return communities

    async def find_by_name(
        self, name: CommunityName, for_update: bool = False
    ) -> Optional[Community]:
        """Find a community by name (for_update is ignored)."""
        for community in self._communities.values():
            if community.name.root == name.root:
                return community
        return None

    async def find_all(
        self,
        sort: CommunitySortOrder = CommunitySortOrder.MEMBERS,
        search: Optional[str] = None,
        public_only: bool = True,
        limit: Optional[int] = 20,
        offset: int = 0,
    ) -> list[Community]:
        """Find communities with filtering and pagination."""
        communities = self._filtered(search, public_only)

        if sort == CommunitySortOrder.MEMBERS:
            communities.sort(key=lambda c: (c.member_count, c.post_count), reverse=True)
        elif sort == CommunitySortOrder.POSTS:
            communities.sort(key=lambda c: (c.post_count, c.member_count), reverse=True)
        elif sort == CommunitySortOrder.NEWEST:
            communities.sort(key=lambda c: c.created_at, reverse=True)
        elif sort == CommunitySortOrder.NAME:
            communities.sort(key=lambda c: c.name.root)

        if limit is None:
            return communities[offset:]
        return communities[offset : offset + limit]

    async def count(self, search: Optional[str] = None, public_only: bool = True) -> int:
        """Count communities matching the given filters."""
        return len(self._filtered(search, public_only))

    async def save(self, community: Community) -> Community:
        """Save or update a community."""
        self._communities[community.id] = community
        return community

    async def increment_post_count(self, tags: Sequence[TagName]) -> int:
        """Increment post_count of communities named after the tags."""
        names = {t.root for t in tags}
        updated = 0
        for community in list(self._communities.values()):
            if community.name.root in names:
                self._communities[community.id] = community.model_copy(
                    update={"post_count": community.post_count + 1}
                )
                updated += 1
        return updated
