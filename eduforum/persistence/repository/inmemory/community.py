"""In-memory community repository for testing."""

from typing import Optional

from eduforum.domain.model.community import Community
from eduforum.domain.repository.community import CommunityRepository
from eduforum.domain.value import CommunityId


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID."""
        return self._communities.get(community_id)

    async def find_all(self) -> list[Community]:
        """List all communities, newest first."""
        return sorted(
            reversed(self._communities.values()),
            key=lambda c: c.created_at,
            reverse=True,
        )

    async def save(self, community: Community) -> Community:
        """Save or update a community."""
        self._communities[community.id] = community
        return community

    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community."""
        return self._communities.pop(community_id, None) is not None
