"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from eduforum.domain.model.community import Community
from eduforum.domain.value import CommunityId


class CommunityRepository(ABC):
    """Repository for Community entity."""

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by ID.

        Args:
            community_id: The community's unique identifier

        Returns:
            The community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Community]:
        """List all communities, newest first."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Save a community.

        Args:
            community: The community to save

        Returns:
            The saved community
        """
        pass

    @abstractmethod
    async def delete(self, community_id: CommunityId) -> bool:
        """Delete a community (hard delete, posts are left in place).

        Args:
            community_id: The community ID to delete

        Returns:
            True if a row was deleted, False otherwise
        """
        pass
