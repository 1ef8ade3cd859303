"""Community domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from eduforum.domain.error import NotFoundError, ValidationError
from eduforum.domain.model.community import Community
from eduforum.domain.repository import CommunityRepository
from eduforum.domain.value import CommunityId

from .base import Service


class CommunityService(Service):
    """Domain service for community operations."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def create_community(self, name: str, description: str) -> Community:
        """Create a community.

        Args:
            name: Community name
            description: Community description

        Returns:
            Created community

        Raises:
            ValidationError: If name or description is blank
        """
        with logfire.span("community_service.create_community", name=name):
            if not name.strip() or not description.strip():
                raise ValidationError("Name and description required")

            community = Community(
                id=CommunityId(uuid4()),
                name=name,
                description=description,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.community_repository.save(community)
            logfire.info("Community created", community_id=str(saved.id), name=name)
            return saved

    async def list_communities(self) -> list[Community]:
        """List all communities, newest first."""
        with logfire.span("community_service.list_communities"):
            communities = await self.community_repository.find_all()
            logfire.info("Communities listed", count=len(communities))
            return communities

    async def get_community(self, community_id: CommunityId) -> Community:
        """Get a community by ID.

        Raises:
            NotFoundError: If the community does not exist
        """
        community = await self.community_repository.find_by_id(community_id)
        if not community:
            logfire.warn("Community not found", community_id=str(community_id))
            raise NotFoundError("Community", str(community_id))
        return community

    async def delete_community(self, community_id: CommunityId) -> None:
        """Delete a community. Its posts are left in place.

        Raises:
            NotFoundError: If no community was deleted
        """
        with logfire.span(
            "community_service.delete_community", community_id=str(community_id)
        ):
            deleted = await self.community_repository.delete(community_id)
            if not deleted:
                logfire.warn(
                    "Community not found for delete", community_id=str(community_id)
                )
                raise NotFoundError("Community", str(community_id))
            logfire.info("Community deleted", community_id=str(community_id))
