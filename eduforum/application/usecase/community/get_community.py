"""Get community use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from eduforum.application.usecase.base import BaseUseCase, CamelModel
from eduforum.domain.model.community import Community
from eduforum.domain.service import CommunityService
from eduforum.domain.value import CommunityId, parse_uuid


class CommunityInfo(CamelModel):
    """Community as exposed over the API."""

    id: str = Field(alias="_id")
    name: str
    description: str
    created_at: datetime

    @classmethod
    def from_domain(cls, community: Community) -> "CommunityInfo":
        return cls(
            id=str(community.id),
            name=community.name,
            description=community.description,
            created_at=community.created_at,
        )


class GetCommunityRequest(BaseModel):
    """Get community request."""

    community_id: str


class GetCommunityResponse(BaseModel):
    """Get community response."""

    community: CommunityInfo


class GetCommunityUseCase(BaseUseCase):
    """Use case for fetching one community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: GetCommunityRequest) -> GetCommunityResponse:
        """Execute get community flow.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the community does not exist
        """
        community_id = CommunityId(parse_uuid(request.community_id, "community"))
        community = await self.community_service.get_community(community_id)
        return GetCommunityResponse(community=CommunityInfo.from_domain(community))
