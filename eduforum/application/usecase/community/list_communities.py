"""List communities use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import CommunityService

from .get_community import CommunityInfo


class ListCommunitiesResponse(BaseModel):
    """List communities response."""

    communities: list[CommunityInfo]


class ListCommunitiesUseCase(BaseUseCase):
    """Use case for listing all communities, newest first."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: None = None) -> ListCommunitiesResponse:
        communities = await self.community_service.list_communities()
        return ListCommunitiesResponse(
            communities=[CommunityInfo.from_domain(c) for c in communities]
        )
