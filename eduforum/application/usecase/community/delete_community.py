"""Delete community use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import ADMIN_ONLY, BaseUseCase
from eduforum.domain.service import CommunityService, SessionService
from eduforum.domain.value import CommunityId, parse_uuid


class DeleteCommunityRequest(BaseModel):
    """Delete community request."""

    community_id: str
    token: str | None


class DeleteCommunityResponse(BaseModel):
    """Delete community response."""

    success: bool


class DeleteCommunityUseCase(BaseUseCase):
    """Use case for deleting a community. Its posts are kept."""

    def __init__(
        self, session_service: SessionService, community_service: CommunityService
    ) -> None:
        self.session_service = session_service
        self.community_service = community_service

    async def execute(self, request: DeleteCommunityRequest) -> DeleteCommunityResponse:
        """Execute delete community flow.

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not an Admin
            ValidationError: If the id is malformed
            NotFoundError: If nothing was deleted
        """
        await self.session_service.require(
            request.token, "delete community", ADMIN_ONLY
        )
        community_id = CommunityId(parse_uuid(request.community_id, "community"))
        await self.community_service.delete_community(community_id)
        return DeleteCommunityResponse(success=True)
