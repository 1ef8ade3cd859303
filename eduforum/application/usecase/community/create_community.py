"""Create community use case."""

import logfire
from pydantic import BaseModel

from eduforum.application.usecase.base import ADMIN_ONLY, BaseUseCase
from eduforum.domain.service import CommunityService, SessionService


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: str
    description: str
    token: str | None  # Session cookie


class CreateCommunityResponse(BaseModel):
    """Create community response."""

    success: bool
    id: str


class CreateCommunityUseCase(BaseUseCase):
    """Use case for creating a community."""

    def __init__(
        self, session_service: SessionService, community_service: CommunityService
    ) -> None:
        """Initialize create community use case.

        Args:
            session_service: Session domain service
            community_service: Community domain service
        """
        self.session_service = session_service
        self.community_service = community_service

    async def execute(self, request: CreateCommunityRequest) -> CreateCommunityResponse:
        """Execute create community flow.

        Steps:
        1. Require an Admin session
        2. Validate and persist the community

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not an Admin
            ValidationError: If name or description is blank
        """
        session = await self.session_service.require(
            request.token, "create community", ADMIN_ONLY
        )

        with logfire.span("create_community.execute", admin=session.name.root):
            community = await self.community_service.create_community(
                request.name, request.description
            )
            return CreateCommunityResponse(success=True, id=str(community.id))
