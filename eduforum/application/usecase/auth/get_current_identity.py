"""Get current identity use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase, CamelModel
from eduforum.domain.service import SessionService
from eduforum.domain.value import Role


class GetCurrentIdentityRequest(BaseModel):
    """Get current identity request."""

    token: str | None


class GetCurrentIdentityResponse(CamelModel):
    """Name and role bound to the caller's session."""

    name: str
    user_type: Role


class GetCurrentIdentityUseCase(BaseUseCase):
    """Use case for reading the identity behind a session cookie."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(
        self, request: GetCurrentIdentityRequest
    ) -> GetCurrentIdentityResponse:
        """Execute get current identity flow.

        Raises:
            NotAuthenticatedError: If there is no live session
        """
        session = await self.session_service.require(request.token, "read identity")
        return GetCurrentIdentityResponse(name=session.name.root, user_type=session.role)
