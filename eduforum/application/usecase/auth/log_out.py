"""Log out use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import SessionService


class LogOutRequest(BaseModel):
    """Log out request."""

    token: str | None


class LogOutResponse(BaseModel):
    """Log out response."""

    success: bool


class LogOutUseCase(BaseUseCase):
    """Use case for destroying the caller's session."""

    def __init__(self, session_service: SessionService) -> None:
        self.session_service = session_service

    async def execute(self, request: LogOutRequest) -> LogOutResponse:
        """Execute log out flow.

        Raises:
            NotAuthenticatedError: If there is no session to destroy
        """
        await self.session_service.close(request.token)
        return LogOutResponse(success=True)
