"""Log in use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import AccountService, SessionService
from eduforum.domain.value import Role


class LogInRequest(BaseModel):
    """Log in request."""

    name: str
    password: str
    role: Role
    previous_token: str | None = None


class LogInResponse(BaseModel):
    """Log in response."""

    success: bool
    token: str


class LogInUseCase(BaseUseCase):
    """Use case for checking credentials and opening a session."""

    def __init__(
        self, account_service: AccountService, session_service: SessionService
    ) -> None:
        """Initialize log in use case.

        Args:
            account_service: Account domain service
            session_service: Session domain service
        """
        self.account_service = account_service
        self.session_service = session_service

    async def execute(self, request: LogInRequest) -> LogInResponse:
        """Execute log in flow.

        Raises:
            InvalidCredentialsError: If the credentials do not match an account
        """
        account = await self.account_service.authenticate(
            request.name, request.password, request.role
        )
        session = await self.session_service.open(account, request.previous_token)
        return LogInResponse(success=True, token=session.token)
