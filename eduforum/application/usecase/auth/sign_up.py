"""Sign up use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import AccountService, SessionService
from eduforum.domain.value import Role


class SignUpRequest(BaseModel):
    """Sign up request."""

    name: str
    password: str
    role: Role
    previous_token: str | None = None  # Session cookie the caller already holds


class SignUpResponse(BaseModel):
    """Sign up response."""

    success: bool
    token: str


class SignUpUseCase(BaseUseCase):
    """Use case for creating an account and opening its first session."""

    def __init__(
        self, account_service: AccountService, session_service: SessionService
    ) -> None:
        """Initialize sign up use case.

        Args:
            account_service: Account domain service
            session_service: Session domain service
        """
        self.account_service = account_service
        self.session_service = session_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign up flow.

        The account is stored before the session opens; a rejected sign-up
        leaves the caller's current session untouched.

        Raises:
            ValidationError: If name or password is blank
            BusinessRuleViolationError: If the (name, role) pair is taken
        """
        account = await self.account_service.register(
            request.name, request.password, request.role
        )
        session = await self.session_service.open(account, request.previous_token)
        return SignUpResponse(success=True, token=session.token)
