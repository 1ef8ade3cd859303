"""Star feedback use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import ADMIN_ONLY, BaseUseCase
from eduforum.domain.service import FeedbackService, SessionService
from eduforum.domain.value import FeedbackId, parse_uuid


class StarFeedbackRequest(BaseModel):
    """Star or unstar request."""

    feedback_id: str
    starred: bool
    token: str | None


class StarFeedbackResponse(BaseModel):
    """Star or unstar response."""

    success: bool


class StarFeedbackUseCase(BaseUseCase):
    """Use case for starring and unstarring a post. Idempotent."""

    def __init__(
        self, session_service: SessionService, feedback_service: FeedbackService
    ) -> None:
        self.session_service = session_service
        self.feedback_service = feedback_service

    async def execute(self, request: StarFeedbackRequest) -> StarFeedbackResponse:
        """Execute star flow.

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not an Admin
            ValidationError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        operation = "star feedback" if request.starred else "unstar feedback"
        await self.session_service.require(request.token, operation, ADMIN_ONLY)
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        await self.feedback_service.set_starred(feedback_id, request.starred)
        return StarFeedbackResponse(success=True)
