"""Delete feedback use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import ADMIN_ONLY, BaseUseCase
from eduforum.domain.service import FeedbackService, SessionService
from eduforum.domain.value import FeedbackId, parse_uuid


class DeleteFeedbackRequest(BaseModel):
    """Delete feedback request."""

    feedback_id: str
    token: str | None


class DeleteFeedbackResponse(BaseModel):
    """Delete feedback response."""

    success: bool


class DeleteFeedbackUseCase(BaseUseCase):
    """Use case for deleting a post. Its comments are kept."""

    def __init__(
        self, session_service: SessionService, feedback_service: FeedbackService
    ) -> None:
        self.session_service = session_service
        self.feedback_service = feedback_service

    async def execute(self, request: DeleteFeedbackRequest) -> DeleteFeedbackResponse:
        """Execute delete feedback flow.

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not an Admin
            ValidationError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        await self.session_service.require(request.token, "delete feedback", ADMIN_ONLY)
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        await self.feedback_service.delete_feedback(feedback_id)
        return DeleteFeedbackResponse(success=True)
