"""Vote use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import STUDENT_ONLY, BaseUseCase
from eduforum.domain.service import SessionService, VoteService
from eduforum.domain.value import FeedbackId, VoteType, parse_uuid


class VoteRequest(BaseModel):
    """Vote request."""

    feedback_id: str
    vote_type: VoteType
    token: str | None


class VoteResponse(BaseModel):
    """Vote response."""

    success: bool


class VoteUseCase(BaseUseCase):
    """Use case for upvoting or downvoting a post."""

    def __init__(self, session_service: SessionService, vote_service: VoteService) -> None:
        """Initialize vote use case.

        Args:
            session_service: Session domain service
            vote_service: Vote domain service
        """
        self.session_service = session_service
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> VoteResponse:
        """Execute vote flow.

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not a Student
            ValidationError: If the id is malformed
            NotFoundError: If the post does not exist
            BusinessRuleViolationError: If the caller already voted on the post
        """
        session = await self.session_service.require(
            request.token, request.vote_type.value, STUDENT_ONLY
        )
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        await self.vote_service.vote(feedback_id, session.name.root, request.vote_type)
        return VoteResponse(success=True)
