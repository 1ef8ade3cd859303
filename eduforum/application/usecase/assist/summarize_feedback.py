"""Summarize feedback use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import AssistantService, CommentService, FeedbackService
from eduforum.domain.value import FeedbackId, parse_uuid


class SummarizeFeedbackRequest(BaseModel):
    """Summarize feedback request."""

    feedback_id: str


class SummarizeFeedbackResponse(BaseModel):
    """Summarize feedback response."""

    summary: str


class SummarizeFeedbackUseCase(BaseUseCase):
    """Use case for a one-sentence summary of a post and its comments."""

    def __init__(
        self,
        feedback_service: FeedbackService,
        comment_service: CommentService,
        assistant_service: AssistantService,
    ) -> None:
        """Initialize summarize feedback use case.

        Args:
            feedback_service: Feedback domain service
            comment_service: Comment domain service
            assistant_service: Assistant domain service
        """
        self.feedback_service = feedback_service
        self.comment_service = comment_service
        self.assistant_service = assistant_service

    async def execute(
        self, request: SummarizeFeedbackRequest
    ) -> SummarizeFeedbackResponse:
        """Execute summarize flow.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the post does not exist
            AssistantError: If the provider call fails
        """
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        feedback = await self.feedback_service.get_feedback(feedback_id)
        comments = await self.comment_service.get_comments_for_feedback(feedback_id)
        summary = await self.assistant_service.summarize(feedback, comments)
        return SummarizeFeedbackResponse(summary=summary)
