"""Get feedback use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from eduforum.application.usecase.base import BaseUseCase, CamelModel
from eduforum.domain.model.feedback import Feedback
from eduforum.domain.service import FeedbackService
from eduforum.domain.value import FeedbackId, parse_uuid


class FeedbackInfo(CamelModel):
    """Feedback post as exposed over the API."""

    id: str = Field(alias="_id")
    community_id: str
    student_name: str
    standing: str
    major: str
    title: str
    description: str
    upvotes: int
    downvotes: int
    upvoters: list[str]
    downvoters: list[str]
    starred: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, feedback: Feedback) -> "FeedbackInfo":
        return cls(
            id=str(feedback.id),
            community_id=str(feedback.community_id),
            student_name=feedback.student_name.root,
            standing=feedback.standing,
            major=feedback.major,
            title=feedback.title,
            description=feedback.description,
            upvotes=feedback.upvotes,
            downvotes=feedback.downvotes,
            upvoters=sorted(feedback.upvoters),
            downvoters=sorted(feedback.downvoters),
            starred=feedback.starred,
            created_at=feedback.created_at,
        )


class GetFeedbackRequest(BaseModel):
    """Get feedback request."""

    feedback_id: str


class GetFeedbackResponse(BaseModel):
    """Get feedback response."""

    feedback: FeedbackInfo


class GetFeedbackUseCase(BaseUseCase):
    """Use case for fetching one feedback post."""

    def __init__(self, feedback_service: FeedbackService) -> None:
        self.feedback_service = feedback_service

    async def execute(self, request: GetFeedbackRequest) -> GetFeedbackResponse:
        """Execute get feedback flow.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If the post does not exist
        """
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        feedback = await self.feedback_service.get_feedback(feedback_id)
        return GetFeedbackResponse(feedback=FeedbackInfo.from_domain(feedback))
