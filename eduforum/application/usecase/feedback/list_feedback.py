"""List feedback use case."""

from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.service import FeedbackService
from eduforum.domain.value import CommunityId, parse_uuid

from .get_feedback import FeedbackInfo


class ListFeedbackRequest(BaseModel):
    """List feedback request."""

    community_id: str


class ListFeedbackResponse(BaseModel):
    """List feedback response."""

    feedbacks: list[FeedbackInfo]


class ListFeedbackUseCase(BaseUseCase):
    """Use case for listing the posts of a community, newest first.

    The community itself is not looked up: posts outlive their community.
    """

    def __init__(self, feedback_service: FeedbackService) -> None:
        self.feedback_service = feedback_service

    async def execute(self, request: ListFeedbackRequest) -> ListFeedbackResponse:
        community_id = CommunityId(parse_uuid(request.community_id, "community"))
        posts = await self.feedback_service.list_feedback(community_id)
        return ListFeedbackResponse(
            feedbacks=[FeedbackInfo.from_domain(post) for post in posts]
        )
