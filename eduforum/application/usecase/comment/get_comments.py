"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from eduforum.application.usecase.base import BaseUseCase, CamelModel
from eduforum.domain.model.comment import Comment
from eduforum.domain.service import CommentService
from eduforum.domain.value import FeedbackId, parse_uuid


class CommentInfo(CamelModel):
    """Comment as exposed over the API."""

    id: str = Field(alias="_id")
    feedback_id: str
    commenter_name: str
    comment_text: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentInfo":
        return cls(
            id=str(comment.id),
            feedback_id=str(comment.feedback_id),
            commenter_name=comment.commenter_name.root,
            comment_text=comment.comment_text,
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    feedback_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentInfo]


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments of a post, oldest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Comments of a deleted post are still listed.

        Raises:
            ValidationError: If the id is malformed
        """
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        comments = await self.comment_service.get_comments_for_feedback(feedback_id)
        return GetCommentsResponse(
            comments=[CommentInfo.from_domain(comment) for comment in comments]
        )
