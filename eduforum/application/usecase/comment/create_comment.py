"""Create comment use case."""

import logfire
from pydantic import BaseModel

from eduforum.application.usecase.base import BaseUseCase
from eduforum.domain.error import ContentRejectedError
from eduforum.domain.service import (
    AssistantService,
    CommentService,
    FeedbackService,
    SessionService,
)
from eduforum.domain.value import FeedbackId, parse_uuid

OFFENSIVE_COMMENT_MESSAGE = "Offensive Comment Warning! Please revise the comment."


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    feedback_id: str
    comment_text: str
    token: str | None  # Session cookie


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    success: bool
    id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for adding a moderated comment to a post."""

    def __init__(
        self,
        session_service: SessionService,
        feedback_service: FeedbackService,
        comment_service: CommentService,
        assistant_service: AssistantService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            session_service: Session domain service
            feedback_service: Feedback domain service
            comment_service: Comment domain service
            assistant_service: Assistant domain service (moderation)
        """
        self.session_service = session_service
        self.feedback_service = feedback_service
        self.comment_service = comment_service
        self.assistant_service = assistant_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Require any live session
        2. Validate the id and text, and check the post exists
        3. Run the text through moderation
        4. Persist the comment under the session's name

        Raises:
            NotAuthenticatedError: If there is no session
            ValidationError: If the id is malformed or the text is blank
            NotFoundError: If the post does not exist
            ContentRejectedError: If moderation flags the text
            AssistantError: If moderation itself fails
        """
        session = await self.session_service.require(request.token, "comment")
        feedback_id = FeedbackId(parse_uuid(request.feedback_id, "feedback"))
        self.comment_service.ensure_text(request.comment_text)

        with logfire.span(
            "create_comment.execute",
            feedback_id=str(feedback_id),
            commenter_name=session.name.root,
        ):
            await self.feedback_service.get_feedback(feedback_id)  # Raises NotFoundError

            if await self.assistant_service.moderate(request.comment_text):
                logfire.warn(
                    "Comment rejected by moderation",
                    feedback_id=str(feedback_id),
                    commenter_name=session.name.root,
                )
                raise ContentRejectedError(OFFENSIVE_COMMENT_MESSAGE)

            comment = await self.comment_service.create_comment(
                feedback_id, session.name, request.comment_text
            )
            return CreateCommentResponse(success=True, id=str(comment.id))
