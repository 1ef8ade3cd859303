"""Create feedback use case."""

import logfire
from pydantic import BaseModel

from eduforum.application.usecase.base import STUDENT_ONLY, BaseUseCase
from eduforum.domain.error import ContentRejectedError
from eduforum.domain.service import AssistantService, FeedbackService, SessionService
from eduforum.domain.value import CommunityId, parse_uuid

OFFENSIVE_POST_MESSAGE = "Offensive Post Warning! Please revise your feedback."


class CreateFeedbackRequest(BaseModel):
    """Create feedback request."""

    community_id: str
    standing: str
    major: str
    title: str
    description: str
    token: str | None  # Session cookie


class CreateFeedbackResponse(BaseModel):
    """Create feedback response."""

    success: bool
    id: str


class CreateFeedbackUseCase(BaseUseCase):
    """Use case for publishing a moderated feedback post."""

    def __init__(
        self,
        session_service: SessionService,
        feedback_service: FeedbackService,
        assistant_service: AssistantService,
    ) -> None:
        """Initialize create feedback use case.

        Args:
            session_service: Session domain service
            feedback_service: Feedback domain service
            assistant_service: Assistant domain service (moderation)
        """
        self.session_service = session_service
        self.feedback_service = feedback_service
        self.assistant_service = assistant_service

    async def execute(self, request: CreateFeedbackRequest) -> CreateFeedbackResponse:
        """Execute create feedback flow.

        Steps:
        1. Require a Student session
        2. Validate the community id and the fields
        3. Run the description through moderation
        4. Persist the post under the session's name

        The post is not created when moderation flags the text or fails.

        Raises:
            NotAuthenticatedError: If there is no session
            NotAuthorizedError: If the caller is not a Student
            ValidationError: If the id is malformed or a field is blank
            ContentRejectedError: If moderation flags the description
            AssistantError: If moderation itself fails
        """
        session = await self.session_service.require(
            request.token, "create feedback", STUDENT_ONLY
        )
        community_id = CommunityId(parse_uuid(request.community_id, "community"))
        student_name = session.name.root

        with logfire.span(
            "create_feedback.execute",
            community_id=str(community_id),
            student_name=student_name,
        ):
            self.feedback_service.ensure_complete(
                student_name,
                request.standing,
                request.major,
                request.title,
                request.description,
            )

            if await self.assistant_service.moderate(request.description):
                logfire.warn(
                    "Feedback rejected by moderation",
                    community_id=str(community_id),
                    student_name=student_name,
                )
                raise ContentRejectedError(OFFENSIVE_POST_MESSAGE)

            feedback = await self.feedback_service.create_feedback(
                community_id=community_id,
                student_name=student_name,
                standing=request.standing,
                major=request.major,
                title=request.title,
                description=request.description,
            )
            return CreateFeedbackResponse(success=True, id=str(feedback.id))
