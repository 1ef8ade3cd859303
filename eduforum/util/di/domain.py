"""Domain layer DI providers."""

from dishka import Scope, provide

from eduforum.config import SessionSettings
from eduforum.domain.repository import (
    AccountRepository,
    CommentRepository,
    CommunityRepository,
    FeedbackRepository,
    SessionRepository,
)
from eduforum.domain.service import (
    AccountService,
    AssistantClient,
    AssistantService,
    CommentService,
    CommunityService,
    FeedbackService,
    SessionService,
    VoteService,
)
from eduforum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_account_service(
        self, account_repository: AccountRepository, session_settings: SessionSettings
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository, session_settings=session_settings
        )

    @provide
    def get_session_service(
        self, session_repository: SessionRepository, session_settings: SessionSettings
    ) -> SessionService:
        """Provide session domain service."""
        return SessionService(
            session_repository=session_repository, session_settings=session_settings
        )

    @provide
    def get_community_service(
        self, community_repository: CommunityRepository
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(community_repository=community_repository)

    @provide
    def get_feedback_service(
        self, feedback_repository: FeedbackRepository
    ) -> FeedbackService:
        """Provide feedback domain service."""
        return FeedbackService(feedback_repository=feedback_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self, feedback_repository: FeedbackRepository, feedback_service: FeedbackService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            feedback_repository=feedback_repository, feedback_service=feedback_service
        )

    @provide
    def get_assistant_service(self, assistant_client: AssistantClient) -> AssistantService:
        """Provide assistant domain service."""
        return AssistantService(assistant_client=assistant_client)
