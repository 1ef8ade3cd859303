"""Application layer DI providers."""

from dishka import Scope, provide

from eduforum.application.usecase.assist import (
    ClassifySentimentUseCase,
    ModerateTextUseCase,
    SummarizeFeedbackUseCase,
)
from eduforum.application.usecase.auth import (
    GetCurrentIdentityUseCase,
    LogInUseCase,
    LogOutUseCase,
    SignUpUseCase,
)
from eduforum.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from eduforum.application.usecase.community import (
    CreateCommunityUseCase,
    DeleteCommunityUseCase,
    GetCommunityUseCase,
    ListCommunitiesUseCase,
)
from eduforum.application.usecase.feedback import (
    CreateFeedbackUseCase,
    DeleteFeedbackUseCase,
    GetFeedbackUseCase,
    ListFeedbackUseCase,
    StarFeedbackUseCase,
    VoteUseCase,
)
from eduforum.domain.service import (
    AccountService,
    AssistantService,
    CommentService,
    CommunityService,
    FeedbackService,
    SessionService,
    VoteService,
)
from eduforum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_sign_up_use_case(
        self, account_service: AccountService, session_service: SessionService
    ) -> SignUpUseCase:
        """Provide sign up use case."""
        return SignUpUseCase(
            account_service=account_service, session_service=session_service
        )

    @provide
    def get_log_in_use_case(
        self, account_service: AccountService, session_service: SessionService
    ) -> LogInUseCase:
        """Provide log in use case."""
        return LogInUseCase(
            account_service=account_service, session_service=session_service
        )

    @provide
    def get_log_out_use_case(self, session_service: SessionService) -> LogOutUseCase:
        """Provide log out use case."""
        return LogOutUseCase(session_service=session_service)

    @provide
    def get_current_identity_use_case(
        self, session_service: SessionService
    ) -> GetCurrentIdentityUseCase:
        """Provide get current identity use case."""
        return GetCurrentIdentityUseCase(session_service=session_service)

    # Community use cases
    @provide
    def get_create_community_use_case(
        self, session_service: SessionService, community_service: CommunityService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(
            session_service=session_service, community_service=community_service
        )

    @provide
    def get_list_communities_use_case(
        self, community_service: CommunityService
    ) -> ListCommunitiesUseCase:
        """Provide list communities use case."""
        return ListCommunitiesUseCase(community_service=community_service)

    @provide
    def get_get_community_use_case(
        self, community_service: CommunityService
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(community_service=community_service)

    @provide
    def get_delete_community_use_case(
        self, session_service: SessionService, community_service: CommunityService
    ) -> DeleteCommunityUseCase:
        """Provide delete community use case."""
        return DeleteCommunityUseCase(
            session_service=session_service, community_service=community_service
        )

    # Feedback use cases
    @provide
    def get_create_feedback_use_case(
        self,
        session_service: SessionService,
        feedback_service: FeedbackService,
        assistant_service: AssistantService,
    ) -> CreateFeedbackUseCase:
        """Provide create feedback use case."""
        return CreateFeedbackUseCase(
            session_service=session_service,
            feedback_service=feedback_service,
            assistant_service=assistant_service,
        )

    @provide
    def get_list_feedback_use_case(
        self, feedback_service: FeedbackService
    ) -> ListFeedbackUseCase:
        """Provide list feedback use case."""
        return ListFeedbackUseCase(feedback_service=feedback_service)

    @provide
    def get_get_feedback_use_case(
        self, feedback_service: FeedbackService
    ) -> GetFeedbackUseCase:
        """Provide get feedback use case."""
        return GetFeedbackUseCase(feedback_service=feedback_service)

    @provide
    def get_delete_feedback_use_case(
        self, session_service: SessionService, feedback_service: FeedbackService
    ) -> DeleteFeedbackUseCase:
        """Provide delete feedback use case."""
        return DeleteFeedbackUseCase(
            session_service=session_service, feedback_service=feedback_service
        )

    @provide
    def get_vote_use_case(
        self, session_service: SessionService, vote_service: VoteService
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(session_service=session_service, vote_service=vote_service)

    @provide
    def get_star_feedback_use_case(
        self, session_service: SessionService, feedback_service: FeedbackService
    ) -> StarFeedbackUseCase:
        """Provide star feedback use case."""
        return StarFeedbackUseCase(
            session_service=session_service, feedback_service=feedback_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        session_service: SessionService,
        feedback_service: FeedbackService,
        comment_service: CommentService,
        assistant_service: AssistantService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            session_service=session_service,
            feedback_service=feedback_service,
            comment_service=comment_service,
            assistant_service=assistant_service,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    # Assist use cases
    @provide
    def get_summarize_feedback_use_case(
        self,
        feedback_service: FeedbackService,
        comment_service: CommentService,
        assistant_service: AssistantService,
    ) -> SummarizeFeedbackUseCase:
        """Provide summarize feedback use case."""
        return SummarizeFeedbackUseCase(
            feedback_service=feedback_service,
            comment_service=comment_service,
            assistant_service=assistant_service,
        )

    @provide
    def get_classify_sentiment_use_case(
        self, assistant_service: AssistantService
    ) -> ClassifySentimentUseCase:
        """Provide classify sentiment use case."""
        return ClassifySentimentUseCase(assistant_service=assistant_service)

    @provide
    def get_moderate_text_use_case(
        self, assistant_service: AssistantService
    ) -> ModerateTextUseCase:
        """Provide moderate text use case."""
        return ModerateTextUseCase(assistant_service=assistant_service)
