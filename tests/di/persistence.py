"""Mock persistence providers for testing."""

from dishka import Scope, provide

from eduforum.domain.repository import (
    AccountRepository,
    CommentRepository,
    CommunityRepository,
    FeedbackRepository,
)
from eduforum.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryCommentRepository,
    InMemoryCommunityRepository,
    InMemoryFeedbackRepository,
)
from eduforum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data survives across the requests of one test; each
    test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide(scope=Scope.APP)
    def get_community_repository(self) -> CommunityRepository:
        """Provide in-memory community repository."""
        return InMemoryCommunityRepository()

    @provide(scope=Scope.APP)
    def get_feedback_repository(self) -> FeedbackRepository:
        """Provide in-memory feedback repository."""
        return InMemoryFeedbackRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
