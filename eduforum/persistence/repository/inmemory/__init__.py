"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .comment import InMemoryCommentRepository
from .community import InMemoryCommunityRepository
from .feedback import InMemoryFeedbackRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryFeedbackRepository",
]
