"""PostgreSQL repository implementations."""

from eduforum.persistence.repository.account import PostgresAccountRepository
from eduforum.persistence.repository.comment import PostgresCommentRepository
from eduforum.persistence.repository.community import PostgresCommunityRepository
from eduforum.persistence.repository.feedback import PostgresFeedbackRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresCommunityRepository",
    "PostgresFeedbackRepository",
    "PostgresCommentRepository",
]
