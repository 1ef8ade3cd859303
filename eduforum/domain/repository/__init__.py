"""Repository interfaces for EduForum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from eduforum.domain.repository.account import AccountRepository
from eduforum.domain.repository.comment import CommentRepository
from eduforum.domain.repository.community import CommunityRepository
from eduforum.domain.repository.feedback import FeedbackRepository
from eduforum.domain.repository.session import SessionRepository

__all__ = [
    "AccountRepository",
    "CommunityRepository",
    "FeedbackRepository",
    "CommentRepository",
    "SessionRepository",
]
