"""Domain model entities for EduForum."""

from eduforum.domain.model.account import Account
from eduforum.domain.model.comment import Comment
from eduforum.domain.model.community import Community
from eduforum.domain.model.feedback import Feedback
from eduforum.domain.model.session import Session

__all__ = [
    "Account",
    "Community",
    "Feedback",
    "Comment",
    "Session",
]
