"""Domain value objects for EduForum."""

from eduforum.domain.value.identifiers import (
    AccountId,
    CommentId,
    CommunityId,
    FeedbackId,
    parse_uuid,
)
from eduforum.domain.value.types import DisplayName, Role, Sentiment, VoteType

__all__ = [
    # Identifiers
    "AccountId",
    "CommunityId",
    "FeedbackId",
    "CommentId",
    "parse_uuid",
    # Types
    "DisplayName",
    "Role",
    "Sentiment",
    "VoteType",
]
