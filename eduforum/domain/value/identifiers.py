"""Strongly typed identifiers for EduForum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from eduforum.domain.error import ValidationError

AccountId = NewType("AccountId", UUID)
CommunityId = NewType("CommunityId", UUID)
FeedbackId = NewType("FeedbackId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str, resource: str) -> UUID:
    """Parse a client-supplied identifier.

    Args:
        value: Raw identifier from the request path
        resource: Human-readable resource name for the error message

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the value is not a well-formed identifier
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {resource} ID")
