"""Domain value objects for EduForum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from eduforum.domain.value.common import RootValueObject


class Role(str, Enum):
    """Account role. Values match the wire format (``userType``)."""

    STUDENT = "Student"
    ADMIN = "Admin"


class VoteType(str, Enum):
    """Direction of a vote on a feedback post."""

    UP = "upvote"
    DOWN = "downvote"


class Sentiment(str, Enum):
    """Sentiment label assigned to a piece of feedback."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    CONSTRUCTIVE = "Constructive"


class DisplayName(RootValueObject[str]):
    """Account name as shown on posts and comments.

    Snapshotted onto content at creation time.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Name must not be blank")
        if len(v) > 255:
            raise ValueError("Name must be at most 255 characters")
        return v
