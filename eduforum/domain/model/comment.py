"""Comment entity.

Comments are flat replies on a feedback post, ordered by creation time.
"""

from datetime import datetime, timezone

from pydantic import Field

from eduforum.domain.model.common import DomainModel
from eduforum.domain.value import CommentId, DisplayName, FeedbackId


class Comment(DomainModel):
    """Comment entity.

    feedback_id is a plain reference: deleting the post leaves its comments
    in place.
    """

    id: CommentId
    feedback_id: FeedbackId
    commenter_name: DisplayName
    comment_text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
