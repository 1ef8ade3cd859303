"""In-memory comment repository for testing."""

from eduforum.domain.model.comment import Comment
from eduforum.domain.repository.comment import CommentRepository
from eduforum.domain.value import FeedbackId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: list[Comment] = []

    async def find_by_feedback(self, feedback_id: FeedbackId) -> list[Comment]:
        """Find all comments of a feedback post, oldest first."""
        comments = [c for c in self._comments if c.feedback_id == feedback_id]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments.append(comment)
        return comment
