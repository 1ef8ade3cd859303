"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from eduforum.domain.error import ValidationError
from eduforum.domain.model.comment import Comment
from eduforum.domain.repository import CommentRepository
from eduforum.domain.value import CommentId, DisplayName, FeedbackId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    @staticmethod
    def ensure_text(comment_text: str) -> None:
        """Reject blank comment text.

        Raises:
            ValidationError: If the text is blank after trimming
        """
        if not comment_text.strip():
            raise ValidationError("Comment text required")

    async def create_comment(
        self, feedback_id: FeedbackId, commenter_name: DisplayName, comment_text: str
    ) -> Comment:
        """Create a comment on a feedback post.

        Args:
            feedback_id: Post ID
            commenter_name: Name snapshot of the commenting identity
            comment_text: Comment text, stored as given

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank after trimming
        """
        with logfire.span(
            "comment_service.create_comment",
            feedback_id=str(feedback_id),
            commenter_name=commenter_name.root,
        ):
            self.ensure_text(comment_text)

            comment = Comment(
                id=CommentId(uuid4()),
                feedback_id=feedback_id,
                commenter_name=commenter_name,
                comment_text=comment_text,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                feedback_id=str(feedback_id),
                commenter_name=commenter_name.root,
            )
            return saved

    async def get_comments_for_feedback(self, feedback_id: FeedbackId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        The same order feeds both the comment listing and thread summaries.
        """
        with logfire.span(
            "comment_service.get_comments_for_feedback", feedback_id=str(feedback_id)
        ):
            comments = await self.comment_repository.find_by_feedback(feedback_id)
            logfire.info(
                "Comments retrieved for feedback",
                feedback_id=str(feedback_id),
                count=len(comments),
            )
            return comments
