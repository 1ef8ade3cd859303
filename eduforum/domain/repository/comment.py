"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from eduforum.domain.model.comment import Comment
from eduforum.domain.value import FeedbackId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_feedback(self, feedback_id: FeedbackId) -> List[Comment]:
        """Find all comments of a feedback post, oldest first.

        Args:
            feedback_id: The post ID

        Returns:
            List of comments in chronological order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
