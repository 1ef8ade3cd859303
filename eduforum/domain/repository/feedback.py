"""Feedback repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from eduforum.domain.model.feedback import Feedback
from eduforum.domain.value import CommunityId, FeedbackId, VoteType


class FeedbackRepository(ABC):
    """Repository for Feedback aggregate.

    Defines the contract for feedback post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback post by ID.

        Args:
            feedback_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_community(self, community_id: CommunityId) -> List[Feedback]:
        """Find all posts of a community, newest first.

        Args:
            community_id: The community ID

        Returns:
            List of posts
        """
        pass

    @abstractmethod
    async def save(self, feedback: Feedback) -> Feedback:
        """Save a feedback post.

        Args:
            feedback: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, feedback_id: FeedbackId) -> bool:
        """Delete a feedback post (hard delete, comments are left in place).

        Args:
            feedback_id: The post ID to delete

        Returns:
            True if a row was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def record_vote(
        self, feedback_id: FeedbackId, voter_name: str, vote_type: VoteType
    ) -> bool:
        """Atomically record a vote.

        The membership test on both voter sets, the counter increment and the
        set insertion happen as a single operation.

        Args:
            feedback_id: The post ID
            voter_name: Name of the voting identity
            vote_type: Upvote or downvote

        Returns:
            True if the vote was recorded, False if the post does not exist
            or the name already appears in either voter set
        """
        pass

    @abstractmethod
    async def set_starred(self, feedback_id: FeedbackId, starred: bool) -> bool:
        """Set the star flag.

        Args:
            feedback_id: The post ID
            starred: New flag value

        Returns:
            True if the post exists, False otherwise
        """
        pass
