"""In-memory feedback repository for testing."""

from typing import Optional

from eduforum.domain.model.feedback import Feedback
from eduforum.domain.repository.feedback import FeedbackRepository
from eduforum.domain.value import CommunityId, FeedbackId, VoteType


class InMemoryFeedbackRepository(FeedbackRepository):
    """In-memory implementation of FeedbackRepository for testing."""

    def __init__(self) -> None:
        self._feedbacks: dict[FeedbackId, Feedback] = {}

    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback post by ID."""
        return self._feedbacks.get(feedback_id)

    async def find_by_community(self, community_id: CommunityId) -> list[Feedback]:
        """Find all posts of a community, newest first."""
        # Reversed insertion order breaks timestamp ties newest first
        posts = [
            f for f in reversed(self._feedbacks.values()) if f.community_id == community_id
        ]
        posts.sort(key=lambda f: f.created_at, reverse=True)
        return posts

    async def save(self, feedback: Feedback) -> Feedback:
        """Save or update a feedback post."""
        self._feedbacks[feedback.id] = feedback
        return feedback

    async def delete(self, feedback_id: FeedbackId) -> bool:
        """Delete a feedback post."""
        return self._feedbacks.pop(feedback_id, None) is not None

    async def record_vote(
        self, feedback_id: FeedbackId, voter_name: str, vote_type: VoteType
    ) -> bool:
        """Record a vote; check and update run without yielding to the loop."""
        feedback = self._feedbacks.get(feedback_id)
        if feedback is None or feedback.has_voted(voter_name):
            return False

        # Create updated post (since posts are immutable)
        if vote_type == VoteType.UP:
            update = {
                "upvotes": feedback.upvotes + 1,
                "upvoters": feedback.upvoters | {voter_name},
            }
        else:
            update = {
                "downvotes": feedback.downvotes + 1,
                "downvoters": feedback.downvoters | {voter_name},
            }
        self._feedbacks[feedback_id] = feedback.model_copy(update=update)
        return True

    async def set_starred(self, feedback_id: FeedbackId, starred: bool) -> bool:
        """Set the star flag."""
        feedback = self._feedbacks.get(feedback_id)
        if feedback is None:
            return False
        self._feedbacks[feedback_id] = feedback.model_copy(update={"starred": starred})
        return True
