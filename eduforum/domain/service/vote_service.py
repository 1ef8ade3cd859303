"""Vote domain service."""

import logfire

from eduforum.domain.error import BusinessRuleViolationError
from eduforum.domain.repository import FeedbackRepository
from eduforum.domain.value import FeedbackId, VoteType

from .base import Service
from .feedback_service import FeedbackService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self, feedback_repository: FeedbackRepository, feedback_service: FeedbackService
    ) -> None:
        """Initialize vote service.

        Args:
            feedback_repository: Feedback repository
            feedback_service: Feedback domain service
        """
        self.feedback_repository = feedback_repository
        self.feedback_service = feedback_service

    async def vote(
        self, feedback_id: FeedbackId, voter_name: str, vote_type: VoteType
    ) -> None:
        """Cast a single upvote or downvote.

        A name may vote once per post; a second attempt in either direction
        is rejected rather than switching the vote.

        Args:
            feedback_id: Post ID
            voter_name: Name of the voting identity
            vote_type: Upvote or downvote

        Raises:
            NotFoundError: If the post does not exist
            BusinessRuleViolationError: If the name has already voted
        """
        with logfire.span(
            "vote_service.vote",
            feedback_id=str(feedback_id),
            voter_name=voter_name,
            vote_type=vote_type.value,
        ):
            feedback = await self.feedback_service.get_feedback(feedback_id)
            if feedback.has_voted(voter_name):
                logfire.warn(
                    "Duplicate vote attempt",
                    feedback_id=str(feedback_id),
                    voter_name=voter_name,
                )
                raise BusinessRuleViolationError("Already voted")

            # Conditional write: loses cleanly to a concurrent vote by the same name
            recorded = await self.feedback_repository.record_vote(
                feedback_id, voter_name, vote_type
            )
            if not recorded:
                logfire.warn(
                    "Concurrent duplicate vote rejected",
                    feedback_id=str(feedback_id),
                    voter_name=voter_name,
                )
                raise BusinessRuleViolationError("Already voted")

            logfire.info(
                "Vote recorded",
                feedback_id=str(feedback_id),
                vote_type=vote_type.value,
            )
