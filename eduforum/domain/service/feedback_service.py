"""Feedback domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from eduforum.domain.error import NotFoundError, ValidationError
from eduforum.domain.model.feedback import Feedback
from eduforum.domain.repository import FeedbackRepository
from eduforum.domain.value import CommunityId, DisplayName, FeedbackId

from .base import Service


class FeedbackService(Service):
    """Domain service for feedback post operations."""

    def __init__(self, feedback_repository: FeedbackRepository) -> None:
        """Initialize feedback service.

        Args:
            feedback_repository: Feedback repository
        """
        self.feedback_repository = feedback_repository

    @staticmethod
    def ensure_complete(*fields: str) -> None:
        """Reject a post with any blank field.

        Raises:
            ValidationError: If any field is blank after trimming
        """
        if any(not value.strip() for value in fields):
            raise ValidationError("All fields required")

    async def create_feedback(
        self,
        community_id: CommunityId,
        student_name: str,
        standing: str,
        major: str,
        title: str,
        description: str,
    ) -> Feedback:
        """Persist a new feedback post with zero votes and no star.

        Args:
            community_id: Owning community
            student_name: Author name snapshot
            standing: Author's academic standing
            major: Author's major
            title: Post title
            description: Post body

        Returns:
            Created post

        Raises:
            ValidationError: If any field is blank
        """
        with logfire.span(
            "feedback_service.create_feedback",
            community_id=str(community_id),
            title=title,
        ):
            self.ensure_complete(student_name, standing, major, title, description)

            feedback = Feedback(
                id=FeedbackId(uuid4()),
                community_id=community_id,
                student_name=DisplayName(student_name),
                standing=standing,
                major=major,
                title=title,
                description=description,
                created_at=datetime.now(timezone.utc),
            )
            saved = await self.feedback_repository.save(feedback)
            logfire.info(
                "Feedback created",
                feedback_id=str(saved.id),
                community_id=str(community_id),
            )
            return saved

    async def get_feedback(self, feedback_id: FeedbackId) -> Feedback:
        """Get a feedback post by ID.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("feedback_service.get_feedback", feedback_id=str(feedback_id)):
            feedback = await self.feedback_repository.find_by_id(feedback_id)
            if not feedback:
                logfire.warn("Feedback not found", feedback_id=str(feedback_id))
                raise NotFoundError("Feedback", str(feedback_id))
            return feedback

    async def list_feedback(self, community_id: CommunityId) -> list[Feedback]:
        """List posts of a community, newest first."""
        with logfire.span(
            "feedback_service.list_feedback", community_id=str(community_id)
        ):
            posts = await self.feedback_repository.find_by_community(community_id)
            logfire.info(
                "Feedback listed", community_id=str(community_id), count=len(posts)
            )
            return posts

    async def delete_feedback(self, feedback_id: FeedbackId) -> None:
        """Delete a post. Its comments are left in place.

        Raises:
            NotFoundError: If no post was deleted
        """
        with logfire.span(
            "feedback_service.delete_feedback", feedback_id=str(feedback_id)
        ):
            if not await self.feedback_repository.delete(feedback_id):
                logfire.warn("Feedback not found for delete", feedback_id=str(feedback_id))
                raise NotFoundError("Feedback", str(feedback_id))
            logfire.info("Feedback deleted", feedback_id=str(feedback_id))

    async def set_starred(self, feedback_id: FeedbackId, starred: bool) -> None:
        """Star or unstar a post. Idempotent.

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span(
            "feedback_service.set_starred",
            feedback_id=str(feedback_id),
            starred=starred,
        ):
            if not await self.feedback_repository.set_starred(feedback_id, starred):
                logfire.warn("Feedback not found for star", feedback_id=str(feedback_id))
                raise NotFoundError("Feedback", str(feedback_id))
            logfire.info(
                "Feedback star updated", feedback_id=str(feedback_id), starred=starred
            )
