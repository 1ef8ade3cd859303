"""PostgreSQL implementation of Feedback repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Text, delete, desc, func, insert, select, update
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.ext.asyncio import AsyncSession

from eduforum.domain.model import Feedback
from eduforum.domain.repository import FeedbackRepository
from eduforum.domain.value import CommunityId, FeedbackId, VoteType
from eduforum.persistence.mappers import feedback_to_dict, row_to_feedback
from eduforum.persistence.tables import feedbacks_table


class PostgresFeedbackRepository(FeedbackRepository):
    """PostgreSQL implementation of FeedbackRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, feedback_id: FeedbackId) -> Optional[Feedback]:
        """Find a feedback post by ID."""
        with logfire.span("feedback_repository.find_by_id", feedback_id=str(feedback_id)):
            stmt = select(feedbacks_table).where(feedbacks_table.c.id == feedback_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_feedback(row._asdict()) if row else None

    async def find_by_community(self, community_id: CommunityId) -> List[Feedback]:
        """Find all posts of a community, newest first."""
        with logfire.span(
            "feedback_repository.find_by_community", community_id=str(community_id)
        ):
            stmt = (
                select(feedbacks_table)
                .where(feedbacks_table.c.community_id == community_id)
                .order_by(desc(feedbacks_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_feedback(row._asdict()) for row in result.fetchall()]

    async def save(self, feedback: Feedback) -> Feedback:
        """Save a feedback post (create)."""
        stmt = insert(feedbacks_table).values(**feedback_to_dict(feedback))
        await self.session.execute(stmt)
        await self.session.flush()
        return feedback

    async def delete(self, feedback_id: FeedbackId) -> bool:
        """Delete a feedback post."""
        stmt = delete(feedbacks_table).where(feedbacks_table.c.id == feedback_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def record_vote(
        self, feedback_id: FeedbackId, voter_name: str, vote_type: VoteType
    ) -> bool:
        """Atomically record a vote with a single conditional UPDATE."""
        if vote_type == VoteType.UP:
            counter, voters = feedbacks_table.c.upvotes, feedbacks_table.c.upvoters
        else:
            counter, voters = feedbacks_table.c.downvotes, feedbacks_table.c.downvoters

        stmt = (
            update(feedbacks_table)
            .where(
                feedbacks_table.c.id == feedback_id,
                ~feedbacks_table.c.upvoters.contains([voter_name]),
                ~feedbacks_table.c.downvoters.contains([voter_name]),
            )
            .values(
                {
                    counter: counter + 1,
                    voters: func.array_append(voters, voter_name, type_=ARRAY(Text)),
                }
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def set_starred(self, feedback_id: FeedbackId, starred: bool) -> bool:
        """Set the star flag."""
        stmt = (
            update(feedbacks_table)
            .where(feedbacks_table.c.id == feedback_id)
            .values(starred=starred)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
