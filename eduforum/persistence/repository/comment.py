"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from eduforum.domain.model import Comment
from eduforum.domain.repository import CommentRepository
from eduforum.domain.value import FeedbackId
from eduforum.persistence.mappers import comment_to_dict, row_to_comment
from eduforum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_feedback(self, feedback_id: FeedbackId) -> List[Comment]:
        """Find all comments of a feedback post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.feedback_id == feedback_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
