"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from eduforum.domain.model import Account, Comment, Community, Feedback
from eduforum.domain.value import (
    AccountId,
    CommentId,
    CommunityId,
    DisplayName,
    FeedbackId,
    Role,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        name=DisplayName(row["name"]),
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        created_at=row["created_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    return {
        "id": account.id,
        "name": account.name.root,
        "password_hash": account.password_hash,
        "role": account.role.value,
        "created_at": account.created_at,
    }


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        created_at=row["created_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return community.model_dump()


def row_to_feedback(row: Dict[str, Any]) -> Feedback:
    """Convert database row to Feedback domain model.

    Args:
        row: Database row as dict

    Returns:
        Feedback domain model
    """
    return Feedback(
        id=FeedbackId(_uuid(row["id"])),
        community_id=CommunityId(_uuid(row["community_id"])),
        student_name=DisplayName(row["student_name"]),
        standing=row["standing"],
        major=row["major"],
        title=row["title"],
        description=row["description"],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        upvoters=frozenset(row.get("upvoters") or ()),
        downvoters=frozenset(row.get("downvoters") or ()),
        starred=row["starred"],
        created_at=row["created_at"],
    )


def feedback_to_dict(feedback: Feedback) -> Dict[str, Any]:
    """Convert Feedback domain model to database dict.

    Voter sets are stored sorted so rows are stable across writes.
    """
    data = feedback.model_dump()
    data["student_name"] = feedback.student_name.root
    data["upvoters"] = sorted(feedback.upvoters)
    data["downvoters"] = sorted(feedback.downvoters)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        feedback_id=FeedbackId(_uuid(row["feedback_id"])),
        commenter_name=DisplayName(row["commenter_name"]),
        comment_text=row["comment_text"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["commenter_name"] = comment.commenter_name.root
    return data
