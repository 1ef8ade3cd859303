"""Feedback post aggregate root.

Feedback posts are Student-authored threads inside a community. They carry
vote counters with the set of voter names behind each counter, and a star
flag curated by Admins.
"""

from datetime import datetime, timezone

from pydantic import Field, model_validator

from eduforum.domain.model.common import DomainModel
from eduforum.domain.value import CommunityId, DisplayName, FeedbackId


class Feedback(DomainModel):
    """Feedback post aggregate root.

    Business rules:
    - A voter name appears in at most one of upvoters/downvoters
    - Counters always equal the size of their voter set
    - student_name is a snapshot of the author's name at creation
    """

    id: FeedbackId
    community_id: CommunityId
    student_name: DisplayName
    standing: str = Field(min_length=1, max_length=100)
    major: str = Field(min_length=1, max_length=200)
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=10000)
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)
    upvoters: frozenset[str] = frozenset()
    downvoters: frozenset[str] = frozenset()
    starred: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def validate_votes(self) -> "Feedback":
        """Validate that nobody holds both an upvote and a downvote."""
        if self.upvoters & self.downvoters:
            raise ValueError("A voter cannot both upvote and downvote a post")
        return self

    def has_voted(self, voter_name: str) -> bool:
        """Check whether a name already appears in either voter set."""
        return voter_name in self.upvoters or voter_name in self.downvoters
