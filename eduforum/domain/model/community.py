"""Community entity."""

from datetime import datetime, timezone

from pydantic import Field

from eduforum.domain.model.common import DomainModel
from eduforum.domain.value import CommunityId


class Community(DomainModel):
    """Admin-curated topic area that contains feedback posts."""

    id: CommunityId
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=5000)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
