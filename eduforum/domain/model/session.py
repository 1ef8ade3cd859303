"""Session entity."""

from datetime import datetime, timedelta, timezone

from pydantic import Field

from eduforum.domain.model.common import DomainModel
from eduforum.domain.value import DisplayName, Role


class Session(DomainModel):
    """Server-held binding of a cookie token to an authenticated identity.

    Sessions live in process memory only and expire after a period of
    inactivity.
    """

    token: str = Field(min_length=1)
    name: DisplayName
    role: Role
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    last_seen_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_expired(self, timeout: timedelta, now: datetime) -> bool:
        """Check whether the inactivity window has elapsed."""
        return now - self.last_seen_at > timeout
