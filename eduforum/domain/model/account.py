"""Account entity."""

from datetime import datetime, timezone

from pydantic import Field

from eduforum.domain.model.common import DomainModel
from eduforum.domain.value import AccountId, DisplayName, Role


class Account(DomainModel):
    """Registered Student or Admin.

    Names are unique per role: a Student and an Admin may share a name.
    Accounts are never mutated or deleted once created.
    """

    id: AccountId
    name: DisplayName
    password_hash: str = Field(min_length=1)
    role: Role
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
