"""In-memory account repository for testing."""

from typing import Optional

from eduforum.domain.error import BusinessRuleViolationError
from eduforum.domain.model.account import Account
from eduforum.domain.repository.account import AccountRepository
from eduforum.domain.value import Role


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[tuple[str, Role], Account] = {}

    async def find_by_name_and_role(self, name: str, role: Role) -> Optional[Account]:
        """Find an account by its (name, role) pair."""
        return self._accounts.get((name, role))

    async def save(self, account: Account) -> Account:
        """Create an account, enforcing (name, role) uniqueness."""
        key = (account.name.root, account.role)
        if key in self._accounts:
            raise BusinessRuleViolationError(f"{account.role.value} already exists")
        self._accounts[key] = account
        return account
