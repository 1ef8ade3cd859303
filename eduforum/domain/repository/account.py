"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from eduforum.domain.model.account import Account
from eduforum.domain.value import Role


class AccountRepository(ABC):
    """Repository for Account entity.

    Defines the contract for account persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_name_and_role(self, name: str, role: Role) -> Optional[Account]:
        """Find an account by its (name, role) pair.

        Args:
            name: Account name
            role: Account role

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Create an account.

        Args:
            account: The account to save

        Returns:
            The saved account

        Raises:
            BusinessRuleViolationError: If (name, role) is already taken
        """
        pass
