"""PostgreSQL implementation of Account repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eduforum.domain.error import BusinessRuleViolationError
from eduforum.domain.model import Account
from eduforum.domain.repository import AccountRepository
from eduforum.domain.value import Role
from eduforum.persistence.mappers import account_to_dict, row_to_account
from eduforum.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name_and_role(self, name: str, role: Role) -> Optional[Account]:
        """Find an account by its (name, role) pair."""
        stmt = select(accounts_table).where(
            accounts_table.c.name == name,
            accounts_table.c.role == role.value,
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None

    async def save(self, account: Account) -> Account:
        """Create an account.

        The (name, role) unique constraint settles concurrent sign-ups. The
        insert is committed before returning, so callers may hand out a
        session for the account straight away.
        """
        stmt = insert(accounts_table).values(**account_to_dict(account))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            logfire.warn(
                "Account uniqueness violation",
                name=account.name.root,
                role=account.role.value,
            )
            raise BusinessRuleViolationError(f"{account.role.value} already exists")
        await self.session.commit()
        return account
