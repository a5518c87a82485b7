"""Repositories for accounts and their tracker assignments."""

from sqlmodel import select

from src.wtt.models import Account, AccountAssignment, AccountRole
from src.wtt.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for Account entity."""

    model = Account

    async def get_by_name(self, name: str) -> Account | None:
        """Get the first active account with exactly this name."""
        accounts = await self.find(Account.name == name, order_by=Account.created_at)
        return accounts[0] if accounts else None


class AccountAssignmentRepository(BaseRepository[AccountAssignment]):
    """Repository for accounts assigned to activity trackers."""

    model = AccountAssignment

    async def get_customer(self, tracker_id: str) -> Account | None:
        """Get the customer organization assigned to a tracker."""
        query = (
            select(Account)
            .join(
                AccountAssignment,
                AccountAssignment.account_id == Account.id,  # type: ignore[arg-type]
            )
            .where(
                AccountAssignment.segment == self.segment,
                AccountAssignment.tracker_id == tracker_id,
                AccountAssignment.account_role == AccountRole.CUSTOMER.value,
                AccountAssignment.disabled == False,  # noqa: E712
            )
            .order_by(AccountAssignment.created_at, AccountAssignment.id)
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()
