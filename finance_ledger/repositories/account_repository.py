"""Account persistence."""
from typing import List, Optional

from sqlalchemy import select

from finance_ledger.domain.entities import Account, AccountType, AccountWithBalance
from finance_ledger.domain.monetary import DEFAULT_ACCOUNT_ASSET, Money, find_asset
from finance_ledger.models.account import AccountRow
from finance_ledger.models.balance import BalanceRow
from finance_ledger.repositories.base import SqlRepository, as_utc, parse_uuid


def account_from_row(row: AccountRow) -> Account:
    """Map an accounts row to an Account entity."""
    return Account(
        id=str(row.id),
        name=row.name,
        type=AccountType(row.type),
        asset=find_asset(row.asset) or DEFAULT_ACCOUNT_ASSET,
        description=row.description or "",
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class AccountRepository(SqlRepository):
    """Repository for the accounts table."""

    def create(self, account: Account) -> Account:
        row = AccountRow(
            name=account.name,
            type=account.type.value,
            description=account.description,
            asset=account.asset.code,
        )
        self.db.add(row)
        self._commit("create account")
        self.db.refresh(row)
        return account_from_row(row)

    def get_by_id(self, account_id: str) -> Optional[Account]:
        """Get a single account by ID, or None if it does not exist."""
        row = self._get_row(account_id)
        return account_from_row(row) if row else None

    def _get_row(self, account_id: str) -> Optional[AccountRow]:
        uid = parse_uuid(account_id)
        if uid is None:
            return None
        return self.db.get(AccountRow, uid)

    def get_all(self) -> List[Account]:
        rows = self.db.scalars(select(AccountRow).order_by(AccountRow.name)).all()
        return [account_from_row(row) for row in rows]

    def get_all_with_balances(self) -> List[AccountWithBalance]:
        """All accounts with their cached balance; zero when no balance row exists."""
        query = (
            select(AccountRow, BalanceRow)
            .outerjoin(BalanceRow, BalanceRow.account_id == AccountRow.id)
            .order_by(AccountRow.name)
        )
        results = []
        for account_row, balance_row in self.db.execute(query):
            account = account_from_row(account_row)
            current = balance_row.current_balance if balance_row else 0
            pending = balance_row.pending_balance if balance_row else 0
            available = balance_row.available_balance if balance_row else 0
            results.append(AccountWithBalance(
                account=account,
                current=Money(account.asset, int(current)),
                pending=Money(account.asset, int(pending)),
                available=Money(account.asset, int(available)),
            ))
        return results

    def update(self, account: Account) -> Optional[Account]:
        row = self._get_row(account.id)
        if row is None:
            return None
        row.name = account.name
        row.type = account.type.value
        row.description = account.description
        row.asset = account.asset.code
        self._commit("update account")
        self.db.refresh(row)
        return account_from_row(row)

    def delete(self, account_id: str) -> bool:
        """Delete an account; transactions and balance go with it (ON DELETE CASCADE).

        Returns:
            True if account was deleted, False if not found.
        """
        row = self._get_row(account_id)
        if row is None:
            return False
        self.db.delete(row)
        self._commit("delete account")
        return True
