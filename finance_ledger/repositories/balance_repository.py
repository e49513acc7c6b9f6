"""Balance persistence and recomputation."""
from typing import List, Optional

from sqlalchemy import case, func, select
from sqlalchemy.exc import SQLAlchemyError

from finance_ledger.domain.entities import (
    ASSET_ACCOUNT_TYPES,
    AccountType,
    Balance,
    BalanceSummary,
)
from finance_ledger.domain.monetary import Asset, Money
from finance_ledger.models.account import AccountRow
from finance_ledger.models.balance import BalanceRow
from finance_ledger.models.base import utcnow
from finance_ledger.models.transaction import TransactionRow
from finance_ledger.repositories.account_repository import account_from_row
from finance_ledger.repositories.base import SqlRepository, as_utc, parse_uuid


def balance_from_rows(row: BalanceRow, account_row: AccountRow) -> Balance:
    account = account_from_row(account_row)
    return Balance(
        account_id=str(row.account_id),
        current=Money(account.asset, int(row.current_balance)),
        pending=Money(account.asset, int(row.pending_balance)),
        available=Money(account.asset, int(row.available_balance)),
        last_calculated=as_utc(row.last_calculated),
        account=account,
    )


def _sum_where(condition):
    return func.coalesce(func.sum(case((condition, TransactionRow.amount), else_=0)), 0)


class BalanceRepository(SqlRepository):
    """Repository for the balances table."""

    def _query(self):
        return select(BalanceRow, AccountRow).join(
            AccountRow, BalanceRow.account_id == AccountRow.id
        )

    def get_by_account_id(self, account_id: str) -> Optional[Balance]:
        uid = parse_uuid(account_id)
        if uid is None:
            return None
        result = self.db.execute(self._query().where(BalanceRow.account_id == uid)).first()
        return balance_from_rows(*result) if result else None

    def get_all(self) -> List[Balance]:
        query = self._query().order_by(BalanceRow.account_id)
        return [balance_from_rows(*result) for result in self.db.execute(query)]

    def refresh(self, account_id: str) -> None:
        """Recompute an account's balance from its transactions and upsert it.

        current = cleared, pending = pending, available = cleared + pending.
        Cancelled transactions are ignored.
        """
        uid = parse_uuid(account_id)
        if uid is None:
            raise ValueError(f"invalid account id: {account_id}")

        try:
            totals = self.db.execute(
                select(
                    _sum_where(TransactionRow.status == "cleared"),
                    _sum_where(TransactionRow.status == "pending"),
                    _sum_where(TransactionRow.status.in_(("cleared", "pending"))),
                ).where(TransactionRow.account_id == uid)
            ).one()
            row = self.db.get(BalanceRow, uid)
        except SQLAlchemyError:
            self.db.rollback()
            raise
        current, pending, available = (int(value) for value in totals)

        if row is None:
            row = BalanceRow(account_id=uid)
            self.db.add(row)
        row.current_balance = current
        row.pending_balance = pending
        row.available_balance = available
        row.last_calculated = utcnow()
        self._commit("refresh account balance")

    def summary(self, base_asset: Asset) -> BalanceSummary:
        """Totals across all cached balances, bucketed by account type.

        Minor units are summed as-is and tagged with ``base_asset``; no
        exchange rates are applied.
        """
        asset_types = [account_type.value for account_type in ASSET_ACCOUNT_TYPES]
        total_assets, total_liabilities = self.db.execute(
            select(
                func.coalesce(func.sum(case(
                    (AccountRow.type.in_(asset_types), BalanceRow.current_balance),
                    else_=0,
                )), 0),
                func.coalesce(func.sum(case(
                    (AccountRow.type == AccountType.CREDIT.value, func.abs(BalanceRow.current_balance)),
                    else_=0,
                )), 0),
            ).select_from(BalanceRow).join(AccountRow, BalanceRow.account_id == AccountRow.id)
        ).one()

        assets = Money(base_asset, int(total_assets))
        liabilities = Money(base_asset, int(total_liabilities))
        return BalanceSummary(
            total_assets=assets,
            total_liabilities=liabilities,
            net_worth=assets - liabilities,
            last_calculated=utcnow(),
        )
