"""Transaction persistence.

Amounts are stored as minor units without an asset column; the asset is
always the owning account's, so every read joins accounts.
"""
from datetime import date
from typing import List, Optional

from sqlalchemy import select

from finance_ledger.domain.entities import Transaction, TransactionStatus
from finance_ledger.domain.monetary import Money
from finance_ledger.models.account import AccountRow
from finance_ledger.models.category import CategoryRow
from finance_ledger.models.transaction import TransactionRow
from finance_ledger.repositories.account_repository import account_from_row
from finance_ledger.repositories.base import SqlRepository, as_utc, parse_uuid
from finance_ledger.repositories.category_repository import category_from_row


def transaction_from_rows(
    row: TransactionRow, account_row: AccountRow, category_row: CategoryRow
) -> Transaction:
    account = account_from_row(account_row)
    return Transaction(
        id=str(row.id),
        account_id=str(row.account_id),
        category_id=str(row.category_id),
        amount=Money(account.asset, int(row.amount)),
        description=row.description,
        date=row.date,
        status=TransactionStatus(row.status),
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
        account=account,
        category=category_from_row(category_row),
    )


class TransactionRepository(SqlRepository):
    """Repository for the transactions table."""

    def _detail_query(self):
        return (
            select(TransactionRow, AccountRow, CategoryRow)
            .join(AccountRow, TransactionRow.account_id == AccountRow.id)
            .join(CategoryRow, TransactionRow.category_id == CategoryRow.id)
        )

    def _ordered(self, query):
        return query.order_by(TransactionRow.date.desc(), TransactionRow.created_at.desc())

    def _fetch_all(self, query) -> List[Transaction]:
        return [transaction_from_rows(*result) for result in self.db.execute(query)]

    def create(self, transaction: Transaction) -> Transaction:
        row = TransactionRow(
            account_id=parse_uuid(transaction.account_id),
            category_id=parse_uuid(transaction.category_id),
            amount=transaction.amount.amount,
            description=transaction.description,
            date=transaction.date,
            status=transaction.status.value,
        )
        self.db.add(row)
        self._commit("create transaction")
        return self.get_by_id(str(row.id))

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        """Get a transaction with its account and category, or None."""
        uid = parse_uuid(transaction_id)
        if uid is None:
            return None
        result = self.db.execute(self._detail_query().where(TransactionRow.id == uid)).first()
        return transaction_from_rows(*result) if result else None

    def get_page(self, limit: int, offset: int) -> List[Transaction]:
        query = self._ordered(self._detail_query()).limit(limit).offset(offset)
        return self._fetch_all(query)

    def get_by_account(self, account_id: str) -> List[Transaction]:
        uid = parse_uuid(account_id)
        if uid is None:
            return []
        query = self._detail_query().where(TransactionRow.account_id == uid)
        return self._fetch_all(self._ordered(query))

    def get_by_date_range(self, start_date: date, end_date: date) -> List[Transaction]:
        """Transactions dated within [start_date, end_date], inclusive."""
        query = self._detail_query().where(
            TransactionRow.date >= start_date, TransactionRow.date <= end_date
        )
        return self._fetch_all(self._ordered(query))

    def update(self, transaction: Transaction) -> Optional[Transaction]:
        uid = parse_uuid(transaction.id)
        row = self.db.get(TransactionRow, uid) if uid else None
        if row is None:
            return None
        row.account_id = parse_uuid(transaction.account_id)
        row.category_id = parse_uuid(transaction.category_id)
        row.amount = transaction.amount.amount
        row.description = transaction.description
        row.date = transaction.date
        row.status = transaction.status.value
        self._commit("update transaction")
        return self.get_by_id(str(row.id))

    def delete(self, transaction_id: str) -> bool:
        uid = parse_uuid(transaction_id)
        row = self.db.get(TransactionRow, uid) if uid else None
        if row is None:
            return False
        self.db.delete(row)
        self._commit("delete transaction")
        return True
