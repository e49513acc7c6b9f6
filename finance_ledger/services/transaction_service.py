"""Service layer for transaction business logic."""
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from finance_ledger.domain.entities import (
    Account,
    Category,
    CategoryType,
    Transaction,
    TransactionStatus,
)
from finance_ledger.domain.errors import NotFoundError, ValidationError
from finance_ledger.domain.monetary import Money
from finance_ledger.repositories.account_repository import AccountRepository
from finance_ledger.repositories.balance_repository import BalanceRepository
from finance_ledger.repositories.category_repository import CategoryRepository
from finance_ledger.repositories.transaction_repository import TransactionRepository
from finance_ledger.services.validation import parse_enum, require_id, require_text

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def convert_to_account_asset(amount: Money, account: Account) -> Money:
    """Relabel ``amount`` with the account's asset.

    The minor units are kept as they are; there is no exchange-rate lookup.
    """
    if amount.asset == account.asset:
        return amount
    return amount.with_asset(account.asset)


def adjust_sign_for_category(amount: Money, category: Category) -> Money:
    """Expenses are stored negative, income positive."""
    if category.type == CategoryType.EXPENSE and amount.sign > 0:
        return amount.negate()
    if category.type == CategoryType.INCOME and amount.sign < 0:
        return amount.negate()
    return amount


class TransactionService:
    """Creates, updates and deletes transactions and keeps balances in step."""

    def __init__(
        self,
        transactions: TransactionRepository,
        accounts: AccountRepository,
        categories: CategoryRepository,
        balances: BalanceRepository,
    ):
        self.transactions = transactions
        self.accounts = accounts
        self.categories = categories
        self.balances = balances

    def create(
        self,
        account_id: str,
        category_id: str,
        amount: Money,
        description: str,
        transaction_date: Optional[date] = None,
        status: Optional[str] = None,
    ) -> Transaction:
        """Create a transaction and refresh the account balance.

        Args:
            account_id: Owning account.
            category_id: Income or expense category.
            amount: Non-zero amount; relabeled to the account's asset if needed.
            description: Required description.
            transaction_date: Defaults to today (UTC).
            status: pending, cleared or cancelled; defaults to cleared.

        Raises:
            ValidationError: If a required field is empty or the amount is zero.
            InvalidParameterError: If the status is unknown.
            NotFoundError: If the account or category does not exist.
        """
        parsed_status = self._validate(account_id, category_id, amount, description, status)
        account, category, amount = self._resolve(account_id, category_id, amount)

        transaction = Transaction(
            id=None,
            account_id=account.id,
            category_id=category.id,
            amount=amount,
            description=description.strip(),
            date=transaction_date or today_utc(),
            status=parsed_status or TransactionStatus.CLEARED,
        )
        created = self.transactions.create(transaction)
        logger.info(f"Created transaction {created.id} on account {account.id}: {created.amount}")

        self._refresh_balance(account.id)
        return created

    def get(self, transaction_id: str) -> Transaction:
        """Get a transaction with its account and category."""
        transaction_id = require_id(transaction_id, "transaction")
        transaction = self.transactions.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("transaction not found")
        return transaction

    def list(self, limit: int = DEFAULT_PAGE_SIZE, offset: int = 0) -> List[Transaction]:
        """Most recent transactions first."""
        if limit is None or limit <= 0:
            limit = DEFAULT_PAGE_SIZE
        if offset is None or offset < 0:
            offset = 0
        return self.transactions.get_page(limit, offset)

    def list_by_account(self, account_id: str) -> List[Transaction]:
        account_id = require_id(account_id, "account")
        return self.transactions.get_by_account(account_id)

    def list_by_date_range(self, start_date: Optional[date], end_date: Optional[date]) -> List[Transaction]:
        if start_date is None or end_date is None:
            raise ValidationError("start date and end date cannot be empty")
        if start_date > end_date:
            raise ValidationError("start date cannot be after end date")
        return self.transactions.get_by_date_range(start_date, end_date)

    def update(
        self,
        transaction_id: str,
        account_id: str,
        category_id: str,
        amount: Money,
        description: str,
        transaction_date: Optional[date] = None,
        status: Optional[str] = None,
    ) -> Transaction:
        """Update a transaction and refresh the balances it touches.

        An unset date or status keeps the stored value. When the transaction
        moves to another account, both accounts are refreshed.
        """
        parsed_status = self._validate(account_id, category_id, amount, description, status)
        transaction_id = require_id(transaction_id, "transaction")

        existing = self.transactions.get_by_id(transaction_id)
        if existing is None:
            raise NotFoundError("transaction not found")

        account, category, amount = self._resolve(account_id, category_id, amount)

        transaction = Transaction(
            id=transaction_id,
            account_id=account.id,
            category_id=category.id,
            amount=amount,
            description=description.strip(),
            date=transaction_date or existing.date,
            status=parsed_status or existing.status,
        )
        updated = self.transactions.update(transaction)
        if updated is None:
            raise NotFoundError("transaction not found")

        self._refresh_balance(account.id)
        if existing.account_id != account.id:
            self._refresh_balance(existing.account_id)
        return updated

    def delete(self, transaction_id: str) -> None:
        transaction_id = require_id(transaction_id, "transaction")
        transaction = self.transactions.get_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("transaction not found")

        self.transactions.delete(transaction_id)
        logger.info(f"Deleted transaction {transaction_id} from account {transaction.account_id}")

        self._refresh_balance(transaction.account_id)

    def _validate(self, account_id, category_id, amount, description, status) -> Optional[TransactionStatus]:
        if not account_id or not str(account_id).strip():
            raise ValidationError("account ID cannot be empty")
        if not category_id or not str(category_id).strip():
            raise ValidationError("category ID cannot be empty")
        if amount is None or amount.is_zero():
            raise ValidationError("transaction amount cannot be zero")
        require_text(description, "transaction description cannot be empty")
        return parse_enum(TransactionStatus, status, "status", required=False)

    def _resolve(self, account_id: str, category_id: str, amount: Money):
        """Load account and category, then relabel and sign-correct the amount."""
        account = self.accounts.get_by_id(str(account_id).strip())
        if account is None:
            raise NotFoundError("account not found")

        amount = convert_to_account_asset(amount, account)

        category = self.categories.get_by_id(str(category_id).strip())
        if category is None:
            raise NotFoundError("category not found")

        return account, category, adjust_sign_for_category(amount, category)

    def _refresh_balance(self, account_id: str) -> None:
        # The write already succeeded; a stale balance heals on the next refresh
        try:
            self.balances.refresh(account_id)
        except Exception as e:
            logger.error(f"Failed to refresh balance for account {account_id}: {e}")
