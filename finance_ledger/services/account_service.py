"""Account use cases."""
import logging
from typing import List, Optional

from finance_ledger.domain.entities import Account, AccountType, AccountWithBalance
from finance_ledger.domain.errors import NotFoundError, ValidationError
from finance_ledger.domain.monetary import Asset, get_asset
from finance_ledger.repositories.account_repository import AccountRepository
from finance_ledger.repositories.balance_repository import BalanceRepository
from finance_ledger.services.validation import parse_enum, require_id, require_text

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, accounts: AccountRepository, balances: BalanceRepository):
        self.accounts = accounts
        self.balances = balances

    def create(
        self,
        name: str,
        account_type: str,
        asset: str,
        description: Optional[str] = "",
    ) -> Account:
        """Create a new account and initialize its balance.

        Args:
            name: Account name.
            account_type: One of checking, savings, credit, investment, cash.
            asset: Asset code such as "USD" or "BTC".
            description: Free-form description.

        Returns:
            The created Account with id and timestamps populated.

        Raises:
            ValidationError: If the name or type is empty.
            InvalidParameterError: If the type or asset is not recognized.
        """
        account = self._build(None, name, account_type, asset, description)
        created = self.accounts.create(account)
        logger.info(f"Created account {created.id} ({created.name}, {created.asset.code})")

        # The balance is also computed on the first transaction, so a failure here is not fatal
        try:
            self.balances.refresh(created.id)
        except Exception as e:
            logger.error(f"Failed to initialize balance for account {created.id}: {e}")

        return created

    def get(self, account_id: str) -> Account:
        account_id = require_id(account_id, "account")
        account = self.accounts.get_by_id(account_id)
        if account is None:
            raise NotFoundError("account not found")
        return account

    def list(self) -> List[Account]:
        return self.accounts.get_all()

    def list_with_balances(self) -> List[AccountWithBalance]:
        return self.accounts.get_all_with_balances()

    def update(
        self,
        account_id: str,
        name: str,
        account_type: str,
        asset: str,
        description: Optional[str] = "",
    ) -> Account:
        """Replace an account's fields. Raises NotFoundError if it does not exist."""
        account = self._build(account_id, name, account_type, asset, description)
        account.id = require_id(account_id, "account")

        updated = self.accounts.update(account)
        if updated is None:
            raise NotFoundError("account not found")
        return updated

    def delete(self, account_id: str) -> None:
        """Delete an account. Its transactions and balance are removed by cascade."""
        account_id = require_id(account_id, "account")
        if not self.accounts.delete(account_id):
            raise NotFoundError("account not found")
        logger.info(f"Deleted account {account_id}")

    def _build(self, account_id, name, account_type, asset, description) -> Account:
        name = require_text(name, "account name cannot be empty")
        parsed_type = parse_enum(AccountType, account_type, "account type")
        if asset is None or not str(asset).strip():
            raise ValidationError("account asset cannot be empty")
        parsed_asset: Asset = get_asset(asset)
        return Account(
            id=account_id,
            name=name,
            type=parsed_type,
            asset=parsed_asset,
            description=(description or "").strip(),
        )
