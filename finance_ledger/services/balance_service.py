"""Balance use cases."""
import logging
from typing import List

from finance_ledger.domain.entities import Balance, BalanceSummary
from finance_ledger.domain.errors import NotFoundError
from finance_ledger.domain.monetary import Asset
from finance_ledger.repositories.account_repository import AccountRepository
from finance_ledger.repositories.balance_repository import BalanceRepository
from finance_ledger.services.validation import require_id

logger = logging.getLogger(__name__)


class BalanceService:
    """Reads and refreshes cached account balances."""

    def __init__(self, balances: BalanceRepository, accounts: AccountRepository, base_asset: Asset):
        self.balances = balances
        self.accounts = accounts
        self.base_asset = base_asset

    def get(self, account_id: str) -> Balance:
        """Balance for one account, computing it first if it was never cached."""
        account_id = self._require_account(account_id)

        balance = self.balances.get_by_account_id(account_id)
        if balance is None:
            self.balances.refresh(account_id)
            balance = self.balances.get_by_account_id(account_id)
        if balance is None:
            raise NotFoundError("balance not found")
        return balance

    def list(self) -> List[Balance]:
        return self.balances.get_all()

    def refresh(self, account_id: str) -> None:
        account_id = self._require_account(account_id)
        self.balances.refresh(account_id)

    def refresh_all(self) -> int:
        """Refresh every account; failures are logged and skipped.

        Returns:
            Number of accounts refreshed successfully.
        """
        refreshed = 0
        for account in self.accounts.get_all():
            try:
                self.balances.refresh(account.id)
                refreshed += 1
            except Exception as e:
                logger.error(f"Failed to refresh balance for account {account.id}: {e}")
        return refreshed

    def summary(self) -> BalanceSummary:
        return self.balances.summary(self.base_asset)

    def _require_account(self, account_id: str) -> str:
        account_id = require_id(account_id, "account")
        if self.accounts.get_by_id(account_id) is None:
            raise NotFoundError("account not found")
        return account_id
