"""Base services container for dependency injection."""
from typing import Optional

from sqlalchemy.orm import Session

from finance_ledger.config import Settings, get_settings
from finance_ledger.domain.monetary import USD, find_asset
from finance_ledger.repositories.account_repository import AccountRepository
from finance_ledger.repositories.balance_repository import BalanceRepository
from finance_ledger.repositories.category_repository import CategoryRepository
from finance_ledger.repositories.transaction_repository import TransactionRepository
from finance_ledger.services.account_service import AccountService
from finance_ledger.services.balance_service import BalanceService
from finance_ledger.services.category_service import CategoryService
from finance_ledger.services.transaction_service import TransactionService


class Services:
    """Container for all application services bound to one database session.

    Args:
        db: SQLAlchemy session shared by every repository.
        settings: Optional settings; defaults to the process settings.
    """

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()

        account_repo = AccountRepository(db)
        category_repo = CategoryRepository(db)
        transaction_repo = TransactionRepository(db)
        balance_repo = BalanceRepository(db)

        self.accounts = AccountService(account_repo, balance_repo)
        self.categories = CategoryService(category_repo)
        self.transactions = TransactionService(
            transaction_repo, account_repo, category_repo, balance_repo
        )
        self.balances = BalanceService(
            balance_repo, account_repo, find_asset(self.settings.base_asset) or USD
        )
