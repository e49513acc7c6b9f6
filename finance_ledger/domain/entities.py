"""Ledger entities returned by the repositories and services."""
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

from finance_ledger.domain.monetary import Asset, Money


class AccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    INVESTMENT = "investment"
    CASH = "cash"


# Account types counted as assets in the balance summary; credit is a liability.
ASSET_ACCOUNT_TYPES = (
    AccountType.CHECKING,
    AccountType.SAVINGS,
    AccountType.INVESTMENT,
    AccountType.CASH,
)


class CategoryType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    CLEARED = "cleared"
    CANCELLED = "cancelled"


DEFAULT_CATEGORY_COLOR = "#6B7280"


@dataclass
class Account:
    id: Optional[str]
    name: str
    type: AccountType
    asset: Asset
    description: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Category:
    id: Optional[str]
    name: str
    type: CategoryType
    description: str = ""
    color: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Transaction:
    """A single ledger movement.

    ``status`` and ``date`` may be None on input; the service fills them in.
    ``account`` and ``category`` are only populated by the detail queries.
    """

    id: Optional[str]
    account_id: str
    category_id: str
    amount: Money
    description: str
    date: Optional[date] = None
    status: Optional[TransactionStatus] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    account: Optional[Account] = None
    category: Optional[Category] = None


@dataclass
class Balance:
    """Cached balance of one account."""

    account_id: str
    current: Money
    pending: Money
    available: Money
    last_calculated: datetime
    account: Optional[Account] = None


@dataclass
class BalanceSummary:
    total_assets: Money
    total_liabilities: Money
    net_worth: Money
    last_calculated: datetime


@dataclass
class AccountWithBalance:
    account: Account
    current: Money
    pending: Money
    available: Money
