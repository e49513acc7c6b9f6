"""Pydantic schemas for account requests and responses."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from finance_ledger.domain.entities import Account, AccountWithBalance
from finance_ledger.schemas.common import MoneyResponse


class AccountRequest(BaseModel):
    """Request schema for creating or updating an account."""
    name: str = Field("", description="Account name")
    type: str = Field("", description="checking, savings, credit, investment or cash")
    asset: str = Field("", description="Asset code, e.g. USD, BRL, BTC")
    description: Optional[str] = Field("", description="Optional description")


class AccountResponse(BaseModel):
    id: str
    name: str
    type: str
    asset: str
    description: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, account: Account) -> "AccountResponse":
        return cls(
            id=account.id,
            name=account.name,
            type=account.type.value,
            asset=account.asset.code,
            description=account.description,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class AccountWithBalanceResponse(AccountResponse):
    """Account plus its cached balance."""
    current_balance: MoneyResponse
    pending_balance: MoneyResponse
    available_balance: MoneyResponse

    @classmethod
    def from_entity(cls, item: AccountWithBalance) -> "AccountWithBalanceResponse":
        base = AccountResponse.from_entity(item.account)
        return cls(
            **base.model_dump(),
            current_balance=MoneyResponse.from_money(item.current),
            pending_balance=MoneyResponse.from_money(item.pending),
            available_balance=MoneyResponse.from_money(item.available),
        )
