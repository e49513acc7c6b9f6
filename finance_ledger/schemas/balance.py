"""Pydantic schemas for balance responses."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from finance_ledger.domain.entities import Balance, BalanceSummary
from finance_ledger.schemas.account import AccountResponse
from finance_ledger.schemas.common import MoneyResponse


class BalanceResponse(BaseModel):
    account_id: str
    current_balance: MoneyResponse
    pending_balance: MoneyResponse
    available_balance: MoneyResponse
    last_calculated: datetime
    account: Optional[AccountResponse] = None

    @classmethod
    def from_entity(cls, balance: Balance) -> "BalanceResponse":
        return cls(
            account_id=balance.account_id,
            current_balance=MoneyResponse.from_money(balance.current),
            pending_balance=MoneyResponse.from_money(balance.pending),
            available_balance=MoneyResponse.from_money(balance.available),
            last_calculated=balance.last_calculated,
            account=AccountResponse.from_entity(balance.account) if balance.account else None,
        )


class BalanceSummaryResponse(BaseModel):
    """Net worth summary across all accounts."""
    total_assets: MoneyResponse
    total_liabilities: MoneyResponse
    net_worth: MoneyResponse
    last_calculated: datetime

    @classmethod
    def from_entity(cls, summary: BalanceSummary) -> "BalanceSummaryResponse":
        return cls(
            total_assets=MoneyResponse.from_money(summary.total_assets),
            total_liabilities=MoneyResponse.from_money(summary.total_liabilities),
            net_worth=MoneyResponse.from_money(summary.net_worth),
            last_calculated=summary.last_calculated,
        )
