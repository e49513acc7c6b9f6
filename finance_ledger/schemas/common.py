"""Shared response pieces."""
from pydantic import BaseModel, Field

from finance_ledger.domain.monetary import Money


class MoneyResponse(BaseModel):
    """A monetary value as plain decimal, asset code and display string."""
    amount: str = Field(..., description="Major units, e.g. '-12.50'")
    asset: str
    formatted: str = Field(..., description="Display string, e.g. '-$12.50'")

    @classmethod
    def from_money(cls, money: Money) -> "MoneyResponse":
        return cls(amount=money.amount_string(), asset=money.asset.code, formatted=str(money))
