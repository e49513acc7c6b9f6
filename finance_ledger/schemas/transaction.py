"""Pydantic schemas for transaction requests and responses."""
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr

from finance_ledger.domain.entities import Transaction
from finance_ledger.schemas.account import AccountResponse
from finance_ledger.schemas.category import CategoryResponse


class TransactionRequest(BaseModel):
    """Request schema for creating or updating a transaction."""
    account_id: str = Field("", description="Owning account ID")
    category_id: str = Field("", description="Category ID")
    amount: Union[StrictStr, StrictInt, StrictFloat] = Field("", description="Decimal amount in major units, e.g. '12.50'")
    asset: Optional[str] = Field(
        None, description="Asset the amount is expressed in; relabeled to the account's asset"
    )
    description: str = Field("", description="Transaction description")
    date: Optional[str] = Field("", description="YYYY-MM-DD; empty means today on create")
    status: Optional[str] = Field("", description="pending, cleared or cancelled")


class TransactionResponse(BaseModel):
    """Transaction response schema."""
    id: str
    account_id: str
    category_id: str
    amount: str
    asset: str
    formatted_amount: str
    description: str
    date: str
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    account: Optional[AccountResponse] = None
    category: Optional[CategoryResponse] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            account_id=transaction.account_id,
            category_id=transaction.category_id,
            amount=transaction.amount.amount_string(),
            asset=transaction.amount.asset.code,
            formatted_amount=str(transaction.amount),
            description=transaction.description,
            date=transaction.date.isoformat() if transaction.date else "",
            status=transaction.status.value if transaction.status else "",
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
            account=AccountResponse.from_entity(transaction.account) if transaction.account else None,
            category=CategoryResponse.from_entity(transaction.category) if transaction.category else None,
        )
