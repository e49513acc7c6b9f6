"""API routes for transaction management."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from finance_ledger.api.deps import get_services
from finance_ledger.api.errors import http_error
from finance_ledger.api.params import parse_amount, parse_date
from finance_ledger.domain.errors import LedgerError
from finance_ledger.schemas.transaction import TransactionRequest, TransactionResponse
from finance_ledger.services.base import Services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionResponse])
def list_transactions(
    limit: int = Query(50, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    account_id: Optional[str] = Query(None, description="Only transactions of this account"),
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
    services: Services = Depends(get_services),
):
    """Get transactions, most recent first.

    Filters by account or by date range when given; otherwise returns one
    page (limit/offset).
    """
    try:
        if account_id:
            transactions = services.transactions.list_by_account(account_id)
        elif start_date or end_date:
            transactions = services.transactions.list_by_date_range(
                parse_date(start_date, "start_date"), parse_date(end_date, "end_date")
            )
        else:
            transactions = services.transactions.list(limit=limit, offset=offset)
    except LedgerError as e:
        raise http_error(e)
    return [TransactionResponse.from_entity(transaction) for transaction in transactions]


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(request: TransactionRequest, services: Services = Depends(get_services)):
    """Create a transaction. An empty date means today."""
    try:
        transaction_date = parse_date(request.date)
        amount = parse_amount(request.amount, request.asset)
    except LedgerError as e:
        logger.error(f"Rejected transaction (amount={request.amount!r}, date={request.date!r}): {e}")
        raise http_error(e)

    try:
        transaction = services.transactions.create(
            account_id=request.account_id,
            category_id=request.category_id,
            amount=amount,
            description=request.description,
            transaction_date=transaction_date,
            status=request.status,
        )
    except LedgerError as e:
        logger.error(
            f"Failed to create transaction (account_id={request.account_id}, "
            f"category_id={request.category_id}, amount={request.amount}): {e}"
        )
        raise http_error(e)
    return TransactionResponse.from_entity(transaction)


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(transaction_id: str, services: Services = Depends(get_services)):
    """Get a single transaction with its account and category."""
    try:
        transaction = services.transactions.get(transaction_id)
    except LedgerError as e:
        raise http_error(e)
    return TransactionResponse.from_entity(transaction)


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    request: TransactionRequest,
    services: Services = Depends(get_services),
):
    """Update a transaction. An empty date or status keeps the stored value."""
    try:
        transaction_date = parse_date(request.date)
        amount = parse_amount(request.amount, request.asset)
        transaction = services.transactions.update(
            transaction_id,
            account_id=request.account_id,
            category_id=request.category_id,
            amount=amount,
            description=request.description,
            transaction_date=transaction_date,
            status=request.status,
        )
    except LedgerError as e:
        logger.error(f"Failed to update transaction {transaction_id}: {e}")
        raise http_error(e)
    return TransactionResponse.from_entity(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: str, services: Services = Depends(get_services)):
    """Delete a transaction and refresh its account balance."""
    try:
        services.transactions.delete(transaction_id)
    except LedgerError as e:
        raise http_error(e)
    return Response(status_code=204)
