"""API routes for account management."""
import logging

from fastapi import APIRouter, Depends, Query, Response

from finance_ledger.api.deps import get_services
from finance_ledger.api.errors import http_error
from finance_ledger.domain.errors import LedgerError
from finance_ledger.schemas.account import (
    AccountRequest,
    AccountResponse,
    AccountWithBalanceResponse,
)
from finance_ledger.services.base import Services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/accounts", tags=["accounts"])


@router.get("")
def list_accounts(
    with_balances: bool = Query(False, description="Include cached balances"),
    services: Services = Depends(get_services),
):
    """Get all accounts ordered by name."""
    if with_balances:
        return [
            AccountWithBalanceResponse.from_entity(item)
            for item in services.accounts.list_with_balances()
        ]
    return [AccountResponse.from_entity(account) for account in services.accounts.list()]


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(request: AccountRequest, services: Services = Depends(get_services)):
    """Create a new account."""
    try:
        account = services.accounts.create(
            name=request.name,
            account_type=request.type,
            asset=request.asset,
            description=request.description,
        )
    except LedgerError as e:
        logger.error(f"Failed to create account: {e}")
        raise http_error(e)
    return AccountResponse.from_entity(account)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(account_id: str, services: Services = Depends(get_services)):
    """Get a single account by ID."""
    try:
        account = services.accounts.get(account_id)
    except LedgerError as e:
        raise http_error(e)
    return AccountResponse.from_entity(account)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    request: AccountRequest,
    services: Services = Depends(get_services),
):
    """Update an existing account."""
    try:
        account = services.accounts.update(
            account_id,
            name=request.name,
            account_type=request.type,
            asset=request.asset,
            description=request.description,
        )
    except LedgerError as e:
        logger.error(f"Failed to update account {account_id}: {e}")
        raise http_error(e)
    return AccountResponse.from_entity(account)


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: str, services: Services = Depends(get_services)):
    """Delete an account together with its transactions."""
    try:
        services.accounts.delete(account_id)
    except LedgerError as e:
        raise http_error(e)
    return Response(status_code=204)
