"""API routes for cached account balances."""
import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from finance_ledger.api.deps import get_services
from finance_ledger.api.errors import http_error
from finance_ledger.domain.errors import LedgerError
from finance_ledger.schemas.balance import BalanceResponse, BalanceSummaryResponse
from finance_ledger.services.base import Services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/balances", tags=["balances"])


@router.get("", response_model=List[BalanceResponse])
def list_balances(services: Services = Depends(get_services)):
    """Get all cached balances with their accounts."""
    return [BalanceResponse.from_entity(balance) for balance in services.balances.list()]


@router.get("/summary", response_model=BalanceSummaryResponse)
def get_balance_summary(services: Services = Depends(get_services)):
    """Total assets, total liabilities and net worth."""
    return BalanceSummaryResponse.from_entity(services.balances.summary())


@router.post("/refresh", status_code=204)
def refresh_all_balances(services: Services = Depends(get_services)):
    """Recompute every account balance."""
    refreshed = services.balances.refresh_all()
    logger.info(f"Refreshed {refreshed} account balances")
    return Response(status_code=204)


@router.get("/{account_id}", response_model=BalanceResponse)
def get_balance(account_id: str, services: Services = Depends(get_services)):
    """Get the balance of one account, computing it if it was never cached."""
    try:
        balance = services.balances.get(account_id)
    except LedgerError as e:
        raise http_error(e)
    return BalanceResponse.from_entity(balance)


@router.post("/{account_id}/refresh", status_code=204)
def refresh_balance(account_id: str, services: Services = Depends(get_services)):
    """Recompute one account's balance from its transactions."""
    try:
        services.balances.refresh(account_id)
    except LedgerError as e:
        raise http_error(e)
    return Response(status_code=204)
