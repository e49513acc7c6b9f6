"""FastAPI dependencies."""
from fastapi import Depends
from sqlalchemy.orm import Session

from finance_ledger.db.connection import get_db
from finance_ledger.services.base import Services


def get_services(db: Session = Depends(get_db)) -> Services:
    """Services bound to the request's database session."""
    return Services(db)
