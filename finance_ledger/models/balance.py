"""SQLAlchemy model for cached account balances."""
from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Uuid

from finance_ledger.models.base import Base, utcnow


class BalanceRow(Base):
    """Derived totals per account; can always be rebuilt from transactions."""
    __tablename__ = "balances"

    account_id = Column(
        Uuid, ForeignKey("accounts.id", ondelete="CASCADE"), primary_key=True
    )
    current_balance = Column(BigInteger, nullable=False, default=0)
    pending_balance = Column(BigInteger, nullable=False, default=0)
    available_balance = Column(BigInteger, nullable=False, default=0)
    last_calculated = Column(DateTime(timezone=True), nullable=False, default=utcnow)
