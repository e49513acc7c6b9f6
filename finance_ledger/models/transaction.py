"""SQLAlchemy model for ledger transactions."""
import uuid

from sqlalchemy import BigInteger, CheckConstraint, Column, Date, DateTime, ForeignKey, Text, Uuid

from finance_ledger.models.base import Base, utcnow


class TransactionRow(Base):
    """Transaction amounts are stored in minor units of the owning account's asset."""
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'cleared', 'cancelled')", name="ck_transactions_status"
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    account_id = Column(
        Uuid, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id = Column(
        Uuid, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    amount = Column(BigInteger, nullable=False)
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    status = Column(Text, nullable=False, default="cleared", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
