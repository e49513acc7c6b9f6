"""SQLAlchemy model for accounts."""
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, Text, Uuid

from finance_ledger.models.base import Base, utcnow


class AccountRow(Base):
    """A financial account (checking, savings, credit card, ...)."""
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint(
            "type IN ('checking', 'savings', 'credit', 'investment', 'cash')",
            name="ck_accounts_type",
        ),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text)
    asset = Column(Text, nullable=False, default="BRL")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
