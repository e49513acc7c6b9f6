"""SQLAlchemy model for transaction categories."""
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, Index, Text, Uuid

from finance_ledger.models.base import Base, utcnow


class CategoryRow(Base):
    """Income or expense category; (name, type) is unique."""
    __tablename__ = "categories"
    __table_args__ = (
        CheckConstraint("type IN ('income', 'expense')", name="ck_categories_type"),
        Index("idx_categories_name_type", "name", "type", unique=True),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    type = Column(Text, nullable=False)
    description = Column(Text)
    color = Column(Text, default="#6B7280")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
