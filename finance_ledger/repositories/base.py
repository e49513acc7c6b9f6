"""Helpers shared by the SQLAlchemy repositories."""
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from finance_ledger.domain.errors import ConflictError


def parse_uuid(value) -> Optional[uuid.UUID]:
    """Return the UUID for ``value`` or None if it is empty or malformed."""
    if isinstance(value, uuid.UUID):
        return value
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite hands back naive datetimes; treat them as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlRepository:
    """Base class holding the session and commit handling."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        """Commit the session, turning constraint violations into ConflictError."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            detail = str(e.orig) if e.orig is not None else str(e)
            raise ConflictError(f"failed to {action}: {detail}") from e
        except Exception:
            self.db.rollback()
            raise
