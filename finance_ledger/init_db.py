"""Create the ledger tables and seed the default categories."""
import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from finance_ledger.models.base import Base
# Imported so their tables are registered on Base.metadata
from finance_ledger.models import account, balance, category, transaction  # noqa: F401
from finance_ledger.repositories.category_repository import CategoryRepository
from finance_ledger.services.category_service import CategoryService

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None, seed: bool = True) -> int:
    """Create missing tables and insert missing default categories.

    Returns:
        Number of default categories added.
    """
    if engine is None:
        from finance_ledger.db.connection import engine

    Base.metadata.create_all(bind=engine)
    logger.info("Ledger tables initialized")

    if not seed:
        return 0

    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        added = CategoryService(CategoryRepository(db)).seed_defaults()
    finally:
        db.close()
    if added:
        logger.info(f"Seeded {added} default categories")
    return added


def main():
    """Command-line entry point."""
    from finance_ledger.config import get_settings
    from finance_ledger.logging_config import setup_logging

    setup_logging(get_settings())
    init_db()


if __name__ == "__main__":
    main()
