"""Category persistence."""
from typing import List, Optional

from sqlalchemy import select

from finance_ledger.domain.entities import Category, CategoryType
from finance_ledger.models.category import CategoryRow
from finance_ledger.repositories.base import SqlRepository, as_utc, parse_uuid


def category_from_row(row: CategoryRow) -> Category:
    return Category(
        id=str(row.id),
        name=row.name,
        type=CategoryType(row.type),
        description=row.description or "",
        color=row.color or "",
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class CategoryRepository(SqlRepository):
    """Repository for the categories table."""

    def create(self, category: Category) -> Category:
        row = CategoryRow(
            name=category.name,
            type=category.type.value,
            description=category.description,
            color=category.color,
        )
        self.db.add(row)
        self._commit("create category")
        self.db.refresh(row)
        return category_from_row(row)

    def get_by_id(self, category_id: str) -> Optional[Category]:
        row = self._get_row(category_id)
        return category_from_row(row) if row else None

    def get_all(self) -> List[Category]:
        """All categories ordered by type, then name."""
        rows = self.db.scalars(
            select(CategoryRow).order_by(CategoryRow.type, CategoryRow.name)
        ).all()
        return [category_from_row(row) for row in rows]

    def get_by_type(self, category_type: CategoryType) -> List[Category]:
        rows = self.db.scalars(
            select(CategoryRow)
            .where(CategoryRow.type == category_type.value)
            .order_by(CategoryRow.name)
        ).all()
        return [category_from_row(row) for row in rows]

    def get_by_name_and_type(self, name: str, category_type: CategoryType) -> Optional[Category]:
        row = self.db.scalars(
            select(CategoryRow).where(
                CategoryRow.name == name, CategoryRow.type == category_type.value
            )
        ).first()
        return category_from_row(row) if row else None

    def update(self, category: Category) -> Optional[Category]:
        row = self._get_row(category.id)
        if row is None:
            return None
        row.name = category.name
        row.type = category.type.value
        row.description = category.description
        row.color = category.color
        self._commit("update category")
        self.db.refresh(row)
        return category_from_row(row)

    def delete(self, category_id: str) -> bool:
        """Delete a category.

        Categories still referenced by transactions are protected by
        ON DELETE RESTRICT, which surfaces here as ConflictError.
        """
        row = self._get_row(category_id)
        if row is None:
            return False
        self.db.delete(row)
        self._commit("delete category")
        return True

    def _get_row(self, category_id: str) -> Optional[CategoryRow]:
        uid = parse_uuid(category_id)
        if uid is None:
            return None
        return self.db.get(CategoryRow, uid)
