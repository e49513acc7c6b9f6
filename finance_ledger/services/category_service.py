"""Category use cases."""
import logging
from typing import List, Optional

from finance_ledger.domain.entities import Category, CategoryType, DEFAULT_CATEGORY_COLOR
from finance_ledger.domain.errors import NotFoundError
from finance_ledger.repositories.category_repository import CategoryRepository
from finance_ledger.services.validation import parse_enum, require_id, require_text

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Salary", "income", "Regular salary income", "#10B981"),
    ("Business", "income", "Business income", "#059669"),
    ("Investment", "income", "Investment returns", "#34D399"),
    ("Other Income", "income", "Miscellaneous income", "#6EE7B7"),
    ("Groceries", "expense", "Food and groceries", "#EF4444"),
    ("Dining Out", "expense", "Restaurants and takeout", "#F87171"),
    ("Transportation", "expense", "Gas, public transport, car maintenance", "#F59E0B"),
    ("Housing", "expense", "Rent, mortgage, utilities", "#8B5CF6"),
    ("Healthcare", "expense", "Medical expenses", "#EC4899"),
    ("Entertainment", "expense", "Movies, games, hobbies", "#06B6D4"),
    ("Shopping", "expense", "Clothes, electronics, general shopping", "#84CC16"),
    ("Credit Card", "expense", "Credit card payments", "#6B7280"),
    ("Other Expense", "expense", "Miscellaneous expenses", "#9CA3AF"),
]


class CategoryService:
    """Service for managing income and expense categories."""

    def __init__(self, categories: CategoryRepository):
        self.categories = categories

    def create(
        self,
        name: str,
        category_type: str,
        description: Optional[str] = "",
        color: Optional[str] = "",
    ) -> Category:
        """Create a category. Color falls back to neutral gray.

        Raises:
            ValidationError: If the name or type is empty.
            InvalidParameterError: If the type is not income or expense.
            ConflictError: If a category with the same name and type exists.
        """
        category = self._build(None, name, category_type, description, color)
        created = self.categories.create(category)
        logger.info(f"Created category {created.id} ({created.type.value}: {created.name})")
        return created

    def get(self, category_id: str) -> Category:
        category_id = require_id(category_id, "category")
        category = self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("category not found")
        return category

    def list(self, category_type: Optional[str] = None) -> List[Category]:
        """All categories, or only those of ``category_type`` when given."""
        parsed_type = parse_enum(CategoryType, category_type, "category type", required=False)
        if parsed_type is None:
            return self.categories.get_all()
        return self.categories.get_by_type(parsed_type)

    def update(
        self,
        category_id: str,
        name: str,
        category_type: str,
        description: Optional[str] = "",
        color: Optional[str] = "",
    ) -> Category:
        category = self._build(category_id, name, category_type, description, color)
        category.id = require_id(category_id, "category")

        updated = self.categories.update(category)
        if updated is None:
            raise NotFoundError("category not found")
        return updated

    def delete(self, category_id: str) -> None:
        # Categories in use are rejected by the foreign key, not checked here
        category_id = require_id(category_id, "category")
        if not self.categories.delete(category_id):
            raise NotFoundError("category not found")
        logger.info(f"Deleted category {category_id}")

    def seed_defaults(self) -> int:
        """Insert the default categories that are missing. Returns how many were added."""
        added = 0
        for name, category_type, description, color in DEFAULT_CATEGORIES:
            parsed_type = CategoryType(category_type)
            if self.categories.get_by_name_and_type(name, parsed_type) is not None:
                continue
            self.categories.create(Category(
                id=None, name=name, type=parsed_type, description=description, color=color,
            ))
            added += 1
        return added

    def _build(self, category_id, name, category_type, description, color) -> Category:
        name = require_text(name, "category name cannot be empty")
        parsed_type = parse_enum(CategoryType, category_type, "category type")
        return Category(
            id=category_id,
            name=name,
            type=parsed_type,
            description=(description or "").strip(),
            color=(color or "").strip() or DEFAULT_CATEGORY_COLOR,
        )
