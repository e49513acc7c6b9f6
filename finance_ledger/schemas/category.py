"""Pydantic schemas for category requests and responses."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from finance_ledger.domain.entities import Category


class CategoryRequest(BaseModel):
    """Request schema for creating or updating a category."""
    name: str = Field("", description="Category name")
    type: str = Field("", description="income or expense")
    description: Optional[str] = Field("", description="Optional description")
    color: Optional[str] = Field("", description="Hex color; defaults to gray")


class CategoryResponse(BaseModel):
    id: str
    name: str
    type: str
    description: str = ""
    color: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            type=category.type.value,
            description=category.description,
            color=category.color,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
