"""API routes for category management."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from finance_ledger.api.deps import get_services
from finance_ledger.api.errors import http_error
from finance_ledger.domain.errors import LedgerError
from finance_ledger.schemas.category import CategoryRequest, CategoryResponse
from finance_ledger.services.base import Services

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    type: Optional[str] = Query(None, description="Filter by type: 'income' or 'expense'"),
    services: Services = Depends(get_services),
):
    """Get categories ordered by type and name, optionally filtered by type."""
    try:
        categories = services.categories.list(type)
    except LedgerError as e:
        raise http_error(e)
    return [CategoryResponse.from_entity(category) for category in categories]


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(request: CategoryRequest, services: Services = Depends(get_services)):
    """Create a new category."""
    try:
        category = services.categories.create(
            name=request.name,
            category_type=request.type,
            description=request.description,
            color=request.color,
        )
    except LedgerError as e:
        logger.error(f"Failed to create category: {e}")
        raise http_error(e)
    return CategoryResponse.from_entity(category)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, services: Services = Depends(get_services)):
    """Get a single category by ID."""
    try:
        category = services.categories.get(category_id)
    except LedgerError as e:
        raise http_error(e)
    return CategoryResponse.from_entity(category)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    request: CategoryRequest,
    services: Services = Depends(get_services),
):
    """Update an existing category."""
    try:
        category = services.categories.update(
            category_id,
            name=request.name,
            category_type=request.type,
            description=request.description,
            color=request.color,
        )
    except LedgerError as e:
        logger.error(f"Failed to update category {category_id}: {e}")
        raise http_error(e)
    return CategoryResponse.from_entity(category)


@router.delete("/{category_id}", status_code=204)
def delete_category(category_id: str, services: Services = Depends(get_services)):
    """Delete a category. Fails with 409 while transactions still use it."""
    try:
        services.categories.delete(category_id)
    except LedgerError as e:
        logger.error(f"Failed to delete category {category_id}: {e}")
        raise http_error(e)
    return Response(status_code=204)
