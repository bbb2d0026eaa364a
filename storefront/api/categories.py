"""
Categories API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.category import Category
from storefront.schemas.catalog import CategoryCreate, CategoryUpdate, CategoryDetail
from storefront.services import category_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_category_or_404(session: Session, category_id: uuid.UUID) -> Category:
    category = category_service.get_by_id(session, category_id)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )
    return category


@router.get("", response_model=List[CategoryDetail])
def list_categories(session: Session = Depends(get_session)):
    """List all categories with their products and menu items"""
    try:
        categories = category_service.get_all(session)
        return [CategoryDetail.model_validate(category) for category in categories]

    except Exception as e:
        logger.error(f"Error listing categories: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories"
        )


@router.post(
    "",
    response_model=CategoryDetail,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_category(
    category_data: CategoryCreate,
    session: Session = Depends(get_session)
):
    """Create a new category; names must be unique"""
    try:
        if category_service.find_by_name(session, category_data.name):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Category with this name already exists"
            )

        category = category_service.create(session, category_data)
        return CategoryDetail.model_validate(category)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error creating category: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create category"
        )


@router.get("/{category_id}", response_model=CategoryDetail)
def get_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Get a specific category"""
    try:
        category = _get_category_or_404(session, category_id)
        return CategoryDetail.model_validate(category)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting category: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch category"
        )


@router.put(
    "/{category_id}",
    response_model=CategoryDetail,
    dependencies=[Depends(get_current_admin)],
)
def update_category(
    category_id: uuid.UUID,
    category_data: CategoryUpdate,
    session: Session = Depends(get_session)
):
    """Rename a category"""
    try:
        category = _get_category_or_404(session, category_id)

        if category_data.name is not None and category_service.find_by_name(
            session, category_data.name, exclude_id=category_id
        ):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Category with this name already exists"
            )

        category = category_service.update(session, category, category_data)
        return CategoryDetail.model_validate(category)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating category: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update category"
        )


@router.delete("/{category_id}", dependencies=[Depends(get_current_admin)])
def delete_category(
    category_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Delete a category that no product or menu item refers to"""
    try:
        category = _get_category_or_404(session, category_id)

        if category_service.has_dependents(category):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Cannot delete category with associated products or menu items. "
                       "Please remove or reassign them first."
            )

        category_service.delete(session, category)
        return {"message": "Category deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting category: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete category"
        )
