"""
Menu items API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlmodel import Session
from typing import List, Optional
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.menu_item import MenuItem
from storefront.schemas.catalog import MenuItemCreate, MenuItemUpdate, MenuItemDetail
from storefront.services import category_service, menu_item_service, product_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_menu_item_or_404(session: Session, item_id: uuid.UUID) -> MenuItem:
    item = menu_item_service.get_by_id(session, item_id)
    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Menu item not found"
        )
    return item


def _ensure_links_exist(
    session: Session,
    product_id: Optional[uuid.UUID],
    category_id: Optional[uuid.UUID]
):
    """Verify referenced product and category exist"""
    if product_id and not product_service.get_by_id(session, product_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    if category_id and not category_service.get_by_id(session, category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )


@router.get("", response_model=List[MenuItemDetail])
def list_menu_items(
    category_id: Optional[uuid.UUID] = Query(None, description="Filter by category"),
    product_id: Optional[uuid.UUID] = Query(None, description="Filter by product"),
    search: Optional[str] = Query(None, description="Search by name or description"),
    session: Session = Depends(get_session)
):
    """List menu items ordered by category name, then item name"""
    try:
        items = menu_item_service.get_all(
            session,
            category_id=category_id,
            product_id=product_id,
            search=search,
        )
        return [MenuItemDetail.model_validate(item) for item in items]

    except Exception as e:
        logger.error(f"Error listing menu items: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch menu items"
        )


@router.post(
    "",
    response_model=MenuItemDetail,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_menu_item(
    item_data: MenuItemCreate,
    session: Session = Depends(get_session)
):
    """Create a new menu item linked to a product and/or category"""
    try:
        if not item_data.product_id and not item_data.category_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Either product_id or category_id must be provided"
            )

        _ensure_links_exist(session, item_data.product_id, item_data.category_id)

        item = menu_item_service.create(session, item_data)
        return MenuItemDetail.model_validate(item)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error creating menu item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create menu item"
        )


@router.get("/{item_id}", response_model=MenuItemDetail)
def get_menu_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Get a specific menu item"""
    try:
        item = _get_menu_item_or_404(session, item_id)
        return MenuItemDetail.model_validate(item)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting menu item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch menu item"
        )


@router.put(
    "/{item_id}",
    response_model=MenuItemDetail,
    dependencies=[Depends(get_current_admin)],
)
def update_menu_item(
    item_id: uuid.UUID,
    item_data: MenuItemUpdate,
    session: Session = Depends(get_session)
):
    """Update a menu item; sending a null product_id or category_id unlinks it"""
    try:
        item = _get_menu_item_or_404(session, item_id)
        _ensure_links_exist(session, item_data.product_id, item_data.category_id)

        item = menu_item_service.update(session, item, item_data)
        return MenuItemDetail.model_validate(item)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating menu item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update menu item"
        )


@router.delete("/{item_id}", dependencies=[Depends(get_current_admin)])
def delete_menu_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Delete a menu item"""
    try:
        item = _get_menu_item_or_404(session, item_id)
        menu_item_service.delete(session, item)
        return {"message": "Menu item deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting menu item: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete menu item"
        )
