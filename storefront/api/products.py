"""
Products API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlmodel import Session
from typing import List, Optional
import structlog
import uuid

from storefront.core.database import get_session
from storefront.core.dependencies import get_current_admin
from storefront.models.product import Product
from storefront.schemas.catalog import ProductCreate, ProductUpdate, ProductDetail
from storefront.services import category_service, product_service

logger = structlog.get_logger(__name__)
router = APIRouter()


def _get_product_or_404(session: Session, product_id: uuid.UUID) -> Product:
    product = product_service.get_by_id(session, product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )
    return product


def _ensure_category_exists(session: Session, category_id: Optional[uuid.UUID]):
    if category_id and not category_service.get_by_id(session, category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )


@router.get("", response_model=List[ProductDetail])
def list_products(
    category_id: Optional[uuid.UUID] = Query(None, description="Filter by category"),
    search: Optional[str] = Query(None, description="Search by title or description"),
    session: Session = Depends(get_session)
):
    """List products, newest first"""
    try:
        products = product_service.get_all(session, category_id=category_id, search=search)
        return [ProductDetail.model_validate(product) for product in products]

    except Exception as e:
        logger.error(f"Error listing products: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch products"
        )


@router.post(
    "",
    response_model=ProductDetail,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_current_admin)],
)
def create_product(
    product_data: ProductCreate,
    session: Session = Depends(get_session)
):
    """Create a new product"""
    try:
        _ensure_category_exists(session, product_data.category_id)

        product = product_service.create(session, product_data)
        return ProductDetail.model_validate(product)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error creating product: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create product"
        )


@router.get("/{product_id}", response_model=ProductDetail)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Get a specific product"""
    try:
        product = _get_product_or_404(session, product_id)
        return ProductDetail.model_validate(product)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting product: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch product"
        )


@router.put(
    "/{product_id}",
    response_model=ProductDetail,
    dependencies=[Depends(get_current_admin)],
)
def update_product(
    product_id: uuid.UUID,
    product_data: ProductUpdate,
    session: Session = Depends(get_session)
):
    """Update any subset of a product's fields"""
    try:
        product = _get_product_or_404(session, product_id)
        _ensure_category_exists(session, product_data.category_id)

        product = product_service.update(session, product, product_data)
        return ProductDetail.model_validate(product)

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error updating product: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update product"
        )


@router.delete("/{product_id}", dependencies=[Depends(get_current_admin)])
def delete_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session)
):
    """Delete a product"""
    try:
        product = _get_product_or_404(session, product_id)
        product_service.delete(session, product)
        return {"message": "Product deleted successfully"}

    except HTTPException:
        raise
    except Exception as e:
        session.rollback()
        logger.error(f"Error deleting product: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete product"
        )
