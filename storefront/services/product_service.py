"""
Product persistence
"""

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
from typing import List, Optional
import structlog
import uuid

from storefront.models.product import Product
from storefront.models.timestamps import utc_now
from storefront.schemas.catalog import ProductCreate, ProductUpdate

logger = structlog.get_logger(__name__)


def _with_relations(query):
    return query.options(
        selectinload(Product.category),
        selectinload(Product.menu_items),
    )


def get_all(
    session: Session,
    category_id: Optional[uuid.UUID] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """Products, newest first, with category and menu items"""
    query = _with_relations(select(Product))

    if category_id:
        query = query.where(Product.category_id == category_id)

    if search:
        query = query.where(
            or_(
                Product.title.ilike(f"%{search}%"),
                Product.description.ilike(f"%{search}%"),
            )
        )

    query = query.order_by(Product.created_at.desc())
    return list(session.exec(query).all())


def get_by_id(session: Session, product_id: uuid.UUID) -> Optional[Product]:
    query = _with_relations(select(Product).where(Product.id == product_id))
    return session.exec(query).first()


def create(session: Session, data: ProductCreate) -> Product:
    product = Product(**data.model_dump())
    session.add(product)
    session.commit()
    session.refresh(product)

    logger.info(f"Created product {product.id}")
    return product


def update(session: Session, product: Product, data: ProductUpdate) -> Product:
    for field, value in data.changes().items():
        setattr(product, field, value)
    product.updated_at = utc_now()

    session.add(product)
    session.commit()
    session.refresh(product)

    logger.info(f"Updated product {product.id}")
    return product


def delete(session: Session, product: Product):
    """Delete a product; its menu items stay on the menu without the link"""
    product_id = product.id
    for item in product.menu_items:
        item.product_id = None
        session.add(item)

    session.delete(product)
    session.commit()

    logger.info(f"Deleted product {product_id}")
