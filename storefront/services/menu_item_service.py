"""
Menu item persistence
"""

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
import structlog
import uuid

from storefront.models.category import Category
from storefront.models.menu_item import MenuItem
from storefront.models.timestamps import utc_now
from storefront.schemas.catalog import MenuItemCreate, MenuItemUpdate

logger = structlog.get_logger(__name__)

CENT = Decimal("0.01")


def to_price(value: float) -> Decimal:
    """Round a float price to whole cents"""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def _with_relations(query):
    return query.options(
        selectinload(MenuItem.product),
        selectinload(MenuItem.category),
    )


def get_all(
    session: Session,
    category_id: Optional[uuid.UUID] = None,
    product_id: Optional[uuid.UUID] = None,
    search: Optional[str] = None,
) -> List[MenuItem]:
    """Menu items grouped by category name, then by item name"""
    query = _with_relations(
        select(MenuItem).outerjoin(Category, MenuItem.category_id == Category.id)
    )

    if category_id:
        query = query.where(MenuItem.category_id == category_id)

    if product_id:
        query = query.where(MenuItem.product_id == product_id)

    if search:
        query = query.where(
            or_(
                MenuItem.name.ilike(f"%{search}%"),
                MenuItem.description.ilike(f"%{search}%"),
            )
        )

    # Uncategorised items go last
    query = query.order_by(Category.name.asc().nulls_last(), MenuItem.name.asc())
    return list(session.exec(query).all())


def get_by_id(session: Session, item_id: uuid.UUID) -> Optional[MenuItem]:
    query = _with_relations(select(MenuItem).where(MenuItem.id == item_id))
    return session.exec(query).first()


def create(session: Session, data: MenuItemCreate) -> MenuItem:
    item = MenuItem(
        name=data.name.strip(),
        description=data.description.strip(),
        price=to_price(data.price),
        product_id=data.product_id or None,
        category_id=data.category_id or None,
    )
    session.add(item)
    session.commit()
    session.refresh(item)

    logger.info(f"Created menu item {item.id}")
    return item


def update(session: Session, item: MenuItem, data: MenuItemUpdate) -> MenuItem:
    """Apply the sent fields; an explicit null product_id/category_id clears the link"""
    changes = data.changes()

    if "name" in changes:
        item.name = changes["name"].strip()
    if "description" in changes:
        item.description = changes["description"].strip()
    if "price" in changes:
        item.price = to_price(changes["price"])
    if "product_id" in changes:
        item.product_id = changes["product_id"]
    if "category_id" in changes:
        item.category_id = changes["category_id"]

    item.updated_at = utc_now()

    session.add(item)
    session.commit()
    session.refresh(item)

    logger.info(f"Updated menu item {item.id}")
    return item


def delete(session: Session, item: MenuItem):
    item_id = item.id
    session.delete(item)
    session.commit()

    logger.info(f"Deleted menu item {item_id}")
