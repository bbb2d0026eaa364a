"""
Category persistence
"""

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select
from typing import List, Optional
import structlog
import uuid

from storefront.models.category import Category
from storefront.schemas.catalog import CategoryCreate, CategoryUpdate

logger = structlog.get_logger(__name__)


def _with_relations(query):
    return query.options(
        selectinload(Category.products),
        selectinload(Category.menu_items),
    )


def get_all(session: Session) -> List[Category]:
    """All categories, alphabetically, with their products and menu items"""
    query = _with_relations(select(Category)).order_by(Category.name.asc())
    return list(session.exec(query).all())


def get_by_id(session: Session, category_id: uuid.UUID) -> Optional[Category]:
    query = _with_relations(select(Category).where(Category.id == category_id))
    return session.exec(query).first()


def find_by_name(
    session: Session,
    name: str,
    exclude_id: Optional[uuid.UUID] = None
) -> Optional[Category]:
    """Category whose trimmed name matches exactly, optionally ignoring one id"""
    query = select(Category).where(Category.name == name.strip())
    if exclude_id is not None:
        query = query.where(Category.id != exclude_id)
    return session.exec(query).first()


def has_dependents(category: Category) -> bool:
    return len(category.products) > 0 or len(category.menu_items) > 0


def create(session: Session, data: CategoryCreate) -> Category:
    category = Category(name=data.name.strip())
    session.add(category)
    session.commit()
    session.refresh(category)

    logger.info(f"Created category {category.id}")
    return category


def update(session: Session, category: Category, data: CategoryUpdate) -> Category:
    changes = data.changes()
    if "name" in changes:
        category.name = changes["name"].strip()

    session.add(category)
    session.commit()
    session.refresh(category)

    logger.info(f"Updated category {category.id}")
    return category


def delete(session: Session, category: Category):
    category_id = category.id
    session.delete(category)
    session.commit()

    logger.info(f"Deleted category {category_id}")
