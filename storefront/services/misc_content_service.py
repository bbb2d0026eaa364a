"""
Misc content persistence

Content is partitioned by a free-text ``section`` key, e.g. ``hero``,
``location`` or ``our-story``.
"""

from sqlmodel import Session, select
from typing import List, Optional
import structlog
import uuid

from storefront.models.misc_content import MiscContent
from storefront.schemas.content import MiscContentCreate, MiscContentUpdate

logger = structlog.get_logger(__name__)

OPTIONAL_FIELDS = ("image_url", "icon", "large_text", "small_text", "message")


def get_all(session: Session, section: Optional[str] = None) -> List[MiscContent]:
    """Content records, newest first, optionally limited to one section"""
    query = select(MiscContent)
    if section:
        query = query.where(MiscContent.section == section)
    query = query.order_by(MiscContent.created_at.desc())
    return list(session.exec(query).all())


def get_by_id(session: Session, content_id: uuid.UUID) -> Optional[MiscContent]:
    return session.get(MiscContent, content_id)


def _blank_to_none(values: dict) -> dict:
    """Blank optional fields are stored as null"""
    for field in OPTIONAL_FIELDS:
        if field in values:
            values[field] = values[field] or None
    return values


def create(session: Session, data: MiscContentCreate) -> MiscContent:
    content = MiscContent(**_blank_to_none(data.model_dump()))
    session.add(content)
    session.commit()
    session.refresh(content)

    logger.info(f"Created misc content {content.id} in section {content.section}")
    return content


def update(session: Session, content: MiscContent, data: MiscContentUpdate) -> MiscContent:
    for field, value in _blank_to_none(data.changes()).items():
        setattr(content, field, value)

    session.add(content)
    session.commit()
    session.refresh(content)

    logger.info(f"Updated misc content {content.id}")
    return content


def delete(session: Session, content: MiscContent):
    content_id = content.id
    session.delete(content)
    session.commit()

    logger.info(f"Deleted misc content {content_id}")
