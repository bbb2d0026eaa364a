"""
Image message persistence
"""

from sqlmodel import Session, select
from typing import List, Optional
import structlog
import uuid

from storefront.models.image_message import ImageMessage
from storefront.schemas.content import ImageMessageCreate, ImageMessageUpdate

logger = structlog.get_logger(__name__)


def get_all(session: Session) -> List[ImageMessage]:
    query = select(ImageMessage).order_by(ImageMessage.created_at.desc())
    return list(session.exec(query).all())


def get_by_id(session: Session, image_message_id: uuid.UUID) -> Optional[ImageMessage]:
    return session.get(ImageMessage, image_message_id)


def create(session: Session, data: ImageMessageCreate) -> ImageMessage:
    image_message = ImageMessage(**data.model_dump())
    session.add(image_message)
    session.commit()
    session.refresh(image_message)

    logger.info(f"Created image message {image_message.id}")
    return image_message


def update(session: Session, image_message: ImageMessage, data: ImageMessageUpdate) -> ImageMessage:
    for field, value in data.changes().items():
        setattr(image_message, field, value)

    session.add(image_message)
    session.commit()
    session.refresh(image_message)

    logger.info(f"Updated image message {image_message.id}")
    return image_message


def delete(session: Session, image_message: ImageMessage):
    image_message_id = image_message.id
    session.delete(image_message)
    session.commit()

    logger.info(f"Deleted image message {image_message_id}")
