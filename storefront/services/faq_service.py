"""
FAQ persistence
"""

from sqlmodel import Session, select
from typing import List, Optional
import structlog
import uuid

from storefront.models.faq import FAQ
from storefront.schemas.content import FAQCreate, FAQUpdate

logger = structlog.get_logger(__name__)


def get_all(session: Session) -> List[FAQ]:
    """FAQs, newest first"""
    return list(session.exec(select(FAQ).order_by(FAQ.created_at.desc())).all())


def get_by_id(session: Session, faq_id: uuid.UUID) -> Optional[FAQ]:
    return session.get(FAQ, faq_id)


def create(session: Session, data: FAQCreate) -> FAQ:
    faq = FAQ(question=data.question.strip(), answer=data.answer.strip())
    session.add(faq)
    session.commit()
    session.refresh(faq)

    logger.info(f"Created FAQ {faq.id}")
    return faq


def update(session: Session, faq: FAQ, data: FAQUpdate) -> FAQ:
    for field, value in data.changes().items():
        setattr(faq, field, value.strip())

    session.add(faq)
    session.commit()
    session.refresh(faq)

    logger.info(f"Updated FAQ {faq.id}")
    return faq


def delete(session: Session, faq: FAQ):
    faq_id = faq.id
    session.delete(faq)
    session.commit()

    logger.info(f"Deleted FAQ {faq_id}")
