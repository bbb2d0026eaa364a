"""
Server-rendered storefront and admin console pages
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from sqlmodel import Session
from typing import Any, Callable, Dict, List
import structlog

from storefront.core.config import get_settings
from storefront.core.database import get_session
from storefront.schemas.catalog import CategoryRead, MenuItemDetail, ProductDetail
from storefront.schemas.content import FAQRead, ImageMessageRead, MiscContentRead
from storefront.services import (
    category_service,
    faq_service,
    image_message_service,
    menu_item_service,
    misc_content_service,
    product_service,
    reviews_service,
)
from storefront.web.render import (
    ADMIN_SECTIONS,
    render_admin_dashboard,
    render_admin_section,
    render_login_page,
    render_storefront,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


def _dump(schema, records) -> List[Dict[str, Any]]:
    return [schema.model_validate(record).model_dump(mode="json") for record in records]


def _section_or_empty(name: str, load: Callable[[], Any], default: Any = None) -> Any:
    """Run a loader for one page section; a failure leaves the section on its fallback content"""
    try:
        return load()
    except Exception as e:
        logger.warning(f"Storefront section {name} unavailable, using fallback: {e}")
        return [] if default is None else default


@router.get("/", response_class=HTMLResponse)
def storefront(session: Session = Depends(get_session)):
    settings = get_settings()

    hero = _section_or_empty(
        "hero",
        lambda: _dump(MiscContentRead, misc_content_service.get_all(session, section="hero")),
    )
    products = _section_or_empty(
        "products",
        lambda: _dump(ProductDetail, product_service.get_all(session)),
    )
    story = _section_or_empty(
        "our-story",
        lambda: _dump(MiscContentRead, misc_content_service.get_all(session, section="our-story")),
    )
    image_messages = _section_or_empty(
        "image-messages",
        lambda: _dump(ImageMessageRead, image_message_service.get_all(session)),
    )
    faqs = _section_or_empty(
        "faq",
        lambda: _dump(FAQRead, faq_service.get_all(session)),
    )
    location = _section_or_empty(
        "location",
        lambda: _dump(MiscContentRead, misc_content_service.get_all(session, section="location")),
    )
    reviews = _section_or_empty(
        "reviews",
        lambda: reviews_service.get_curated_reviews().model_dump(mode="json"),
        default={"overall_rating": 0, "total_reviews": 0, "reviews": []},
    )

    return render_storefront(
        hero=hero,
        products=products,
        story=story,
        image_messages=image_messages,
        faqs=faqs,
        location=location,
        reviews=reviews,
        app_name=settings.APP_NAME,
    )


@router.get("/admin/login", response_class=HTMLResponse)
def admin_login_page():
    return render_login_page(get_settings().APP_NAME)


def _load_section_records(slug: str, session: Session) -> List[Dict[str, Any]]:
    if slug == "products":
        return _dump(ProductDetail, product_service.get_all(session))
    if slug == "categories":
        return _dump(CategoryRead, category_service.get_all(session))
    if slug == "menu-items":
        return _dump(MenuItemDetail, menu_item_service.get_all(session))
    if slug == "faqs":
        return _dump(FAQRead, faq_service.get_all(session))
    if slug == "customisation":
        return _dump(MiscContentRead, misc_content_service.get_all(session))
    if slug == "our-story":
        return _dump(ImageMessageRead, image_message_service.get_all(session))
    return []


@router.get("/admin", response_class=HTMLResponse)
def admin_dashboard(session: Session = Depends(get_session)):
    """Record counts per console section; the page itself redirects to login without a token"""
    try:
        counts = {slug: len(_load_section_records(slug, session)) for slug in ADMIN_SECTIONS}
        return render_admin_dashboard(get_settings().APP_NAME, counts)

    except Exception as e:
        logger.error(f"Error rendering admin dashboard: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load admin dashboard"
        )


@router.get("/admin/{section}", response_class=HTMLResponse)
def admin_section(section: str, session: Session = Depends(get_session)):
    admin_page = ADMIN_SECTIONS.get(section)
    if admin_page is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Admin section not found"
        )

    try:
        records = _load_section_records(section, session)

        choices = {}
        if section in ("products", "menu-items"):
            choices["category_id"] = [
                (str(category.id), category.name) for category in category_service.get_all(session)
            ]
        if section == "menu-items":
            choices["product_id"] = [
                (str(product.id), product.title) for product in product_service.get_all(session)
            ]

        return render_admin_section(admin_page, records, choices)

    except Exception as e:
        logger.error(f"Error rendering admin section {section}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load admin page"
        )
