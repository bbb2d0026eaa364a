"""
Vasse Bakery - Main Application Entry Point
Storefront website and content management API
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import structlog

from storefront.core.config import get_settings
from storefront.core.database import init_db
from storefront.core.errors import register_exception_handlers
from storefront.api import (
    auth, categories, products, menu_items, faqs,
    image_messages, misc_content, upload, reviews, pages
)

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Initializing {settings.APP_NAME} backend")
    if settings.ENVIRONMENT == "development":
        init_db()
    else:
        # Tables are created by Alembic migrations outside development
        logger.info("Database managed by Alembic migrations")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME} backend")


# Create FastAPI application
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Bakery storefront with a content management API for products, menu and page content",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure middleware stack
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
api = settings.API_PREFIX
app.include_router(auth.router, prefix=f"{api}/auth", tags=["auth"])
app.include_router(categories.router, prefix=f"{api}/categories", tags=["categories"])
app.include_router(products.router, prefix=f"{api}/products", tags=["products"])
app.include_router(menu_items.router, prefix=f"{api}/menu-items", tags=["menu-items"])
app.include_router(faqs.router, prefix=f"{api}/faqs", tags=["faqs"])
app.include_router(image_messages.router, prefix=f"{api}/image-messages", tags=["image-messages"])
app.include_router(misc_content.router, prefix=f"{api}/misc-content", tags=["misc-content"])
app.include_router(upload.router, prefix=f"{api}/upload", tags=["upload"])
app.include_router(reviews.router, prefix=api, tags=["reviews"])
app.include_router(pages.router, include_in_schema=False)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "storefront-api"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_level="info",
    )
