"""
Database configuration and session management
"""

from sqlmodel import SQLModel, Session, create_engine
import structlog

from storefront.core.config import get_settings

logger = structlog.get_logger(__name__)
settings = get_settings()

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG and settings.ENVIRONMENT == "development",
    connect_args=connect_args,
)


def init_db():
    """Initialize database tables"""
    # Register every table on the metadata before create_all
    import storefront.models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created")


def get_session():
    """Dependency to get database session"""
    with Session(engine) as session:
        yield session
