"""
Test configuration for pytest
"""

import pytest
import os
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from passlib.context import CryptContext
from sqlmodel import SQLModel, Session
from typing import Generator

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "test-password"

# Test environment variables
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "false"
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret"
os.environ["ADMIN_EMAIL"] = ADMIN_EMAIL
os.environ["ADMIN_PASSWORD_HASH"] = CryptContext(schemes=["bcrypt"]).hash(ADMIN_PASSWORD)

import storefront.models  # noqa: E402,F401
from storefront.core.database import get_session  # noqa: E402
from storefront.core.dependencies import get_current_admin  # noqa: E402
from storefront.main import app  # noqa: E402


# Create test engine using in-memory SQLite; StaticPool keeps one shared connection
test_engine = create_engine(
    "sqlite:///:memory:",
    echo=False,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a clean database session for each test"""
    # Create all tables
    SQLModel.metadata.create_all(test_engine)

    # Create session
    with Session(test_engine) as session:
        yield session

    # Cleanup
    SQLModel.metadata.drop_all(test_engine)


def _override_session(db: Session):
    def get_test_session():
        yield db
    return get_test_session


@pytest.fixture(scope="function")
def client(db: Session) -> Generator[TestClient, None, None]:
    """Client authenticated as the admin"""
    app.dependency_overrides[get_session] = _override_session(db)
    app.dependency_overrides[get_current_admin] = lambda: ADMIN_EMAIL

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def anonymous_client(db: Session) -> Generator[TestClient, None, None]:
    """Client without the admin override, for exercising real authentication"""
    app.dependency_overrides[get_session] = _override_session(db)

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def category(client: TestClient) -> dict:
    response = client.post("/api/categories", json={"name": "Pastries"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def product(client: TestClient, category: dict) -> dict:
    response = client.post("/api/products", json={
        "title": "Butter Croissant",
        "description": "Classic French croissant with 64 layers",
        "main_image_url": "https://cdn.example.com/croissant.jpg",
        "category_id": category["id"],
    })
    assert response.status_code == 201
    return response.json()
