"""
Admin authentication endpoints
"""

from fastapi import APIRouter, HTTPException, status
import structlog

from storefront.core.auth import authenticate_admin, create_access_token
from storefront.core.config import get_settings
from storefront.schemas.token import AdminLogin, TokenResponse

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(credentials: AdminLogin):
    """Exchange the admin email and password for a bearer token"""
    settings = get_settings()

    if not authenticate_admin(credentials.email, credentials.password):
        logger.warning(f"Failed admin login attempt for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(credentials.email.strip().lower())
    logger.info(f"Admin logged in: {credentials.email}")

    return TokenResponse(
        access_token=access_token,
        expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
