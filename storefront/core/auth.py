"""
JWT authentication utilities for the admin console
"""

from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from typing import Dict, Optional
import secrets

from storefront.core.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password for the ADMIN_PASSWORD_HASH setting"""
    return pwd_context.hash(password)


def create_access_token(
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token for an admin"""
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": email,
        "role": "admin",
        "exp": expire,
        "iat": now,
    }

    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[Dict]:
    """Decode and validate JWT token"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None


def verify_token(token: str) -> Optional[str]:
    """Verify token and return the admin email if valid"""
    payload = decode_access_token(token)
    if payload is None or payload.get("role") != "admin":
        return None

    return payload.get("sub")


def authenticate_admin(email: str, password: str) -> bool:
    """Check credentials against the configured admin account"""
    if not settings.ADMIN_PASSWORD_HASH:
        return False

    email_ok = secrets.compare_digest(email.strip().lower(), settings.ADMIN_EMAIL.lower())
    password_ok = pwd_context.verify(password, settings.ADMIN_PASSWORD_HASH)
    return email_ok and password_ok
