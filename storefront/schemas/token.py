"""
Token schemas for admin login
"""

from pydantic import BaseModel, EmailStr, Field


class AdminLogin(BaseModel):
    """Admin login schema"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)


class TokenResponse(BaseModel):
    """Token response model"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int
