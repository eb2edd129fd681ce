"""
User Pydantic Schemas
Request and response models for authentication endpoints.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class UserCreate(BaseModel):
    """
    Schema for user registration request.

    Example:
        {
            "email": "user@example.com",
            "password": "SecurePass123!",
            "full_name": "Jamie Doe"
        }
    """
    email: EmailStr = Field(..., description="Valid email address for authentication")
    password: str = Field(..., min_length=8, description="Password (minimum 8 characters)")
    full_name: Optional[str] = Field(None, max_length=255, description="Display name")


class LoginRequest(BaseModel):
    """Schema for user login request."""
    email: EmailStr
    password: str


class Token(BaseModel):
    """
    Schema for JWT token response.

    Returned by /register, /login, and /refresh endpoints.
    """
    access_token: str = Field(..., description="JWT access token for API authentication")
    refresh_token: str = Field(..., description="JWT refresh token for obtaining new access tokens")
    token_type: str = Field(default="bearer", description="Token type (always 'bearer')")


class RefreshTokenRequest(BaseModel):
    """Schema for refresh token request."""
    refresh_token: str = Field(..., description="Valid refresh token")


class TokenPayload(BaseModel):
    """Decoded JWT payload."""
    sub: str  # User ID
    exp: int
    type: str  # access | refresh


class UserResponse(BaseModel):
    """Schema for user data in responses (never includes the password hash)."""
    id: UUID
    email: EmailStr
    full_name: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
