"""
Pydantic Schemas Module
Contains request/response schemas for API validation and serialization.
"""

from smart_pantry.schemas.user import (
    UserCreate,
    LoginRequest,
    Token,
    RefreshTokenRequest,
    TokenPayload,
    UserResponse,
)
from smart_pantry.schemas.product import (
    BarcodeProductData,
    BarcodeProductCreate,
    BarcodeProductResponse,
    ResolutionStatus,
    ResolutionResult,
    ProductOverviewResponse,
)

__all__ = [
    # User schemas
    "UserCreate",
    "LoginRequest",
    "Token",
    "RefreshTokenRequest",
    "TokenPayload",
    "UserResponse",
    # Product schemas
    "BarcodeProductData",
    "BarcodeProductCreate",
    "BarcodeProductResponse",
    "ResolutionStatus",
    "ResolutionResult",
    "ProductOverviewResponse",
]
