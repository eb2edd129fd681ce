"""
API Dependencies
Common dependencies used across API endpoints.

This module provides:
- User authentication (JWT validation)
- Scale authentication (X-Device-Id / X-Device-Token headers)
- The external product directory used by barcode resolution

Dependencies are injected into FastAPI endpoints using Depends().
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from uuid import UUID

from smart_pantry.db.session import get_db
from smart_pantry.integrations.openfoodfacts import OpenFoodFactsClient
from smart_pantry.models.device import Device
from smart_pantry.models.user import User
from smart_pantry.services.auth_service import verify_token, get_user_by_id
from smart_pantry.services.device_service import DeviceService
from smart_pantry.services.product_resolver import ProductSource


# Extracts "Authorization: Bearer <token>" from request headers
security = HTTPBearer()


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Extract and validate current user from JWT token.

    Raises:
        HTTPException 401: If token is invalid or expired
        HTTPException 404: If user not found in database

    Usage in endpoint:
        @router.get("/me")
        def me(current_user: User = Depends(get_current_user)):
            return {"email": current_user.email}
    """
    payload = verify_token(credentials.credentials, expected_type="access")
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        user_id = UUID(payload.sub)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    user = get_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    # Picked up by the error handler middleware
    request.state.user = user
    return user


def get_product_directory() -> ProductSource:
    """External product directory (overridden in tests)."""
    return OpenFoodFactsClient()


def get_current_device(
    request: Request,
    x_device_id: Optional[str] = Header(None),
    x_device_token: Optional[str] = Header(None),
    db: Session = Depends(get_db)
) -> Device:
    """
    Authenticate a scale from its X-Device-Id and X-Device-Token headers.

    Updates the device's last_seen (committed with the request's changes).

    Raises:
        HTTPException 401: Missing headers, unknown or disabled device, bad token
    """
    if not x_device_id or not x_device_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Device credentials required"
        )

    device = DeviceService.authenticate(db, x_device_id, x_device_token)
    if device is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid device credentials"
        )

    request.state.device = device
    return device
