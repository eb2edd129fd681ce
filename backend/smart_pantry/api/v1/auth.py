"""
Authentication Endpoints
Handles user registration, login, and token refresh.

Endpoints:
- POST /auth/register - Create new user account
- POST /auth/login - Authenticate and get tokens
- POST /auth/refresh - Get new access token using refresh token
- GET /auth/me - Current user profile
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from smart_pantry.api.v1.deps import get_current_user
from smart_pantry.db.session import get_db
from smart_pantry.models.user import User
from smart_pantry.schemas.user import (
    UserCreate,
    LoginRequest,
    Token,
    RefreshTokenRequest,
    UserResponse,
)
from smart_pantry.services import auth_service
from smart_pantry.services.error_logging import error_logger

# Logger for auth events
auth_logger = logging.getLogger("auth")


class LoginFailedError(Exception):
    """Raised-for-logging only: a failed login attempt."""
    pass


router = APIRouter()


def _issue_tokens(user_id: UUID) -> Token:
    return Token(
        access_token=auth_service.create_access_token(user_id),
        refresh_token=auth_service.create_refresh_token(user_id),
        token_type="bearer"
    )


@router.post(
    "/register",
    response_model=Token,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account and return authentication tokens",
    responses={
        400: {
            "description": "Email already registered",
            "content": {
                "application/json": {
                    "example": {"detail": "Email already registered"}
                }
            }
        },
        422: {
            "description": "Validation error (invalid email, short password, etc.)"
        }
    }
)
async def register(
    user_data: UserCreate,
    db: Session = Depends(get_db)
) -> Token:
    """
    Register a new user account.

    Creates a new user with hashed password and returns JWT tokens
    for immediate authentication.

    Errors:
    - 400: Email already exists
    - 422: Invalid input (email format, password too short, etc.)
    """
    if auth_service.get_user_by_email(db, user_data.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    try:
        user = auth_service.create_user(db, user_data)
    except IntegrityError:
        # Concurrent registration with the same email
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    auth_logger.info(f"REGISTER | email={user.email} | user_id={user.id}")
    return _issue_tokens(user.id)


@router.post(
    "/login",
    response_model=Token,
    summary="Login user",
    description="Authenticate user with email and password, return tokens",
    responses={
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {"detail": "Incorrect email or password"}
                }
            }
        }
    }
)
async def login(
    credentials: LoginRequest,
    request: Request,
    db: Session = Depends(get_db)
) -> Token:
    """
    Authenticate user and get JWT tokens.

    Failed logins don't reveal whether the email exists.
    """
    client_ip = request.client.host if request.client else "unknown"

    auth_logger.info(f"LOGIN_ATTEMPT | email={credentials.email} | ip={client_ip}")

    user = auth_service.authenticate_user(db, credentials.email, credentials.password)
    if not user:
        auth_logger.warning(
            f"LOGIN_FAILED | email={credentials.email} | ip={client_ip} | reason=invalid_credentials"
        )
        error_logger.log_error(
            LoginFailedError(f"Failed login attempt for email: {credentials.email}"),
            request=request,
            severity="warning",
            context={
                "email": credentials.email,
                "reason": "invalid_credentials",
                "client_ip": client_ip,
            },
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"}
        )

    auth_logger.info(f"LOGIN_SUCCESS | email={credentials.email} | user_id={user.id} | ip={client_ip}")
    return _issue_tokens(user.id)


@router.post(
    "/refresh",
    response_model=Token,
    summary="Refresh access token",
    description="Get new access token using refresh token",
    responses={
        401: {
            "description": "Invalid or expired refresh token",
            "content": {
                "application/json": {
                    "example": {"detail": "Invalid or expired refresh token"}
                }
            }
        }
    }
)
async def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db)
) -> Token:
    """
    Exchange a valid refresh token for a new token pair.

    Access tokens are rejected here, and the user must still exist.
    """
    payload = auth_service.verify_token(refresh_data.refresh_token, expected_type="refresh")
    user = None
    if payload is not None:
        try:
            user = auth_service.get_user_by_id(db, UUID(payload.sub))
        except ValueError:
            user = None

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
            headers={"WWW-Authenticate": "Bearer"}
        )

    return _issue_tokens(user.id)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: User = Depends(get_current_user)):
    return current_user
