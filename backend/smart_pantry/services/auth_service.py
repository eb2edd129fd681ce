"""
Authentication Service
Handles JWT token creation, verification, and user authentication.

This service provides:
- JWT token generation (access + refresh tokens)
- Token verification and decoding
- User authentication (login)
- User registration with password hashing
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt
from sqlalchemy.orm import Session

from smart_pantry.core.config import settings
from smart_pantry.core.security import hash_password, verify_password
from smart_pantry.models.user import User
from smart_pantry.schemas.user import UserCreate, TokenPayload


# HMAC with SHA-256
ALGORITHM = "HS256"


# ============================================================================
# JWT Token Functions
# ============================================================================

def _create_token(user_id: UUID, token_type: str, lifetime_seconds: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(seconds=lifetime_seconds)
    payload = {
        "sub": str(user_id),
        "exp": expire,
        "type": token_type,
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def create_access_token(user_id: UUID) -> str:
    """
    Create a short-lived JWT access token for a user.

    Example:
        token = create_access_token(user.id)
        # Use in header: Authorization: Bearer {token}
    """
    return _create_token(user_id, "access", settings.JWT_EXPIRATION)


def create_refresh_token(user_id: UUID) -> str:
    """Create a long-lived JWT refresh token for a user."""
    return _create_token(user_id, "refresh", settings.REFRESH_TOKEN_EXPIRATION)


def verify_token(token: str, expected_type: str = "access") -> Optional[TokenPayload]:
    """
    Verify and decode a JWT token.

    Validates token signature, expiration, and type.

    Returns:
        TokenPayload if token is valid, None if invalid
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        # Bad signature, expired, malformed, etc.
        return None

    user_id = payload.get("sub")
    token_type = payload.get("type")
    exp = payload.get("exp")

    if not user_id or not token_type or not exp:
        return None
    if token_type != expected_type:
        return None

    return TokenPayload(sub=user_id, exp=exp, type=token_type)


# ============================================================================
# User Functions
# ============================================================================

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Authenticate a user by email and password.

    Returns:
        User object if credentials are valid, None otherwise
    """
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(db: Session, user_data: UserCreate) -> User:
    """
    Create a new user account with a bcrypt-hashed password.

    Raises:
        IntegrityError: If email already exists in database
    """
    user = User(
        email=user_data.email,
        password_hash=hash_password(user_data.password),
        full_name=user_data.full_name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()
