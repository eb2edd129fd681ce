"""
User Model
Represents users of the pantry application.

Each user has:
- Unique email for authentication
- Encrypted password (never stored in plain text)
- A display name

Pantry items, expiry overrides and weight readings are all owned by a user.
"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from smart_pantry.models.base import BaseModel


class User(BaseModel):
    """
    User model for authentication.

    Fields:
        id (UUID): Primary key, inherited from BaseModel
        email (str): Unique email address for login
        password_hash (str): Bcrypt hashed password
        full_name (str): User's display name

    Relationships:
        pantry_items: One-to-many with the user's pantry stock
        expiry_dates: One-to-many with per-barcode expiry overrides
        devices: One-to-many with registered scales
        notification_preference: One-to-one with reminder settings
    """

    __tablename__ = "users"

    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address (unique, used for login)"
    )

    # Never store plain text passwords
    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    full_name = Column(
        String(255),
        nullable=True,
        comment="User display name"
    )

    pantry_items = relationship(
        "PantryItem",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    expiry_dates = relationship(
        "UserExpiryDate",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    devices = relationship(
        "Device",
        back_populates="user",
        cascade="all, delete-orphan"
    )
    notification_preference = relationship(
        "NotificationPreference",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
