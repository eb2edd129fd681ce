"""
Base Model Class
Provides common fields and functionality for all database models.

All application models should inherit from BaseModel instead of Base directly.
This ensures consistent ID format (UUID) and automatic timestamp tracking.
"""

from sqlalchemy import Column, DateTime, Uuid, func
import uuid

from smart_pantry.db.base import Base


class BaseModel(Base):
    """
    Abstract base model with common fields for all tables.

    Provides:
    - UUID primary key
    - created_at timestamp (automatically set on insert)
    - updated_at timestamp (automatically updated on modification)

    Example:
        class BarcodeProduct(BaseModel):
            __tablename__ = "barcode_products"
            barcode = Column(String(32), unique=True)
            # id, created_at, updated_at are inherited automatically
    """

    # No table is created for BaseModel itself
    __abstract__ = True

    # Native UUID on PostgreSQL, CHAR(32) elsewhere (SQLite in tests)
    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id})>"
