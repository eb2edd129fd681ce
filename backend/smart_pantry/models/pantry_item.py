"""
Pantry Item Model
Manages the user's grocery stock.

Features:
- Tracks products with quantity, unit, expiry date
- Optional link to a barcode in the product cache
- Consumption tracking
"""

from sqlalchemy import Column, String, ForeignKey, Boolean, Float, DateTime, Date, Text, Uuid
from sqlalchemy.orm import relationship

from smart_pantry.models.base import BaseModel


class PantryItem(BaseModel):
    """
    Pantry Item Model

    Represents a grocery product in the household pantry.
    Items can be added manually or from a resolved barcode.
    """
    __tablename__ = "pantry_items"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Product info
    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=True)
    quantity = Column(Float, default=1.0, nullable=False)
    unit = Column(String(50), nullable=True)  # pcs, kg, g, l, ml

    # Expiry tracking
    expiry_date = Column(Date, nullable=True, index=True)

    barcode = Column(String(32), nullable=True, index=True)
    image_url = Column(Text, nullable=True)
    notes = Column(String(500), nullable=True)

    # Consumption tracking
    is_consumed = Column(Boolean, default=False, nullable=False)
    consumed_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="pantry_items")

    def __repr__(self):
        return f"<PantryItem(id={self.id}, name='{self.name}', qty={self.quantity})>"
