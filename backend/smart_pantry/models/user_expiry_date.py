"""
User Expiry Date Model
User-specific expiry date for a barcode, independent of the product default.
"""

from sqlalchemy import Column, String, Date, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from smart_pantry.models.base import BaseModel


class UserExpiryDate(BaseModel):
    """
    One row per (user, barcode). Written with upsert semantics whenever the
    user sets or edits the expiry date of a scanned product.
    """
    __tablename__ = "user_expiry_dates"
    __table_args__ = (
        UniqueConstraint("user_id", "barcode", name="uq_user_expiry_dates_user_barcode"),
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    barcode = Column(String(32), nullable=False, index=True)
    expiry_date = Column(Date, nullable=False)

    user = relationship("User", back_populates="expiry_dates")

    def __repr__(self):
        return f"<UserExpiryDate(user_id={self.user_id}, barcode={self.barcode}, expiry={self.expiry_date})>"
