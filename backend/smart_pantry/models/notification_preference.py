"""
Notification Preference Model
Per-user reminder settings used to build the expiring-items digest.
"""

from sqlalchemy import Column, String, Boolean, Integer, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from smart_pantry.core.constants import DEFAULT_REMINDER_DAYS
from smart_pantry.models.base import BaseModel


class NotificationPreference(BaseModel):
    """One row per user, created on first save (defaults apply until then)."""

    __tablename__ = "notification_preferences"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True
    )

    email_notifications = Column(Boolean, nullable=False, default=True)
    phone_notifications = Column(Boolean, nullable=False, default=False)
    phone_number = Column(String(32), nullable=True)

    expiry_reminder_days = Column(
        Integer,
        nullable=False,
        default=DEFAULT_REMINDER_DAYS,
        comment="Items expiring within this many days are reported"
    )

    user = relationship("User", back_populates="notification_preference")

    def __repr__(self):
        return f"<NotificationPreference(user_id={self.user_id}, days={self.expiry_reminder_days})>"
