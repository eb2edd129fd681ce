"""
Device Model
Registered scales allowed to push weight readings on behalf of a user.

Each device authenticates with its public device_id plus a secret token.
Only the bcrypt hash of the token is stored; the plain token is shown
once, when the device is registered or the token is regenerated.
"""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from smart_pantry.core.constants import DEFAULT_DEVICE_TYPE
from smart_pantry.models.base import BaseModel


class Device(BaseModel):
    """
    Scale registered by a user.

    Example:
        device_id="scale_k7m2q9xw", device_name="Kitchen shelf", device_type="ESP32"
        Sends readings with headers X-Device-Id / X-Device-Token.
    """

    __tablename__ = "devices"

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner of the device and of its readings"
    )

    device_id = Column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
        comment="Public device identifier, sent as X-Device-Id"
    )

    device_name = Column(String(255), nullable=False)
    device_type = Column(String(50), nullable=False, default=DEFAULT_DEVICE_TYPE)

    token_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hash of the device token"
    )

    is_active = Column(Boolean, nullable=False, default=True)

    last_seen = Column(
        DateTime(timezone=True),
        nullable=True,
        comment="Last successful authentication"
    )

    user = relationship("User", back_populates="devices")

    def __repr__(self):
        return f"<Device(device_id={self.device_id}, active={self.is_active})>"
