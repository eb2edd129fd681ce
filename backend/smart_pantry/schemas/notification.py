"""
Notification Schemas
Reminder preferences and the expiring-items digest.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from datetime import date, datetime

from smart_pantry.core.constants import (
    DEFAULT_REMINDER_DAYS,
    MAX_REMINDER_DAYS,
    PHONE_NUMBER_PATTERN,
)


class NotificationPreferenceUpdate(BaseModel):
    """
    Schema for saving reminder preferences.

    A phone number is required when phone notifications are enabled.
    """
    email_notifications: bool = True
    phone_notifications: bool = False
    phone_number: Optional[str] = Field(None, max_length=32, pattern=PHONE_NUMBER_PATTERN)
    expiry_reminder_days: int = Field(DEFAULT_REMINDER_DAYS, ge=1, le=MAX_REMINDER_DAYS)

    @field_validator("phone_number", mode="before")
    @classmethod
    def strip_phone_number(cls, value):
        if isinstance(value, str):
            return value.strip() or None
        return value

    @model_validator(mode="after")
    def phone_required_for_phone_notifications(self):
        if self.phone_notifications and not self.phone_number:
            raise ValueError("phone_number is required when phone notifications are enabled")
        return self


class NotificationPreferenceResponse(BaseModel):
    """Schema for preferences (defaults when the user never saved any)"""
    email_notifications: bool
    phone_notifications: bool
    phone_number: Optional[str] = None
    expiry_reminder_days: int

    model_config = {"from_attributes": True}


class DigestEntry(BaseModel):
    """One expiring (or expired) thing to remind the user about"""
    source: str = Field(..., description="pantry_item or expiry_date")
    name: str
    barcode: Optional[str] = None
    expiry_date: date
    days_left: int
    status: str
    message: str


class ExpiryDigestResponse(BaseModel):
    """Schema for the per-user expiring-items digest"""
    generated_at: datetime
    reminder_days: int
    expired: int
    expiring: int
    entries: list[DigestEntry]
