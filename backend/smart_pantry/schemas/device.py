"""
Device Schemas
Pydantic models for scale registration and device-authenticated readings.
"""

from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime

from smart_pantry.core.constants import DEFAULT_DEVICE_TYPE
from smart_pantry.schemas.weight import WeightReadingCreate


class DeviceCreate(BaseModel):
    """
    Schema for registering a scale.

    device_id is generated when omitted.
    """
    device_name: str = Field(..., min_length=1, max_length=255)
    device_type: str = Field(DEFAULT_DEVICE_TYPE, min_length=1, max_length=50)
    device_id: Optional[str] = Field(None, min_length=3, max_length=100, pattern=r"^[A-Za-z0-9_.-]+$")


class DeviceUpdate(BaseModel):
    """Schema for renaming or enabling/disabling a scale"""
    device_name: Optional[str] = Field(None, min_length=1, max_length=255)
    is_active: Optional[bool] = None


class DeviceResponse(BaseModel):
    """Schema for device response (never includes the token)"""
    id: UUID
    user_id: UUID
    device_id: str
    device_name: str
    device_type: str
    is_active: bool
    last_seen: Optional[datetime] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class DeviceCredentials(DeviceResponse):
    """Registration / token regeneration response, the only place the token appears"""
    device_token: str


class DeviceReadingCreate(WeightReadingCreate):
    """
    Reading pushed by an authenticated scale.

    sensor_id defaults to the device_id of the sending device.
    """
    sensor_id: Optional[str] = Field(None, min_length=1, max_length=100)
