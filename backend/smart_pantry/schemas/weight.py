"""
Weight Reading Schemas
Pydantic models for scale readings (real sensor or simulator).
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from uuid import UUID
from datetime import datetime

from smart_pantry.core.constants import BARCODE_PATTERN, DEFAULT_WEIGHT_UNIT


class WeightReadingCreate(BaseModel):
    """
    Schema for a reading pushed by a scale.

    Example:
        {
            "barcode": "8001505005707",
            "weight_value": 482.5,
            "sensor_id": "ESP32_KITCHEN_01",
            "temperature": 21.4,
            "battery_level": 87,
            "signal_strength": -61
        }
    """
    barcode: str = Field(..., pattern=BARCODE_PATTERN)
    weight_value: float = Field(..., gt=0, description="Measured weight")
    sensor_id: str = Field(..., min_length=1, max_length=100)
    unit: str = Field(DEFAULT_WEIGHT_UNIT, max_length=20)
    recorded_at: Optional[datetime] = Field(None, description="Measurement time (defaults to now)")
    temperature: Optional[float] = None
    battery_level: Optional[int] = Field(None, ge=0, le=100)
    signal_strength: Optional[int] = None

    @field_validator("barcode", mode="before")
    @classmethod
    def strip_barcode(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class WeightSimulateRequest(BaseModel):
    """Schema for a simulated scale reading"""
    barcode: str = Field(..., pattern=BARCODE_PATTERN)
    weight_value: float = Field(..., gt=0)

    @field_validator("barcode", mode="before")
    @classmethod
    def strip_barcode(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class WeightReadingResponse(BaseModel):
    """Schema for weight reading response"""
    id: UUID
    barcode: str
    weight_value: float
    unit: str
    sensor_id: str
    user_id: UUID
    recorded_at: datetime
    temperature: Optional[float] = None
    battery_level: Optional[int] = None
    signal_strength: Optional[int] = None

    model_config = {"from_attributes": True}
