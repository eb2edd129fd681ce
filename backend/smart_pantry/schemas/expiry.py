"""
Expiry Date Schemas
Pydantic models for per-user barcode expiry overrides.
"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional
from uuid import UUID
from datetime import datetime, date

from smart_pantry.core.expiry import get_expiry_status


class ExpiryDateSet(BaseModel):
    """Schema for setting (upserting) an expiry date"""
    expiry_date: date = Field(..., description="Expiry date (YYYY-MM-DD)")


class ExpiryDateResponse(BaseModel):
    """Schema for expiry date response"""
    id: UUID
    user_id: UUID
    barcode: str
    expiry_date: date
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def status(self) -> Optional[str]:
        return get_expiry_status(self.expiry_date)
