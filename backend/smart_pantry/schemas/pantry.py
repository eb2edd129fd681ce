"""
Pantry Schemas
Pydantic models for pantry API request/response validation.
"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional
from uuid import UUID
from datetime import datetime, date

from smart_pantry.core.constants import BARCODE_PATTERN
from smart_pantry.core.expiry import get_expiry_status


class PantryItemCreate(BaseModel):
    """Schema for creating a pantry item"""
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    category: Optional[str] = Field(None, max_length=255, description="Free text, mapped to the taxonomy")
    quantity: float = Field(1.0, gt=0, description="Quantity")
    unit: Optional[str] = Field(None, max_length=50, description="Unit (pcs, kg, g, l, ml)")
    expiry_date: Optional[date] = Field(None, description="Expiry date (derived from the barcode when omitted)")
    barcode: Optional[str] = Field(None, pattern=BARCODE_PATTERN, description="Barcode")
    image_url: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500, description="Notes")


class PantryItemUpdate(BaseModel):
    """Schema for updating a pantry item"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    category: Optional[str] = Field(None, max_length=255)
    quantity: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = Field(None, max_length=50)
    expiry_date: Optional[date] = None
    barcode: Optional[str] = Field(None, pattern=BARCODE_PATTERN)
    image_url: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=500)


class PantryItemResponse(BaseModel):
    """Schema for pantry item response"""
    id: UUID
    user_id: UUID
    name: str
    category: Optional[str] = None
    quantity: float
    unit: Optional[str] = None
    expiry_date: Optional[date] = None
    barcode: Optional[str] = None
    image_url: Optional[str] = None
    notes: Optional[str] = None
    is_consumed: bool
    consumed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def expiry_status(self) -> Optional[str]:
        return get_expiry_status(self.expiry_date)


class PantryStatsResponse(BaseModel):
    """Schema for pantry stats"""
    total: int
    expiring_soon: int
    expired: int
    by_category: dict[str, int] = {}


class PantryItemListResponse(BaseModel):
    """Schema for list of pantry items"""
    items: list[PantryItemResponse]
    total: int
    stats: PantryStatsResponse


class ConsumeItemRequest(BaseModel):
    """Schema for consuming an item (partial or total)"""
    quantity: Optional[float] = Field(None, gt=0, description="Quantity to consume (None = consume all)")
