"""
Product Schemas
Pydantic models for barcode products and barcode resolution results.
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict
from uuid import UUID
from datetime import datetime, date

from smart_pantry.core.constants import (
    BARCODE_PATTERN,
    DEFAULT_WEIGHT_UNIT,
    SOURCE_LOCAL,
)


class BarcodeProductData(BaseModel):
    """
    Product record exchanged between the cache, the Open Food Facts client
    and the resolver. Mirrors the BarcodeProduct table without DB metadata.
    """
    barcode: str
    name: str
    brand: Optional[str] = None
    category: Optional[str] = None
    default_expiry_days: Optional[int] = None
    unit: Optional[str] = DEFAULT_WEIGHT_UNIT
    nutrition_info: Optional[Dict[str, Optional[float]]] = None
    image_url: Optional[str] = None
    source_origin: str = SOURCE_LOCAL

    model_config = {"from_attributes": True}


class BarcodeProductCreate(BaseModel):
    """Schema for manual product registration"""
    barcode: str = Field(..., pattern=BARCODE_PATTERN, description="EAN/UPC barcode (8-13 digits)")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    brand: Optional[str] = Field(None, max_length=255)
    category: Optional[str] = Field(None, max_length=255, description="Free text, mapped to the taxonomy")
    default_expiry_days: Optional[int] = Field(None, gt=0, description="Shelf life in days")
    unit: Optional[str] = Field(DEFAULT_WEIGHT_UNIT, max_length=20)
    nutrition_info: Optional[Dict[str, Optional[float]]] = None
    image_url: Optional[str] = None

    @field_validator("barcode", mode="before")
    @classmethod
    def strip_barcode(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class BarcodeProductResponse(BarcodeProductData):
    """Schema for cached product response"""
    id: UUID
    created_at: datetime
    updated_at: datetime


class ResolutionStatus(str, Enum):
    """Terminal states of a barcode resolution."""
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"


class ResolutionResult(BaseModel):
    """
    Outcome of resolving a barcode.

    found/status are the only things callers need to branch on; source tells
    whether the local cache or Open Food Facts answered, and cached whether
    an external hit was written back.
    """
    barcode: str
    status: ResolutionStatus
    found: bool
    source: Optional[str] = None  # local | external
    product: Optional[BarcodeProductData] = None
    cached: bool = False
    message: Optional[str] = None

    @classmethod
    def resolved(cls, product: BarcodeProductData, source: str, cached: bool = False) -> "ResolutionResult":
        return cls(
            barcode=product.barcode,
            status=ResolutionStatus.RESOLVED,
            found=True,
            source=source,
            product=product,
            cached=cached,
        )

    @classmethod
    def not_found(cls, barcode: str) -> "ResolutionResult":
        return cls(
            barcode=barcode,
            status=ResolutionStatus.NOT_FOUND,
            found=False,
            message=f"No product found for barcode: {barcode}",
        )


class ProductOverviewResponse(BaseModel):
    """Cached product together with its live weight and the caller's expiry date"""
    product: BarcodeProductData
    current_weight: float
    weight_unit: str
    last_weight_update: Optional[datetime] = None
    user_expiry_date: Optional[date] = None
    expiry_status: Optional[str] = None
