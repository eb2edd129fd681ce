"""
Barcode Product Model
Local cache of product data keyed by barcode.

Rows are created on first successful resolution (manual registration or an
Open Food Facts hit) and upserted whenever Open Food Facts resolves the
barcode again. The resolution flow never deletes rows.
"""

from sqlalchemy import Column, String, Text, Integer, JSON

from smart_pantry.core.constants import DEFAULT_WEIGHT_UNIT, SOURCE_LOCAL
from smart_pantry.models.base import BaseModel


class BarcodeProduct(BaseModel):
    """
    Barcode Product Model

    One row per barcode (globally unique). nutrition_info holds per-100g
    macros: energy_kcal, proteins, carbohydrates, sugars, fat,
    saturated_fat, fiber, salt.
    """
    __tablename__ = "barcode_products"

    barcode = Column(String(32), nullable=False, unique=True, index=True)

    # Basic info
    name = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=True)
    category = Column(String(50), nullable=True)  # One of VALID_CATEGORIES
    default_expiry_days = Column(Integer, nullable=True)
    unit = Column(String(20), nullable=True, default=DEFAULT_WEIGHT_UNIT)

    nutrition_info = Column(JSON, nullable=True)
    image_url = Column(Text, nullable=True)

    # local | external
    source_origin = Column(String(20), nullable=False, default=SOURCE_LOCAL)

    def __repr__(self):
        return f"<BarcodeProduct(barcode={self.barcode}, name='{self.name}')>"
