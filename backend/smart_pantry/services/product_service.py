"""
Product Service
Manual product registration and the combined product overview
(cached product + live weight + the user's expiry override).
"""

from typing import Optional, Dict, Any
from uuid import UUID

from sqlalchemy.orm import Session

from smart_pantry.core.constants import DEFAULT_WEIGHT_UNIT, SOURCE_LOCAL
from smart_pantry.core.expiry import get_expiry_status
from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.schemas.product import BarcodeProductCreate, BarcodeProductData
from smart_pantry.services.category_heuristics import map_category, estimate_expiry_days
from smart_pantry.services.expiry_service import ExpiryDateService
from smart_pantry.services.weight_service import WeightService


class ProductService:

    @staticmethod
    def get_product(db: Session, barcode: str) -> Optional[BarcodeProduct]:
        return db.query(BarcodeProduct).filter(
            BarcodeProduct.barcode == barcode.strip()
        ).first()

    @staticmethod
    def create_product(db: Session, data: BarcodeProductCreate) -> BarcodeProduct:
        """
        Register a product by hand.

        The category text is mapped to the taxonomy and the shelf life
        defaults to the category estimate.
        """
        category = map_category(data.category)
        product = BarcodeProduct(
            barcode=data.barcode,
            name=data.name,
            brand=data.brand,
            category=category,
            default_expiry_days=data.default_expiry_days or estimate_expiry_days(category),
            unit=data.unit or DEFAULT_WEIGHT_UNIT,
            nutrition_info=data.nutrition_info,
            image_url=data.image_url,
            source_origin=SOURCE_LOCAL,
        )
        db.add(product)
        db.flush()
        return product

    @staticmethod
    def get_overview(db: Session, user_id: UUID, barcode: str) -> Optional[Dict[str, Any]]:
        """
        Product with its current weight and the user's expiry date.

        Current weight is the latest reading; without readings it is 0 in
        the product unit.
        """
        product = ProductService.get_product(db, barcode)
        if product is None:
            return None

        latest = WeightService.get_latest(db, user_id, barcode)
        override = ExpiryDateService.get(db, user_id, barcode)
        user_expiry_date = override.expiry_date if override else None

        if latest is not None:
            current_weight = latest.weight_float
            weight_unit = latest.unit
            last_update = latest.recorded_at
        else:
            current_weight = 0.0
            weight_unit = product.unit or DEFAULT_WEIGHT_UNIT
            last_update = product.updated_at

        return {
            "product": BarcodeProductData.model_validate(product),
            "current_weight": current_weight,
            "weight_unit": weight_unit,
            "last_weight_update": last_update,
            "user_expiry_date": user_expiry_date,
            "expiry_status": get_expiry_status(user_expiry_date),
        }
