"""
Local Product Cache

The application's own record store of resolved barcodes (barcode_products
table). Queried before any external call and written back after every
successful Open Food Facts resolution.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.schemas.product import BarcodeProductData

logger = logging.getLogger(__name__)


class LocalProductCache:
    """
    Barcode -> product store backed by the barcode_products table.

    lookup() is a pure read. write_back() is an upsert keyed on barcode, so
    repeated resolutions of the same barcode converge to one row.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, barcode: str) -> Optional[BarcodeProduct]:
        """ORM row for an exact barcode match."""
        return self.db.query(BarcodeProduct).filter(
            BarcodeProduct.barcode == barcode.strip()
        ).first()

    async def lookup(self, barcode: str) -> Optional[BarcodeProductData]:
        """
        Look up a barcode in the cache.

        A miss is a normal outcome (None). A storage error is logged and
        reported as a miss as well.
        """
        try:
            row = self.get(barcode)
        except SQLAlchemyError as e:
            logger.error(f"[Cache] Lookup failed for {barcode}: {e}")
            self.db.rollback()
            return None

        if row is None:
            return None
        return BarcodeProductData.model_validate(row)

    def write_back(self, product: BarcodeProductData) -> bool:
        """
        Insert or update the cached row for product.barcode.

        Returns:
            True if committed, False if the write failed (already rolled back)
        """
        values = product.model_dump()
        try:
            row = self.get(product.barcode)
            if row is None:
                self.db.add(BarcodeProduct(**values))
                action = "inserted"
            else:
                for field, value in values.items():
                    setattr(row, field, value)
                action = "updated"
            self.db.commit()
            logger.info(f"[Cache] {action} {product.barcode}")
            return True
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"[Cache] Write-back failed for {product.barcode}: {e}")
            return False
