"""
Pantry Service - Business Logic Layer
Handles all business logic for the user's pantry stock.

Key responsibilities:
- CRUD operations for pantry items
- Expiry date derivation from the barcode product cache
- Consumption tracking (total/partial)
- Expiry and category statistics
"""

from datetime import datetime, date, timedelta, timezone
from typing import Optional, Dict, Any
from uuid import UUID

from sqlalchemy import and_, func
from sqlalchemy.orm import Session

from smart_pantry.core.config import settings
from smart_pantry.core.constants import DEFAULT_CATEGORY
from smart_pantry.core.expiry import compute_expiry_date
from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.models.pantry_item import PantryItem
from smart_pantry.schemas.pantry import PantryItemCreate, PantryItemUpdate
from smart_pantry.services.category_heuristics import map_category, estimate_expiry_days


class PantryService:

    @staticmethod
    def get_items(
        db: Session,
        user_id: UUID,
        search: Optional[str] = None,
        category: Optional[str] = None,
        expiring: bool = False,
        expired: bool = False,
        consumed: bool = False,
    ) -> list[PantryItem]:
        """Get pantry items with optional filters."""
        query = db.query(PantryItem).filter(
            PantryItem.user_id == user_id,
            PantryItem.is_consumed == consumed
        )

        if search:
            query = query.filter(PantryItem.name.ilike(f"%{search}%"))

        if category:
            query = query.filter(PantryItem.category == category)

        today = date.today()

        if expiring:
            soon = today + timedelta(days=settings.EXPIRING_SOON_DAYS)
            query = query.filter(
                and_(
                    PantryItem.expiry_date != None,
                    PantryItem.expiry_date >= today,
                    PantryItem.expiry_date <= soon
                )
            )

        if expired:
            query = query.filter(
                and_(
                    PantryItem.expiry_date != None,
                    PantryItem.expiry_date < today
                )
            )

        # Soonest expiry first, undated items last
        query = query.order_by(
            PantryItem.expiry_date.is_(None),
            PantryItem.expiry_date.asc(),
            PantryItem.name.asc()
        )

        return query.all()

    @staticmethod
    def get_item_by_id(db: Session, item_id: UUID, user_id: UUID) -> Optional[PantryItem]:
        return db.query(PantryItem).filter(
            and_(
                PantryItem.id == item_id,
                PantryItem.user_id == user_id
            )
        ).first()

    @staticmethod
    def _default_expiry(db: Session, barcode: str) -> Optional[date]:
        """Expiry date from the cached product's shelf life, counted from today."""
        product = db.query(BarcodeProduct).filter(BarcodeProduct.barcode == barcode).first()
        if product is None:
            return None
        days = product.default_expiry_days or estimate_expiry_days(product.category)
        return compute_expiry_date(days)

    @staticmethod
    def create_item(db: Session, user_id: UUID, data: PantryItemCreate) -> PantryItem:
        """
        Create a pantry item.

        When a barcode is given without an expiry date, the date is derived
        from the cached product. Category and image fall back to the product.
        """
        product = None
        if data.barcode:
            product = db.query(BarcodeProduct).filter(
                BarcodeProduct.barcode == data.barcode
            ).first()

        category = data.category or (product.category if product else None)
        expiry_date = data.expiry_date
        if expiry_date is None and data.barcode:
            expiry_date = PantryService._default_expiry(db, data.barcode)

        item = PantryItem(
            user_id=user_id,
            name=data.name,
            category=map_category(category) if category else None,
            quantity=data.quantity,
            unit=data.unit or (product.unit if product else None),
            expiry_date=expiry_date,
            barcode=data.barcode,
            image_url=data.image_url or (product.image_url if product else None),
            notes=data.notes,
        )
        db.add(item)
        db.flush()
        return item

    @staticmethod
    def update_item(
        db: Session,
        item_id: UUID,
        user_id: UUID,
        data: PantryItemUpdate
    ) -> Optional[PantryItem]:
        item = PantryService.get_item_by_id(db, item_id, user_id)
        if not item:
            return None

        update_data = data.model_dump(exclude_unset=True)
        if update_data.get("category"):
            update_data["category"] = map_category(update_data["category"])
        for field, value in update_data.items():
            setattr(item, field, value)

        db.flush()
        return item

    @staticmethod
    def delete_item(db: Session, item_id: UUID, user_id: UUID) -> bool:
        item = PantryService.get_item_by_id(db, item_id, user_id)
        if not item:
            return False

        db.delete(item)
        db.flush()
        return True

    @staticmethod
    def consume_item(
        db: Session,
        item_id: UUID,
        user_id: UUID,
        quantity: Optional[float] = None
    ) -> Optional[PantryItem]:
        """
        Consume an item (total or partial).
        - If quantity is None or >= item.quantity: mark as fully consumed
        - If quantity < item.quantity: reduce quantity
        """
        item = PantryService.get_item_by_id(db, item_id, user_id)
        if not item:
            return None

        if quantity is None or quantity >= item.quantity:
            item.is_consumed = True
            item.consumed_at = datetime.now(timezone.utc)
        else:
            item.quantity -= quantity

        db.flush()
        return item

    @staticmethod
    def get_stats(db: Session, user_id: UUID) -> Dict[str, Any]:
        """Counts of active items: total, expiring soon, expired, per category."""
        today = date.today()
        soon = today + timedelta(days=settings.EXPIRING_SOON_DAYS)

        base_query = db.query(PantryItem).filter(
            and_(
                PantryItem.user_id == user_id,
                PantryItem.is_consumed == False
            )
        )

        total = base_query.count()

        expiring_soon = base_query.filter(
            and_(
                PantryItem.expiry_date != None,
                PantryItem.expiry_date >= today,
                PantryItem.expiry_date <= soon
            )
        ).count()

        expired = base_query.filter(
            and_(
                PantryItem.expiry_date != None,
                PantryItem.expiry_date < today
            )
        ).count()

        rows = db.query(PantryItem.category, func.count(PantryItem.id)).filter(
            PantryItem.user_id == user_id,
            PantryItem.is_consumed == False
        ).group_by(PantryItem.category).all()

        by_category: Dict[str, int] = {}
        for category, count in rows:
            key = category or DEFAULT_CATEGORY
            by_category[key] = by_category.get(key, 0) + count

        return {
            "total": total,
            "expiring_soon": expiring_soon,
            "expired": expired,
            "by_category": by_category,
        }
