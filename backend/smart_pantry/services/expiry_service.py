"""
Expiry Date Service
Per-user expiry overrides for scanned barcodes.

One row per (user, barcode); setting a date twice updates the same row.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from smart_pantry.models.user_expiry_date import UserExpiryDate


class ExpiryDateService:

    @staticmethod
    def list_for_user(db: Session, user_id: UUID) -> list[UserExpiryDate]:
        """All overrides of a user, newest first."""
        return db.query(UserExpiryDate).filter(
            UserExpiryDate.user_id == user_id
        ).order_by(
            UserExpiryDate.created_at.desc()
        ).all()

    @staticmethod
    def get(db: Session, user_id: UUID, barcode: str) -> Optional[UserExpiryDate]:
        return db.query(UserExpiryDate).filter(
            UserExpiryDate.user_id == user_id,
            UserExpiryDate.barcode == barcode.strip()
        ).first()

    @staticmethod
    def set_expiry_date(
        db: Session,
        user_id: UUID,
        barcode: str,
        expiry_date: date
    ) -> UserExpiryDate:
        """Upsert the override for (user, barcode)."""
        entry = ExpiryDateService.get(db, user_id, barcode)
        if entry is None:
            entry = UserExpiryDate(
                user_id=user_id,
                barcode=barcode.strip(),
                expiry_date=expiry_date,
            )
            db.add(entry)
        else:
            entry.expiry_date = expiry_date

        db.flush()
        return entry

    @staticmethod
    def delete(db: Session, user_id: UUID, barcode: str) -> bool:
        entry = ExpiryDateService.get(db, user_id, barcode)
        if entry is None:
            return False

        db.delete(entry)
        db.flush()
        return True
