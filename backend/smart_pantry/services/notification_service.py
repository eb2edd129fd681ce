"""
Notification Service
Reminder preferences and the expiring-items digest.

The digest lists the user's pantry items and expiry overrides whose date
falls between today and today + expiry_reminder_days. Delivery (email,
SMS) is left to whatever consumes the digest.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from smart_pantry.core.constants import DEFAULT_REMINDER_DAYS
from smart_pantry.core.expiry import get_expiry_status
from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.models.notification_preference import NotificationPreference
from smart_pantry.models.pantry_item import PantryItem
from smart_pantry.models.user_expiry_date import UserExpiryDate
from smart_pantry.schemas.notification import (
    DigestEntry,
    ExpiryDigestResponse,
    NotificationPreferenceUpdate,
)

SOURCE_PANTRY_ITEM = "pantry_item"
SOURCE_EXPIRY_DATE = "expiry_date"


def expiry_message(name: str, days_left: int) -> str:
    if days_left < 0:
        return f"{name} expired {-days_left} day(s) ago"
    if days_left == 0:
        return f"{name} expires today"
    if days_left == 1:
        return f"{name} expires tomorrow"
    return f"{name} expires in {days_left} days"


class NotificationService:

    @staticmethod
    def get_preferences(db: Session, user_id: UUID) -> Optional[NotificationPreference]:
        return db.query(NotificationPreference).filter(
            NotificationPreference.user_id == user_id
        ).first()

    @staticmethod
    def default_preferences(user_id: UUID) -> NotificationPreference:
        """Unsaved preferences with column defaults, for users who never saved any."""
        return NotificationPreference(
            user_id=user_id,
            email_notifications=True,
            phone_notifications=False,
            phone_number=None,
            expiry_reminder_days=DEFAULT_REMINDER_DAYS,
        )

    @staticmethod
    def save_preferences(
        db: Session,
        user_id: UUID,
        data: NotificationPreferenceUpdate
    ) -> NotificationPreference:
        """Upsert the user's preferences."""
        prefs = NotificationService.get_preferences(db, user_id)
        if prefs is None:
            prefs = NotificationPreference(user_id=user_id)
            db.add(prefs)

        prefs.email_notifications = data.email_notifications
        prefs.phone_notifications = data.phone_notifications
        prefs.phone_number = data.phone_number
        prefs.expiry_reminder_days = data.expiry_reminder_days

        db.flush()
        return prefs

    @staticmethod
    def build_digest(
        db: Session,
        user_id: UUID,
        include_expired: bool = False,
        today: Optional[date] = None
    ) -> ExpiryDigestResponse:
        """
        Collect everything expiring within the user's reminder window.

        Entries are sorted by expiry date, soonest first. Consumed pantry
        items are skipped.
        """
        today = today or date.today()
        prefs = NotificationService.get_preferences(db, user_id)
        reminder_days = prefs.expiry_reminder_days if prefs else DEFAULT_REMINDER_DAYS
        until = today + timedelta(days=reminder_days)

        items_query = db.query(PantryItem).filter(
            PantryItem.user_id == user_id,
            PantryItem.is_consumed == False,
            PantryItem.expiry_date.isnot(None),
            PantryItem.expiry_date <= until,
        )
        overrides_query = db.query(UserExpiryDate).filter(
            UserExpiryDate.user_id == user_id,
            UserExpiryDate.expiry_date <= until,
        )
        if not include_expired:
            items_query = items_query.filter(PantryItem.expiry_date >= today)
            overrides_query = overrides_query.filter(UserExpiryDate.expiry_date >= today)

        entries = []
        for item in items_query.all():
            entries.append(NotificationService._entry(
                SOURCE_PANTRY_ITEM, item.name, item.barcode, item.expiry_date, today, reminder_days
            ))

        overrides = overrides_query.all()
        names = NotificationService._product_names(db, [o.barcode for o in overrides])
        for override in overrides:
            name = names.get(override.barcode, override.barcode)
            entries.append(NotificationService._entry(
                SOURCE_EXPIRY_DATE, name, override.barcode, override.expiry_date, today, reminder_days
            ))

        entries.sort(key=lambda e: (e.expiry_date, e.name))
        expired = sum(1 for e in entries if e.days_left < 0)

        return ExpiryDigestResponse(
            generated_at=datetime.now(timezone.utc),
            reminder_days=reminder_days,
            expired=expired,
            expiring=len(entries) - expired,
            entries=entries,
        )

    @staticmethod
    def _product_names(db: Session, barcodes: list[str]) -> dict[str, str]:
        if not barcodes:
            return {}
        rows = db.query(BarcodeProduct.barcode, BarcodeProduct.name).filter(
            BarcodeProduct.barcode.in_(barcodes)
        ).all()
        return {barcode: name for barcode, name in rows}

    @staticmethod
    def _entry(
        source: str,
        name: str,
        barcode: Optional[str],
        expiry_date: date,
        today: date,
        reminder_days: int
    ) -> DigestEntry:
        days_left = (expiry_date - today).days
        return DigestEntry(
            source=source,
            name=name,
            barcode=barcode,
            expiry_date=expiry_date,
            days_left=days_left,
            status=get_expiry_status(expiry_date, today=today, soon_days=reminder_days),
            message=expiry_message(name, days_left),
        )
