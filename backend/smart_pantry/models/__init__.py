"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from smart_pantry.db.base import Base
from smart_pantry.models.base import BaseModel
from smart_pantry.models.user import User
from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.models.user_expiry_date import UserExpiryDate
from smart_pantry.models.weight_reading import WeightReading
from smart_pantry.models.pantry_item import PantryItem
from smart_pantry.models.device import Device
from smart_pantry.models.notification_preference import NotificationPreference
from smart_pantry.models.error_log import ErrorLog

__all__ = [
    "Base",
    "BaseModel",
    "User",
    "BarcodeProduct",
    "UserExpiryDate",
    "WeightReading",
    "PantryItem",
    "Device",
    "NotificationPreference",
    "ErrorLog",
]
