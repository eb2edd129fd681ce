"""
Expiry Date Helpers
Shared date arithmetic for pantry items, expiry overrides and product overviews.
"""

from datetime import date, timedelta
from typing import Optional

from smart_pantry.core.config import settings
from smart_pantry.core.constants import (
    EXPIRY_STATUS_EXPIRED,
    EXPIRY_STATUS_EXPIRING_SOON,
    EXPIRY_STATUS_FRESH,
)


def get_expiry_status(
    expiry_date: Optional[date],
    today: Optional[date] = None,
    soon_days: Optional[int] = None,
) -> Optional[str]:
    """
    Classify an expiry date.

    - expired: the date is before today
    - expiring_soon: today up to today + soon_days (inclusive)
    - fresh: anything later

    Returns None when there is no expiry date.
    """
    if expiry_date is None:
        return None

    today = today or date.today()
    if soon_days is None:
        soon_days = settings.EXPIRING_SOON_DAYS

    if expiry_date < today:
        return EXPIRY_STATUS_EXPIRED
    if (expiry_date - today).days <= soon_days:
        return EXPIRY_STATUS_EXPIRING_SOON
    return EXPIRY_STATUS_FRESH


def compute_expiry_date(shelf_life_days: int, start: Optional[date] = None) -> date:
    """Expiry date for a product bought on `start` (default today)."""
    return (start or date.today()) + timedelta(days=shelf_life_days)
