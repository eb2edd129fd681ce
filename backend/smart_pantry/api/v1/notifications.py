"""
Notifications API Endpoints
Reminder preferences and the expiring-items digest.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from smart_pantry.api.v1.deps import get_current_user
from smart_pantry.db.session import get_db
from smart_pantry.models.user import User
from smart_pantry.schemas.notification import (
    ExpiryDigestResponse,
    NotificationPreferenceResponse,
    NotificationPreferenceUpdate,
)
from smart_pantry.services.notification_service import NotificationService


router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("/preferences", response_model=NotificationPreferenceResponse)
def get_preferences(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Saved preferences, or the defaults when none were saved."""
    prefs = NotificationService.get_preferences(db, current_user.id)
    return prefs or NotificationService.default_preferences(current_user.id)


@router.put("/preferences", response_model=NotificationPreferenceResponse)
def save_preferences(
    data: NotificationPreferenceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    prefs = NotificationService.save_preferences(db, current_user.id, data)
    db.commit()
    db.refresh(prefs)
    return prefs


@router.get("/digest", response_model=ExpiryDigestResponse)
def get_digest(
    include_expired: bool = Query(False, description="Also list items already past their date"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Pantry items and expiry dates falling within the reminder window."""
    return NotificationService.build_digest(db, current_user.id, include_expired=include_expired)
