"""
Expiry Dates API Endpoints
Per-user expiry overrides keyed by barcode.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from smart_pantry.api.v1.deps import get_current_user
from smart_pantry.core.constants import BARCODE_PATTERN
from smart_pantry.db.session import get_db
from smart_pantry.models.user import User
from smart_pantry.schemas.expiry import ExpiryDateSet, ExpiryDateResponse
from smart_pantry.services.expiry_service import ExpiryDateService


router = APIRouter(prefix="/expiry-dates", tags=["Expiry Dates"])

BarcodePath = Path(..., pattern=BARCODE_PATTERN)


@router.get("", response_model=list[ExpiryDateResponse])
def list_expiry_dates(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return ExpiryDateService.list_for_user(db, current_user.id)


@router.get("/{barcode}", response_model=ExpiryDateResponse)
def get_expiry_date(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    entry = ExpiryDateService.get(db, current_user.id, barcode)
    if not entry:
        raise HTTPException(status_code=404, detail="No expiry date set for this barcode")
    return entry


@router.put("/{barcode}", response_model=ExpiryDateResponse)
def set_expiry_date(
    data: ExpiryDateSet,
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Set or replace the caller's expiry date for a barcode."""
    entry = ExpiryDateService.set_expiry_date(db, current_user.id, barcode, data.expiry_date)
    db.commit()
    db.refresh(entry)
    return entry


@router.delete("/{barcode}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expiry_date(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not ExpiryDateService.delete(db, current_user.id, barcode):
        raise HTTPException(status_code=404, detail="No expiry date set for this barcode")
    db.commit()
