"""
Weight API Endpoints
Scale reading ingestion (user, registered device, simulator) and weight queries.

Readings are accepted for any well-formed barcode, including products that
have not been resolved or registered yet.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from smart_pantry.api.v1.deps import get_current_device, get_current_user
from smart_pantry.core.constants import BARCODE_PATTERN, DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from smart_pantry.db.session import get_db
from smart_pantry.models.device import Device
from smart_pantry.models.user import User
from smart_pantry.schemas.device import DeviceReadingCreate
from smart_pantry.schemas.weight import (
    WeightReadingCreate,
    WeightReadingResponse,
    WeightSimulateRequest,
)
from smart_pantry.services.weight_service import WeightService


router = APIRouter(prefix="/weights", tags=["Weights"])

BarcodePath = Path(..., pattern=BARCODE_PATTERN)


@router.post("/readings", response_model=WeightReadingResponse, status_code=status.HTTP_201_CREATED)
def create_reading(
    data: WeightReadingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Ingest a reading on behalf of the logged-in user."""
    reading = WeightService.record_reading(db, current_user.id, data)
    db.commit()
    db.refresh(reading)
    return reading


@router.post("/device-readings", response_model=WeightReadingResponse, status_code=status.HTTP_201_CREATED)
def create_device_reading(
    data: DeviceReadingCreate,
    db: Session = Depends(get_db),
    device: Device = Depends(get_current_device),
):
    """
    Ingest a reading from a registered scale.

    Authenticated with the X-Device-Id and X-Device-Token headers; the
    reading belongs to the device owner.
    """
    reading = WeightService.record_device_reading(db, device, data)
    db.commit()
    db.refresh(reading)
    return reading


@router.post("/simulate", response_model=WeightReadingResponse, status_code=status.HTTP_201_CREATED)
def simulate_reading(
    data: WeightSimulateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Record a reading as the simulated scale would send it."""
    reading = WeightService.simulate_reading(db, current_user.id, data.barcode, data.weight_value)
    db.commit()
    db.refresh(reading)
    return reading


@router.get("/{barcode}/history", response_model=list[WeightReadingResponse])
def get_history(
    barcode: str = BarcodePath,
    limit: int = Query(DEFAULT_HISTORY_LIMIT, ge=1, le=MAX_HISTORY_LIMIT),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return WeightService.get_history(db, current_user.id, barcode, limit)


@router.get("/{barcode}/current", response_model=WeightReadingResponse)
def get_current(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    reading = WeightService.get_latest(db, current_user.id, barcode)
    if reading is None:
        raise HTTPException(status_code=404, detail="No readings for this barcode")
    return reading
