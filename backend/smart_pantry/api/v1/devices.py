"""
Devices API Endpoints
Registration and management of the scales that push weight readings.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from smart_pantry.api.v1.deps import get_current_user
from smart_pantry.db.session import get_db
from smart_pantry.models.device import Device
from smart_pantry.models.user import User
from smart_pantry.schemas.device import (
    DeviceCreate,
    DeviceCredentials,
    DeviceResponse,
    DeviceUpdate,
)
from smart_pantry.services.device_service import DeviceService


router = APIRouter(prefix="/devices", tags=["Devices"])


def _get_owned_device(db: Session, device_pk: UUID, user: User) -> Device:
    device = DeviceService.get_by_id(db, device_pk, user.id)
    if not device:
        raise HTTPException(status_code=404, detail="Device not found")
    return device


def _credentials(device: Device, token: str) -> DeviceCredentials:
    return DeviceCredentials(
        **DeviceResponse.model_validate(device).model_dump(),
        device_token=token,
    )


@router.get("", response_model=list[DeviceResponse])
def list_devices(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return DeviceService.list_for_user(db, current_user.id)


@router.post("", response_model=DeviceCredentials, status_code=status.HTTP_201_CREATED)
def register_device(
    data: DeviceCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Register a scale. The response carries the device token, which is not
    retrievable afterwards.
    """
    if data.device_id and DeviceService.device_id_taken(db, data.device_id):
        raise HTTPException(status_code=409, detail="Device id already registered")

    device, token = DeviceService.register_device(db, current_user.id, data)
    db.commit()
    db.refresh(device)
    return _credentials(device, token)


@router.put("/{device_pk}", response_model=DeviceResponse)
def update_device(
    device_pk: UUID,
    data: DeviceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Rename a scale or enable/disable it."""
    device = _get_owned_device(db, device_pk, current_user)
    DeviceService.update_device(db, device, data)
    db.commit()
    db.refresh(device)
    return device


@router.post("/{device_pk}/token", response_model=DeviceCredentials)
def regenerate_token(
    device_pk: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    device = _get_owned_device(db, device_pk, current_user)
    token = DeviceService.regenerate_token(db, device)
    db.commit()
    db.refresh(device)
    return _credentials(device, token)


@router.delete("/{device_pk}", status_code=status.HTTP_204_NO_CONTENT)
def delete_device(
    device_pk: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    device = _get_owned_device(db, device_pk, current_user)
    DeviceService.delete_device(db, device)
    db.commit()
