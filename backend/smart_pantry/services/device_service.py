"""
Device Service
Registration and authentication of scales that push weight readings.

Tokens are random secrets generated here; only their bcrypt hash is stored,
so a lost token can be regenerated but never read back.
"""

import logging
import secrets
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from smart_pantry.core.constants import DEVICE_ID_PREFIX
from smart_pantry.core.security import hash_password, verify_password
from smart_pantry.models.device import Device
from smart_pantry.schemas.device import DeviceCreate, DeviceUpdate

logger = logging.getLogger(__name__)


def generate_device_id() -> str:
    return f"{DEVICE_ID_PREFIX}{secrets.token_hex(6)}"


def generate_device_token() -> str:
    return secrets.token_urlsafe(32)


class DeviceService:

    @staticmethod
    def list_for_user(db: Session, user_id: UUID) -> list[Device]:
        return db.query(Device).filter(
            Device.user_id == user_id
        ).order_by(
            Device.created_at.desc()
        ).all()

    @staticmethod
    def get_by_id(db: Session, device_pk: UUID, user_id: UUID) -> Optional[Device]:
        return db.query(Device).filter(
            Device.id == device_pk,
            Device.user_id == user_id
        ).first()

    @staticmethod
    def device_id_taken(db: Session, device_id: str) -> bool:
        return db.query(Device.id).filter(Device.device_id == device_id).first() is not None

    @staticmethod
    def register_device(db: Session, user_id: UUID, data: DeviceCreate) -> tuple[Device, str]:
        """
        Register a scale for a user.

        Returns:
            (device, plain token). The caller must check device_id_taken
            first when a device_id is supplied.
        """
        token = generate_device_token()
        device = Device(
            user_id=user_id,
            device_id=data.device_id or generate_device_id(),
            device_name=data.device_name.strip(),
            device_type=data.device_type,
            token_hash=hash_password(token),
            is_active=True,
        )
        db.add(device)
        db.flush()

        logger.info(f"[Device] Registered {device.device_id} for user {user_id}")
        return device, token

    @staticmethod
    def update_device(db: Session, device: Device, data: DeviceUpdate) -> Device:
        update_data = data.model_dump(exclude_unset=True)
        if "device_name" in update_data and update_data["device_name"]:
            device.device_name = update_data["device_name"].strip()
        if update_data.get("is_active") is not None:
            device.is_active = update_data["is_active"]

        db.flush()
        return device

    @staticmethod
    def regenerate_token(db: Session, device: Device) -> str:
        """Replace the token; the previous one stops working immediately."""
        token = generate_device_token()
        device.token_hash = hash_password(token)
        db.flush()

        logger.info(f"[Device] Token regenerated for {device.device_id}")
        return token

    @staticmethod
    def delete_device(db: Session, device: Device) -> None:
        db.delete(device)
        db.flush()

    @staticmethod
    def authenticate(db: Session, device_id: str, token: str) -> Optional[Device]:
        """
        Check device credentials and record the contact in last_seen.

        Returns:
            The device, or None when it is unknown, disabled or the token
            does not match.
        """
        device = db.query(Device).filter(Device.device_id == device_id.strip()).first()
        if device is None or not device.is_active:
            logger.warning(f"[Device] Rejected unknown or inactive device {device_id}")
            return None

        if not verify_password(token, device.token_hash):
            logger.warning(f"[Device] Rejected bad token for {device_id}")
            return None

        device.last_seen = datetime.now(timezone.utc)
        db.flush()
        return device
