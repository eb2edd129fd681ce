"""
Weight Service
Ingests scale readings and answers current-weight / history queries.

Readings are append-only. The current weight of a barcode is simply its
most recent reading by recorded_at.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from smart_pantry.core.constants import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_WEIGHT_UNIT,
    SIMULATOR_SENSOR_ID,
)
from smart_pantry.models.barcode_product import BarcodeProduct
from smart_pantry.models.device import Device
from smart_pantry.models.weight_reading import WeightReading
from smart_pantry.schemas.device import DeviceReadingCreate
from smart_pantry.schemas.weight import WeightReadingCreate

logger = logging.getLogger(__name__)


class WeightService:

    @staticmethod
    def product_exists(db: Session, barcode: str) -> bool:
        return db.query(BarcodeProduct.id).filter(
            BarcodeProduct.barcode == barcode.strip()
        ).first() is not None

    @staticmethod
    def record_reading(
        db: Session,
        user_id: UUID,
        data: WeightReadingCreate
    ) -> WeightReading:
        """
        Store a reading.

        The barcode does not need to be in the product cache: a scale can
        report a jar before anyone has scanned it. The product overview only
        shows the weight once the product itself is known.
        """
        barcode = data.barcode.strip()
        if not WeightService.product_exists(db, barcode):
            logger.info(f"[Weight] Reading for {barcode} stored before the product was added")

        reading = WeightReading(
            barcode=barcode,
            weight_value=data.weight_value,
            unit=data.unit or DEFAULT_WEIGHT_UNIT,
            sensor_id=data.sensor_id,
            user_id=user_id,
            recorded_at=data.recorded_at or datetime.now(timezone.utc),
            temperature=data.temperature,
            battery_level=data.battery_level,
            signal_strength=data.signal_strength,
        )
        db.add(reading)
        db.flush()

        logger.info(f"[Weight] {data.weight_value}{reading.unit} for {barcode} from {data.sensor_id}")
        return reading

    @staticmethod
    def record_device_reading(
        db: Session,
        device: Device,
        data: DeviceReadingCreate
    ) -> WeightReading:
        """Store a reading sent by a registered scale, owned by the scale's user."""
        reading_data = WeightReadingCreate(
            **data.model_dump(exclude={"sensor_id"}),
            sensor_id=data.sensor_id or device.device_id,
        )
        return WeightService.record_reading(db, device.user_id, reading_data)

    @staticmethod
    def simulate_reading(
        db: Session,
        user_id: UUID,
        barcode: str,
        weight_value: float
    ) -> WeightReading:
        """Record a reading as if it came from the simulated scale."""
        return WeightService.record_reading(db, user_id, WeightReadingCreate(
            barcode=barcode,
            weight_value=weight_value,
            sensor_id=SIMULATOR_SENSOR_ID,
            unit=DEFAULT_WEIGHT_UNIT,
        ))

    @staticmethod
    def get_history(
        db: Session,
        user_id: UUID,
        barcode: str,
        limit: int = DEFAULT_HISTORY_LIMIT
    ) -> list[WeightReading]:
        """Latest readings for a barcode, newest first."""
        return db.query(WeightReading).filter(
            WeightReading.user_id == user_id,
            WeightReading.barcode == barcode.strip()
        ).order_by(
            WeightReading.recorded_at.desc()
        ).limit(limit).all()

    @staticmethod
    def get_latest(db: Session, user_id: UUID, barcode: str) -> Optional[WeightReading]:
        history = WeightService.get_history(db, user_id, barcode, limit=1)
        return history[0] if history else None
