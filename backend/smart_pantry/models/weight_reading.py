"""
Weight Reading Model
Stores readings sent by the pantry scale (ESP32 sensor or simulator).

Features:
    - Append-only time series, never updated after insert
    - Several readings per barcode are expected (live sensor stream)
    - The most recent reading by recorded_at is the current weight
    - Optional device telemetry (temperature, battery, signal strength)
"""

from datetime import datetime, timezone

from sqlalchemy import Column, ForeignKey, Numeric, DateTime, String, Integer, Index, Uuid

from smart_pantry.core.constants import DEFAULT_WEIGHT_UNIT
from smart_pantry.models.base import BaseModel


class WeightReading(BaseModel):
    """
    Weight reading for a barcode.

    Example:
        Scale under a jar of coffee reports every few minutes:
        - 10:00  500.00 g  (sensor ESP32_KITCHEN_01, battery 87%)
        - 10:05  482.50 g
        - 10:10  482.50 g
    """

    __tablename__ = "weight_readings"
    __table_args__ = (
        # Most common query: latest readings for a barcode
        Index("ix_weight_readings_barcode_recorded_at", "barcode", "recorded_at"),
    )

    barcode = Column(
        String(32),
        nullable=False,
        index=True,
        comment="Barcode of the product on the scale"
    )

    # Numeric(10, 2) allows values like 12345678.90
    weight_value = Column(
        Numeric(10, 2),
        nullable=False,
        comment="Measured weight"
    )

    unit = Column(
        String(20),
        nullable=False,
        default=DEFAULT_WEIGHT_UNIT,
        comment="Weight unit (g, kg, ml, ...)"
    )

    sensor_id = Column(
        String(100),
        nullable=False,
        comment="Identifier of the sensor that produced the reading"
    )

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owner of the reading"
    )

    recorded_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
        comment="When the weight was measured"
    )

    # Telemetry
    temperature = Column(Numeric(5, 2), nullable=True)
    battery_level = Column(Integer, nullable=True)  # Percent
    signal_strength = Column(Integer, nullable=True)  # RSSI, dBm

    def __repr__(self):
        return (
            f"<WeightReading(barcode={self.barcode}, weight={self.weight_value}{self.unit}, "
            f"recorded_at={self.recorded_at})>"
        )

    @property
    def weight_float(self) -> float:
        """Weight as float for JSON serialisation and arithmetic."""
        if self.weight_value is not None:
            return float(self.weight_value)
        return 0.0
