"""
Application Constants
Defines constant values used throughout the application.

This module contains:
- Product category taxonomy
- Product source origins
- Weight units and sensor identifiers
- Expiry status labels
"""

# Product Category Taxonomy
CATEGORY_DAIRY = "Dairy"
CATEGORY_MEAT = "Meat"
CATEGORY_SEAFOOD = "Seafood"
CATEGORY_PRODUCE = "Produce"
CATEGORY_BAKERY = "Bakery"
CATEGORY_FROZEN = "Frozen"
CATEGORY_BEVERAGES = "Beverages"
CATEGORY_SNACKS = "Snacks"
CATEGORY_PANTRY = "Pantry"  # Dry goods: pasta, rice, canned food
CATEGORY_CONDIMENTS = "Condiments"
CATEGORY_HOUSEHOLD = "Household"
CATEGORY_PERSONAL_CARE = "Personal Care"
CATEGORY_OTHER = "Other"  # Fallback for anything unmatched

VALID_CATEGORIES = [
    CATEGORY_DAIRY,
    CATEGORY_MEAT,
    CATEGORY_SEAFOOD,
    CATEGORY_PRODUCE,
    CATEGORY_BAKERY,
    CATEGORY_FROZEN,
    CATEGORY_BEVERAGES,
    CATEGORY_SNACKS,
    CATEGORY_PANTRY,
    CATEGORY_CONDIMENTS,
    CATEGORY_HOUSEHOLD,
    CATEGORY_PERSONAL_CARE,
    CATEGORY_OTHER,
]

DEFAULT_CATEGORY = CATEGORY_OTHER
DEFAULT_EXPIRY_DAYS = 30  # Shelf life for categories without a table entry

# Product Source Origins
SOURCE_LOCAL = "local"  # Registered manually or already cached
SOURCE_EXTERNAL = "external"  # Resolved through Open Food Facts

# Barcode format (EAN-8 up to EAN-13)
BARCODE_PATTERN = r"^\d{8,13}$"

# Weight Readings
DEFAULT_WEIGHT_UNIT = "g"
SIMULATOR_SENSOR_ID = "ESP32_SIMULATOR"  # Sensor id used for simulated scale readings
DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100

# Expiry Status
EXPIRY_STATUS_EXPIRED = "expired"
EXPIRY_STATUS_EXPIRING_SOON = "expiring_soon"
EXPIRY_STATUS_FRESH = "fresh"

# Devices
DEFAULT_DEVICE_TYPE = "ESP32"
DEVICE_ID_PREFIX = "scale_"

# Notifications
DEFAULT_REMINDER_DAYS = 3
MAX_REMINDER_DAYS = 30
PHONE_NUMBER_PATTERN = r"^\+?[\d\s()-]+$"
