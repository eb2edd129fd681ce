"""
Smart Pantry API
Household pantry backend: barcode resolution, expiry tracking and scale readings.
"""

__version__ = "1.0.0"
