"""
External Service Integrations

This package contains HTTP clients for external services:
- Open Food Facts (public barcode -> product directory)
"""

from smart_pantry.integrations.openfoodfacts import OpenFoodFactsClient

__all__ = [
    "OpenFoodFactsClient",
]
