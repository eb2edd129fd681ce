"""
Open Food Facts API HTTP Client

This module provides an async HTTP client for the Open Food Facts API,
the external product directory consulted when a barcode is not in the
local cache.

Open Food Facts is a free, open, collaborative database of food products.
No API key is required.

API Documentation: https://wiki.openfoodfacts.org/API
"""

import logging
import re
from typing import Any, Dict, Optional

import httpx

from smart_pantry.core.config import settings
from smart_pantry.core.constants import DEFAULT_WEIGHT_UNIT, SOURCE_EXTERNAL
from smart_pantry.schemas.product import BarcodeProductData

logger = logging.getLogger(__name__)


LOOKUP_FIELDS = ",".join([
    "product_name",
    "product_name_en",
    "generic_name",
    "brands",
    "categories",
    "quantity",
    "image_url",
    "nutriments",
])

# Open Food Facts nutriment key -> nutrition_info key (values per 100g)
NUTRIMENT_FIELDS = {
    "energy-kcal_100g": "energy_kcal",
    "proteins_100g": "proteins",
    "carbohydrates_100g": "carbohydrates",
    "sugars_100g": "sugars",
    "fat_100g": "fat",
    "saturated-fat_100g": "saturated_fat",
    "fiber_100g": "fiber",
    "salt_100g": "salt",
}

QUANTITY_UNIT_RE = re.compile(r"\d\s*(kg|g|mg|ml|cl|dl|l)\b", re.IGNORECASE)


def _to_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_nutriments(nutriments: Dict[str, Any]) -> Optional[Dict[str, Optional[float]]]:
    """Extract the per-100g macros we keep; None when nothing is available."""
    result = {
        target: _to_float(nutriments.get(source))
        for source, target in NUTRIMENT_FIELDS.items()
    }
    if all(value is None for value in result.values()):
        return None
    return result


def parse_unit(quantity: Optional[str]) -> str:
    """
    Unit from the packaging quantity text.

    "500 g" -> "g", "1,5 L" -> "l", "6 x 330ml" -> "ml"; default "g".
    """
    if quantity:
        match = QUANTITY_UNIT_RE.search(quantity)
        if match:
            return match.group(1).lower()
    return DEFAULT_WEIGHT_UNIT


def parse_product_response(data: Dict[str, Any], barcode: str) -> Optional[BarcodeProductData]:
    """
    Parse an Open Food Facts product response.

    The payload is treated as not-found unless status == 1 and a product
    object with a usable name is present. category carries the raw
    comma-separated categories text; mapping to the taxonomy is up to the
    caller.
    """
    if data.get("status") != 1 or not isinstance(data.get("product"), dict):
        return None

    product = data["product"]
    name = (
        product.get("product_name")
        or product.get("product_name_en")
        or product.get("generic_name")
    )
    if not name or not str(name).strip():
        return None

    brands = product.get("brands") or ""
    brand = brands.split(",")[0].strip() or None

    nutrition_info = None
    if isinstance(product.get("nutriments"), dict):
        nutrition_info = parse_nutriments(product["nutriments"])

    return BarcodeProductData(
        barcode=barcode,
        name=str(name).strip(),
        brand=brand,
        category=product.get("categories") or None,
        unit=parse_unit(product.get("quantity")),
        nutrition_info=nutrition_info,
        image_url=product.get("image_url") or None,
        source_origin=SOURCE_EXTERNAL,
    )


class OpenFoodFactsClient:
    """
    HTTP client for Open Food Facts API integration.

    Every failure mode (non-200 status, unknown product, bad JSON, network
    error, timeout) comes back as None; callers cannot tell an unknown
    barcode from an unreachable server.

    Methods:
        lookup: Look up a product by barcode
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.OPENFOODFACTS_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.OPENFOODFACTS_TIMEOUT
        self.user_agent = user_agent or settings.HTTP_USER_AGENT
        # Injected in tests (httpx.MockTransport)
        self.transport = transport

    async def lookup(self, barcode: str) -> Optional[BarcodeProductData]:
        """
        Look up a product by barcode in Open Food Facts.

        Args:
            barcode: The barcode to look up (EAN-13, UPC-A, etc.)

        Returns:
            BarcodeProductData with source_origin=external, or None
        """
        url = f"{self.base_url}/api/v2/product/{barcode}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    url,
                    params={"fields": LOOKUP_FIELDS},
                    headers={"User-Agent": self.user_agent}
                )

            if response.status_code != 200:
                logger.info(f"[OpenFoodFacts] {barcode}: HTTP {response.status_code}")
                return None

            data = response.json()
            if not isinstance(data, dict):
                return None
            return parse_product_response(data, barcode)

        except httpx.ConnectError as e:
            logger.warning(f"[OpenFoodFacts] Cannot reach {self.base_url}: {e}")
            return None
        except httpx.TimeoutException:
            logger.warning(f"[OpenFoodFacts] Timeout looking up {barcode}")
            return None
        except httpx.HTTPError as e:
            logger.warning(f"[OpenFoodFacts] HTTP error looking up {barcode}: {e}")
            return None
        except ValueError as e:
            # response.json() on a non-JSON body
            logger.warning(f"[OpenFoodFacts] Invalid payload for {barcode}: {e}")
            return None
